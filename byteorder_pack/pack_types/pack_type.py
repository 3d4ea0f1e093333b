# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar, Union, final

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.serializer import Serializer
from byteorder_pack.types import Buffer, SupportsRead, SupportsWrite

T = TypeVar('T')

Sink = Union[Serializer, SupportsWrite]
Source = Union[Deserializer, SupportsRead]


class PackType(ABC, Generic[T]):
    """ This class is used to model a type with a fixed binary layout and how it will be packed and unpacked.

    An instance describes the layout completely: the width is known as soon as the instance exists and no value is
    ever inspected to decide how to lay it out. Scalar pack types map to a single primitive encoding, compound pack
    types (arrays, tuples, records) are built out of other pack types and delegate to them in declaration order.

    Every operation that touches bytes takes a `ByteOrder`, the `*_be`/`*_le` methods are shortcuts that go through the
    same code path. Instances are immutable and can be shared freely.
    """

    # XXX: subclasses must extend this if they need any properties
    __slots__ = ('_width',)

    # XXX: subclasses must initialize this property on __init__
    _width: int

    @property
    def width(self) -> int:
        """Amount of bytes that any value of this type occupies."""
        return self._width

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a SerializationTypeError/SerializationValueError if the value can't be packed with this type.

        Compound types check every element, so a value that passes this check can be packed without errors coming from
        the value itself.
        """
        # XXX: subclasses must implement PackType._check_value, not PackType.check_value
        self._check_value(value)

    @final
    def pack(self, serializer: Serializer, value: T, order: ByteOrder, /) -> None:
        """ Pack a value instance according to this layout.

        The whole value is checked before anything is written, so an invalid value never causes a partial write. Errors
        from the serializer itself propagate as they are raised, bytes written before that are not rolled back.
        """
        self._check_value(value)
        self._pack(serializer, value, order)

    @final
    def unpack(self, deserializer: Deserializer, order: ByteOrder, /) -> T:
        """ Unpack a new value instance according to this layout, consuming exactly `width` bytes on success.
        """
        return self._unpack(deserializer, order)

    # entry points, they accept either a serializer/deserializer or a binary channel that will be wrapped for the
    # duration of the call

    @final
    def pack_to(self, sink: Sink, value: T, order: ByteOrder, /) -> None:
        """Pack a value into a serializer or a writable binary channel."""
        self.pack(Serializer.from_sink(sink), value, order)

    @final
    def pack_to_be(self, sink: Sink, value: T, /) -> None:
        """Pack a value into a serializer or a writable binary channel, in big-endian order."""
        self.pack_to(sink, value, ByteOrder.BIG)

    @final
    def pack_to_le(self, sink: Sink, value: T, /) -> None:
        """Pack a value into a serializer or a writable binary channel, in little-endian order."""
        self.pack_to(sink, value, ByteOrder.LITTLE)

    @final
    def unpack_from(self, source: Source, order: ByteOrder, /) -> T:
        """Unpack a value from a deserializer or a readable binary channel."""
        return self.unpack(Deserializer.from_source(source), order)

    @final
    def unpack_from_be(self, source: Source, /) -> T:
        """Unpack a value from a deserializer or a readable binary channel, in big-endian order."""
        return self.unpack_from(source, ByteOrder.BIG)

    @final
    def unpack_from_le(self, source: Source, /) -> T:
        """Unpack a value from a deserializer or a readable binary channel, in little-endian order."""
        return self.unpack_from(source, ByteOrder.LITTLE)

    @final
    def to_bytes(self, value: T, order: ByteOrder, /) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` and avoid using the serialization system.
        """
        serializer = Serializer.build_bytes_serializer()
        self.pack(serializer, value, order)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: Buffer, order: ByteOrder, /) -> T:
        """ Shortcut to quickly parse a value T from `bytes` and avoid using the serialization system.

        The data must have exactly `width` bytes, trailing data raises a BadDataError.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.unpack(deserializer, order)
        deserializer.finalize()
        return value

    @final
    def pack_multiple_to(self, sink: Sink, values: Sequence[T], order: ByteOrder, /) -> None:
        """ Pack all the values one after the other, without any length prefix.

        The reader has to know how many values to expect, see `unpack_multiple_from`.
        """
        for value in values:
            self._check_value(value)
        self._pack_multiple(Serializer.from_sink(sink), values, order)

    @final
    def unpack_multiple_from(self, source: Source, count: int, order: ByteOrder, /) -> list[T]:
        """ Unpack `count` values that were packed one after the other.

        Stops at the first value that fails, in which case no list is returned.
        """
        if count < 0:
            raise ValueError('count cannot be negative')
        return self._unpack_multiple(Deserializer.from_source(source), count, order)

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        """ Inner implementation of `PackType.check_value`.

        Compound types should use `PackType._check_value` on the inner type(s).
        """
        raise NotImplementedError

    @abstractmethod
    def _pack(self, serializer: Serializer, value: T, order: ByteOrder, /) -> None:
        """ Inner implementation of `pack`, you can assume that the given value has been checked.

        Compound types should pass `PackType._pack` of the inner types as an `Encoder`, since the whole value was
        already checked.
        """
        raise NotImplementedError

    @abstractmethod
    def _unpack(self, deserializer: Deserializer, order: ByteOrder, /) -> T:
        """ Inner implementation of `unpack`, it is expected that unpacking always produces valid values.
        """
        raise NotImplementedError

    # these can be specialized when the type can pack/unpack a run of values more efficiently than one at a time

    def _pack_multiple(self, serializer: Serializer, values: Sequence[T], order: ByteOrder, /) -> None:
        from byteorder_pack.compound_encoding.array import encode_array
        encode_array(serializer, values, self._pack, order, length=len(values))

    def _unpack_multiple(self, deserializer: Deserializer, count: int, order: ByteOrder, /) -> list[T]:
        from byteorder_pack.compound_encoding.array import decode_array
        return decode_array(deserializer, self._unpack, order, length=count)
