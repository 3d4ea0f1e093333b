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

from collections.abc import Sequence
from typing import ClassVar

from typing_extensions import override

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.encoding.int import decode_int, decode_int_run, encode_int, encode_int_run
from byteorder_pack.exceptions import SerializationTypeError, SerializationValueError
from byteorder_pack.pack_types.pack_type import PackType
from byteorder_pack.serializer import Serializer


class _SizedIntPackType(PackType[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.
    """

    __slots__ = ()

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]
    _name: ClassVar[str]

    def __init__(self) -> None:
        self._width = self._byte_size

    def __repr__(self) -> str:
        return self._name

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    def _check_value(self, value: int, /) -> None:
        # bool is an int subclass, but True/False are not accepted as numbers
        if not isinstance(value, int) or isinstance(value, bool):
            raise SerializationTypeError(f'{self._name}: expected int, got {type(value).__name__}')
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        if value > self._upper_bound_value():
            raise SerializationValueError(f'{self._name}: {value} is above upper bound')
        if value < self._lower_bound_value():
            raise SerializationValueError(f'{self._name}: {value} is below lower bound')

    @override
    def _pack(self, serializer: Serializer, value: int, order: ByteOrder, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed, order=order)

    @override
    def _unpack(self, deserializer: Deserializer, order: ByteOrder, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed, order=order)


class _ByteIntPackType(_SizedIntPackType):
    """ Single byte ints, byte order does not apply so runs of them are packed/unpacked with a single call.
    """

    __slots__ = ()
    _byte_size = 1

    @override
    def _pack_multiple(self, serializer: Serializer, values: Sequence[int], order: ByteOrder, /) -> None:
        encode_int_run(serializer, list(values), signed=self._signed)

    @override
    def _unpack_multiple(self, deserializer: Deserializer, count: int, order: ByteOrder, /) -> list[int]:
        return decode_int_run(deserializer, count, signed=self._signed)


class Int8PackType(_ByteIntPackType):
    __slots__ = ()
    _signed = True
    _name = 'I8'


class Int16PackType(_SizedIntPackType):
    __slots__ = ()
    _signed = True
    _byte_size = 2  # 2-bytes -> 16-bits
    _name = 'I16'


class Int32PackType(_SizedIntPackType):
    __slots__ = ()
    _signed = True
    _byte_size = 4  # 4-bytes -> 32-bits
    _name = 'I32'


class Int64PackType(_SizedIntPackType):
    __slots__ = ()
    _signed = True
    _byte_size = 8  # 8-bytes -> 64-bits
    _name = 'I64'


class Int128PackType(_SizedIntPackType):
    __slots__ = ()
    _signed = True
    _byte_size = 16  # 16-bytes -> 128-bits
    _name = 'I128'


class Uint8PackType(_ByteIntPackType):
    __slots__ = ()
    _signed = False
    _name = 'U8'


class Uint16PackType(_SizedIntPackType):
    __slots__ = ()
    _signed = False
    _byte_size = 2
    _name = 'U16'


class Uint32PackType(_SizedIntPackType):
    __slots__ = ()
    _signed = False
    _byte_size = 4
    _name = 'U32'


class Uint64PackType(_SizedIntPackType):
    __slots__ = ()
    _signed = False
    _byte_size = 8
    _name = 'U64'


class Uint128PackType(_SizedIntPackType):
    __slots__ = ()
    _signed = False
    _byte_size = 16
    _name = 'U128'
