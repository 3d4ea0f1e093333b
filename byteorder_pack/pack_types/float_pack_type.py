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

from typing import ClassVar

from typing_extensions import override

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.encoding.float import decode_float, encode_float, float_to_bits
from byteorder_pack.exceptions import SerializationTypeError, SerializationValueError
from byteorder_pack.pack_types.pack_type import PackType
from byteorder_pack.serializer import Serializer


class _FloatPackType(PackType[float]):
    """ Base class for IEEE-754 floating point values.

    Values are builtin `float`, ints are not converted implicitly.
    """

    __slots__ = ()

    # XXX: subclass must define these values:
    _byte_size: ClassVar[int]
    _name: ClassVar[str]

    def __init__(self) -> None:
        self._width = self._byte_size

    def __repr__(self) -> str:
        return self._name

    @override
    def _check_value(self, value: float, /) -> None:
        if not isinstance(value, float):
            raise SerializationTypeError(f'{self._name}: expected float, got {type(value).__name__}')

    @override
    def _pack(self, serializer: Serializer, value: float, order: ByteOrder, /) -> None:
        encode_float(serializer, value, length=self._byte_size, order=order)

    @override
    def _unpack(self, deserializer: Deserializer, order: ByteOrder, /) -> float:
        return decode_float(deserializer, length=self._byte_size, order=order)


class Float32PackType(_FloatPackType):
    """ Binary32 values, precision is lost for values that are not exactly representable.
    """

    __slots__ = ()
    _byte_size = 4
    _name = 'F32'

    @override
    def _check_value(self, value: float, /) -> None:
        super()._check_value(value)
        try:
            float_to_bits(value, length=self._byte_size)
        except OverflowError:
            raise SerializationValueError(f'{self._name}: {value!r} is too large')


class Float64PackType(_FloatPackType):
    __slots__ = ()
    _byte_size = 8
    _name = 'F64'
