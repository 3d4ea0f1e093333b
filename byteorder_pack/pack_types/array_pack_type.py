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
from typing import TypeVar

from typing_extensions import override

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.exceptions import PackTypeDefinitionError, SerializationTypeError, SerializationValueError
from byteorder_pack.pack_types.pack_type import PackType
from byteorder_pack.serializer import Serializer

T = TypeVar('T')


class ArrayPackType(PackType[list[T]]):
    """ Represents a fixed amount of values of the same type, laid out back to back with no length prefix.

    Any sequence of the right length can be packed (`bytes` included, for arrays of `U8`), unpacking gives a `list`.
    """

    __slots__ = ('_element', '_length')

    _element: PackType[T]
    _length: int

    def __init__(self, element: PackType[T], length: int) -> None:
        from byteorder_pack.conf import get_global_settings
        if not isinstance(element, PackType):
            raise PackTypeDefinitionError(f'array element must be a PackType, got {element!r}')
        if not isinstance(length, int) or isinstance(length, bool) or length < 0:
            raise PackTypeDefinitionError(f'array length must be a non-negative int, got {length!r}')
        max_length = get_global_settings().MAX_ARRAY_LENGTH
        if length > max_length:
            raise PackTypeDefinitionError(f'array length {length} is above the maximum of {max_length}')
        self._element = element
        self._length = length
        self._width = element.width * length

    def __repr__(self) -> str:
        return f'ArrayPackType({self._element!r}, {self._length})'

    @property
    def element(self) -> PackType[T]:
        return self._element

    @property
    def length(self) -> int:
        return self._length

    @override
    def _check_value(self, value: list[T], /) -> None:
        if not isinstance(value, Sequence) or isinstance(value, str):
            raise SerializationTypeError(f'{self!r}: expected a sequence, got {type(value).__name__}')
        if len(value) != self._length:
            raise SerializationValueError(f'{self!r}: expected {self._length} elements, got {len(value)}')
        for i in value:
            self._element._check_value(i)

    @override
    def _pack(self, serializer: Serializer, value: list[T], order: ByteOrder, /) -> None:
        self._element._pack_multiple(serializer, value, order)

    @override
    def _unpack(self, deserializer: Deserializer, order: ByteOrder, /) -> list[T]:
        return self._element._unpack_multiple(deserializer, self._length, order)
