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

from typing import Any

from typing_extensions import override

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.exceptions import PackTypeDefinitionError, SerializationTypeError, SerializationValueError
from byteorder_pack.pack_types.pack_type import PackType
from byteorder_pack.serializer import Serializer


# XXX: we can't usefully describe the tuple type
class TuplePackType(PackType[tuple]):
    """ Represents tuple values with a fixed amount of elements, each with its own type.

    The same class covers every arity, from the empty tuple up to the `MAX_TUPLE_ARITY` setting. The elements are packed
    in declaration order with nothing in between, so the width is the sum of the element widths.
    """

    __slots__ = ('_args',)

    _args: tuple[PackType[Any], ...]

    def __init__(self, *args: PackType[Any]) -> None:
        for arg in args:
            if not isinstance(arg, PackType):
                raise PackTypeDefinitionError(f'tuple element must be a PackType, got {arg!r}')
        if args:
            from byteorder_pack.conf import get_global_settings
            max_arity = get_global_settings().MAX_TUPLE_ARITY
            if len(args) > max_arity:
                raise PackTypeDefinitionError(f'tuple arity {len(args)} is above the maximum of {max_arity}')
        self._args = args
        self._width = sum(arg.width for arg in args)

    def __repr__(self) -> str:
        if not self._args:
            return 'UNIT'
        return f'TuplePackType({", ".join(repr(arg) for arg in self._args)})'

    @property
    def args(self) -> tuple[PackType[Any], ...]:
        return self._args

    @property
    def arity(self) -> int:
        return len(self._args)

    @override
    def _check_value(self, value: tuple, /) -> None:
        if not isinstance(value, (tuple, list)):
            raise SerializationTypeError(f'{self!r}: expected tuple-like, got {type(value).__name__}')
        if len(value) != len(self._args):
            raise SerializationValueError(f'{self!r}: expected {len(self._args)} elements, got {len(value)}')
        for i, arg_pack_type in zip(value, self._args):
            arg_pack_type._check_value(i)

    @override
    def _pack(self, serializer: Serializer, value: tuple, order: ByteOrder, /) -> None:
        from byteorder_pack.compound_encoding.tuple import encode_tuple
        encode_tuple(serializer, tuple(value), tuple(i._pack for i in self._args), order)

    @override
    def _unpack(self, deserializer: Deserializer, order: ByteOrder, /) -> tuple:
        from byteorder_pack.compound_encoding.tuple import decode_tuple
        return decode_tuple(deserializer, tuple(i._unpack for i in self._args), order)
