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

from typing import Optional

from typing_extensions import override

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.encoding.bool import decode_bool, encode_bool
from byteorder_pack.exceptions import SerializationTypeError
from byteorder_pack.pack_types.pack_type import PackType
from byteorder_pack.serializer import Serializer


class BoolPackType(PackType[bool]):
    """ Represents builtin `bool` values, using a single byte.

    When `strict` is not given the `STRICT_BOOL` setting decides whether bytes other than 0x00/0x01 are rejected.
    """

    __slots__ = ('_strict',)

    _strict: Optional[bool]

    def __init__(self, *, strict: Optional[bool] = None) -> None:
        self._width = 1
        self._strict = strict

    def __repr__(self) -> str:
        if self._strict is None:
            return 'BOOL'
        return f'BoolPackType(strict={self._strict})'

    def is_strict(self) -> bool:
        if self._strict is not None:
            return self._strict
        from byteorder_pack.conf import get_global_settings
        return get_global_settings().STRICT_BOOL

    @override
    def _check_value(self, value: bool, /) -> None:
        if not isinstance(value, bool):
            raise SerializationTypeError(f'BOOL: expected bool, got {type(value).__name__}')

    @override
    def _pack(self, serializer: Serializer, value: bool, order: ByteOrder, /) -> None:
        encode_bool(serializer, value)

    @override
    def _unpack(self, deserializer: Deserializer, order: ByteOrder, /) -> bool:
        return decode_bool(deserializer, strict=self.is_strict())
