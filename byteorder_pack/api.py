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

"""
Function style entry points, they are thin wrappers over the `PackType` methods with the pack type as first argument.

>>> import io
>>> from byteorder_pack.pack_types import U8, U16, ArrayPackType, TuplePackType
>>> layout = TuplePackType(U8, U8, ArrayPackType(U16, 2))
>>> pack_be(layout, (1, 2, [3, 4])).hex()
'010200030004'
>>> pack_le(layout, (1, 2, [3, 4])).hex()
'010203000400'
>>> stream = io.BytesIO(bytes.fromhex('010200030004'))
>>> unpack_from_be(layout, stream)
(1, 2, [3, 4])
>>> width_of(layout)
6
"""

from collections.abc import Sequence
from typing import TypeVar

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.pack_types.pack_type import PackType, Sink, Source
from byteorder_pack.types import Buffer

T = TypeVar('T')


def width_of(pack_type: PackType[T]) -> int:
    """Amount of bytes that any value of `pack_type` occupies."""
    return pack_type.width


def pack_to(pack_type: PackType[T], sink: Sink, value: T, order: ByteOrder) -> None:
    pack_type.pack_to(sink, value, order)


def pack_to_be(pack_type: PackType[T], sink: Sink, value: T) -> None:
    pack_type.pack_to(sink, value, ByteOrder.BIG)


def pack_to_le(pack_type: PackType[T], sink: Sink, value: T) -> None:
    pack_type.pack_to(sink, value, ByteOrder.LITTLE)


def unpack_from(pack_type: PackType[T], source: Source, order: ByteOrder) -> T:
    return pack_type.unpack_from(source, order)


def unpack_from_be(pack_type: PackType[T], source: Source) -> T:
    return pack_type.unpack_from(source, ByteOrder.BIG)


def unpack_from_le(pack_type: PackType[T], source: Source) -> T:
    return pack_type.unpack_from(source, ByteOrder.LITTLE)


def pack_be(pack_type: PackType[T], value: T) -> bytes:
    """Pack a single value to `bytes` in big-endian order."""
    return pack_type.to_bytes(value, ByteOrder.BIG)


def pack_le(pack_type: PackType[T], value: T) -> bytes:
    """Pack a single value to `bytes` in little-endian order."""
    return pack_type.to_bytes(value, ByteOrder.LITTLE)


def unpack_be(pack_type: PackType[T], data: Buffer) -> T:
    """Unpack a single value from `data` in big-endian order, `data` must not have trailing bytes."""
    return pack_type.from_bytes(data, ByteOrder.BIG)


def unpack_le(pack_type: PackType[T], data: Buffer) -> T:
    """Unpack a single value from `data` in little-endian order, `data` must not have trailing bytes."""
    return pack_type.from_bytes(data, ByteOrder.LITTLE)


def pack_multiple_to(pack_type: PackType[T], sink: Sink, values: Sequence[T], order: ByteOrder) -> None:
    pack_type.pack_multiple_to(sink, values, order)


def unpack_multiple_from(pack_type: PackType[T], source: Source, count: int, order: ByteOrder) -> list[T]:
    return pack_type.unpack_multiple_from(source, count, order)
