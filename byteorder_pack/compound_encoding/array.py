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

r"""
An array is a sequence with a length that is part of its type and a single element type.

Layout: [value_0][value_1]...[value_N-1]

There is no length prefix, the length is known by both sides in advance. The values are encoded in index order, each
with the same byte order.

>>> from byteorder_pack.encoding.int import encode_int, decode_int
>>> def encode_u16(se, value, order):
...     encode_int(se, value, length=2, signed=False, order=order)
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [3, 4], encode_u16, ByteOrder.BIG, length=2)
>>> encode_array(se, [3, 4], encode_u16, ByteOrder.LITTLE, length=2)
>>> bytes(se.finalize()).hex()
'0003000403000400'

>>> def decode_u16(de, order):
...     return decode_int(de, length=2, signed=False, order=order)
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0003000403000400'))
>>> decode_array(de, decode_u16, ByteOrder.BIG, length=2)
[3, 4]
>>> decode_array(de, decode_u16, ByteOrder.LITTLE, length=2)
[3, 4]
>>> de.finalize()

Decoding stops at the first element that fails, no partially filled array is returned:

>>> from byteorder_pack.exceptions import OutOfDataError
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000300'))
>>> try:
...     decode_array(de, decode_u16, ByteOrder.BIG, length=2)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read: needed 2, 1 available
"""

from collections.abc import Sequence
from typing import TypeVar

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.exceptions import SerializationValueError
from byteorder_pack.serializer import Serializer

from . import Decoder, Encoder

T = TypeVar('T')


def encode_array(serializer: Serializer, values: Sequence[T], encoder: Encoder[T], order: ByteOrder, *,
                 length: int) -> None:
    if len(values) != length:
        raise SerializationValueError(f'expected {length} elements, got {len(values)}')
    for value in values:
        encoder(serializer, value, order)


def decode_array(deserializer: Deserializer, decoder: Decoder[T], order: ByteOrder, *, length: int) -> list[T]:
    return [decoder(deserializer, order) for _ in range(length)]
