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
A tuple here is always `tuple[A, B, C]`: known fixed length and heterogeneous types.

There actually isn't a "format" per-se, the encoding of `tuple[A, B, C]` is just the encoding of A concatenated with B
concatenated with C, all of them with the same byte order. So this compound encoder is basically a shortcut that can
be used by cases that already have a tuple of values and a matching tuple of encoders of those values.

>>> from byteorder_pack.encoding.int import encode_int, decode_int
>>> def encode_u8(se, value, order):
...     encode_int(se, value, length=1, signed=False, order=order)
>>> def encode_u16(se, value, order):
...     encode_int(se, value, length=2, signed=False, order=order)
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, (1, 2, 3), (encode_u8, encode_u8, encode_u16), ByteOrder.BIG)
>>> bytes(se.finalize()).hex()
'01020003'

Breakdown of the result:

    01: 1
    02: 2
    0003: 3

>>> def decode_u8(de, order):
...     return decode_int(de, length=1, signed=False, order=order)
>>> def decode_u16(de, order):
...     return decode_int(de, length=2, signed=False, order=order)
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('01020300'))
>>> decode_tuple(de, (decode_u8, decode_u8, decode_u16), ByteOrder.LITTLE)
(1, 2, 3)
"""

from typing import Any

from typing_extensions import TypeVarTuple, Unpack

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.serializer import Serializer

from . import Decoder, Encoder

Ts = TypeVarTuple('Ts')


def encode_tuple(
    serializer: Serializer,
    values: tuple[Unpack[Ts]],
    encoders: tuple[Encoder[Any], ...],
    order: ByteOrder,
) -> None:
    assert len(values) == len(encoders)
    # mypy can't track tuple element-wise mapping yet, safe due to length check above
    for value, encoder in zip(values, encoders):  # type: ignore
        encoder(serializer, value, order)


def decode_tuple(
    deserializer: Deserializer,
    decoders: tuple[Decoder[Any], ...],
    order: ByteOrder,
) -> tuple[Unpack[Ts]]:
    # XXX: tuple() consumes the generator in order and lets the first exception through, nothing partial escapes
    return tuple(decoder(deserializer, order) for decoder in decoders)  # type: ignore[return-value]
