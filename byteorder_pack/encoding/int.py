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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

Signed values use two's complement, the order of the bytes is given by the `order` parameter.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True, order=ByteOrder.BIG)  # writes 00
>>> encode_int(se, 255, length=1, signed=False, order=ByteOrder.BIG)  # writes ff
>>> encode_int(se, 1234, length=2, signed=True, order=ByteOrder.BIG)  # writes 04d2
>>> encode_int(se, -1234, length=2, signed=True, order=ByteOrder.BIG)  # writes fb2e
>>> encode_int(se, 1234, length=2, signed=True, order=ByteOrder.LITTLE)  # writes d204
>>> bytes(se.finalize()).hex()
'00ff04d2fb2ed204'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d2fb2ed204'))
>>> decode_int(de, length=1, signed=True, order=ByteOrder.BIG)  # reads 00
0
>>> decode_int(de, length=1, signed=False, order=ByteOrder.BIG)  # reads ff
255
>>> decode_int(de, length=2, signed=True, order=ByteOrder.BIG)  # reads 04d2
1234
>>> decode_int(de, length=2, signed=True, order=ByteOrder.BIG)  # reads fb2e
-1234
>>> decode_int(de, length=2, signed=True, order=ByteOrder.LITTLE)  # reads d204
1234

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 256, length=1, signed=False, order=ByteOrder.BIG)
... except ValueError as e:
...     print(*e.args)
256 does not fit in 1 unsigned byte(s)
"""

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.exceptions import SerializationValueError
from byteorder_pack.serializer import Serializer


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool, order: ByteOrder) -> None:
    """ Encode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder=order.byteorder, signed=signed)
    except OverflowError:
        kind = 'signed' if signed else 'unsigned'
        raise SerializationValueError(f'{number} does not fit in {length} {kind} byte(s)')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool, order: ByteOrder) -> int:
    """ Decode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder=order.byteorder, signed=signed)


def encode_int_run(serializer: Serializer, numbers: list[int], *, signed: bool) -> None:
    """ Encode a run of single byte ints with one write.

    Byte order does not apply to single bytes, so this is a shortcut for bulk packing 8-bit values.
    """
    try:
        data = b''.join(int.to_bytes(number, 1, 'big', signed=signed) for number in numbers)
    except OverflowError:
        kind = 'signed' if signed else 'unsigned'
        raise SerializationValueError(f'value does not fit in 1 {kind} byte')
    serializer.write_bytes(data)


def decode_int_run(deserializer: Deserializer, count: int, *, signed: bool) -> list[int]:
    """ Decode a run of `count` single byte ints with one read.
    """
    data = bytes(deserializer.read_bytes(count))
    if signed:
        return [int.from_bytes(data[i:i + 1], 'big', signed=True) for i in range(count)]
    return list(data)
