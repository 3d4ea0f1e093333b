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
This module implements encoding of IEEE-754 floating point numbers, binary32 (4 bytes) and binary64 (8 bytes).

The bytes written are the bit pattern of the value, ordered according to the `order` parameter.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.0, length=4, order=ByteOrder.BIG)  # writes 3f800000
>>> encode_float(se, 1.0, length=4, order=ByteOrder.LITTLE)  # writes 0000803f
>>> encode_float(se, -2.5, length=8, order=ByteOrder.BIG)  # writes c004000000000000
>>> bytes(se.finalize()).hex()
'3f8000000000803fc004000000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3f8000000000803fc004000000000000'))
>>> decode_float(de, length=4, order=ByteOrder.BIG)
1.0
>>> decode_float(de, length=4, order=ByteOrder.LITTLE)
1.0
>>> decode_float(de, length=8, order=ByteOrder.BIG)
-2.5

Infinities and NaN are kept, use the bit helpers to compare NaN values:

>>> hex(float_to_bits(float('-inf'), length=4))
'0xff800000'
>>> hex(float_to_bits(float_from_bits(0x7ff8000000000001, length=8), length=8))
'0x7ff8000000000001'
>>> hex(float_to_bits(float_from_bits(0x7f800001, length=4), length=4))
'0x7f800001'

Values that don't fit in a binary32 are rejected instead of silently becoming infinite:

>>> try:
...     encode_float(Serializer.build_bytes_serializer(), 1e300, length=4, order=ByteOrder.BIG)
... except ValueError as e:
...     print(*e.args)
1e+300 is too large for a 4 byte float
"""


import math
import struct

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.exceptions import SerializationValueError
from byteorder_pack.serializer import Serializer

_FORMAT_BY_LENGTH: dict[int, str] = {
    4: 'f',
    8: 'd',
}

_F32_EXPONENT_MASK = 0x7f800000
_F32_MANTISSA_MASK = 0x007fffff
_F32_QUIET_BIT = 0x00400000
_F64_EXPONENT_MASK = 0x7ff0000000000000
# the binary32 mantissa goes in the top 23 of the 52 binary64 mantissa bits
_MANTISSA_SHIFT = 52 - 23


def _format(length: int, order: ByteOrder) -> str:
    # XXX: a bad length is a bug in the caller, not bad data
    assert length in _FORMAT_BY_LENGTH, f'unsupported float length: {length}'
    return order.struct_prefix + _FORMAT_BY_LENGTH[length]


def _f64_bits(number: float) -> int:
    return int.from_bytes(struct.pack('>d', number), byteorder='big', signed=False)


def _f32_nan_to_float(bits: int) -> float:
    # XXX: struct's 'f' goes through a C float->double cast that sets the quiet bit, so NaNs are widened by hand to
    #      keep their exact payload
    sign = bits >> 31
    mantissa = bits & _F32_MANTISSA_MASK
    wide = (sign << 63) | _F64_EXPONENT_MASK | (mantissa << _MANTISSA_SHIFT)
    number, = struct.unpack('>d', int.to_bytes(wide, 8, byteorder='big'))
    return number


def _float_nan_to_f32(number: float) -> int:
    wide = _f64_bits(number)
    sign = wide >> 63
    mantissa = (wide >> _MANTISSA_SHIFT) & _F32_MANTISSA_MASK
    if not mantissa:
        # the payload only used the low bits, which binary32 doesn't have, it must still be a NaN
        mantissa = _F32_QUIET_BIT
    return (sign << 31) | _F32_EXPONENT_MASK | mantissa


def encode_float(serializer: Serializer, number: float, *, length: int, order: ByteOrder) -> None:
    """ Encode a float using the IEEE-754 format with the given byte-length and byte order.

    This modules's docstring has more details and examples.
    """
    try:
        bits = float_to_bits(number, length=length)
    except OverflowError:
        raise SerializationValueError(f'{number!r} is too large for a {length} byte float')
    serializer.write_bytes(int.to_bytes(bits, length, byteorder=order.byteorder, signed=False))


def decode_float(deserializer: Deserializer, *, length: int, order: ByteOrder) -> float:
    """ Decode a float using the IEEE-754 format with the given byte-length and byte order.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return float_from_bits(int.from_bytes(data, byteorder=order.byteorder, signed=False), length=length)


def float_to_bits(number: float, *, length: int) -> int:
    """ Bit pattern of `number` as an unsigned int, as it would be encoded with the given byte-length.

    NaN payloads are kept, a binary64 NaN packed as binary32 keeps the top 23 bits of its mantissa.
    Raises OverflowError for a finite value too large for binary32.
    """
    if length == 4 and math.isnan(number):
        return _float_nan_to_f32(number)
    data = struct.pack(_format(length, ByteOrder.BIG), number)
    return int.from_bytes(data, byteorder='big', signed=False)


def float_from_bits(bits: int, *, length: int) -> float:
    """Float whose bit pattern is given as an unsigned int."""
    if length == 4 and bits & _F32_EXPONENT_MASK == _F32_EXPONENT_MASK and bits & _F32_MANTISSA_MASK:
        return _f32_nan_to_float(bits)
    data = int.to_bytes(bits, length, byteorder='big', signed=False)
    number, = struct.unpack(_format(length, ByteOrder.BIG), data)
    return number
