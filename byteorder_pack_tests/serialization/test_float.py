import math
import struct

import pytest

FLOAT64_BIT_PATTERNS = [
    0x0000000000000000,  # 0.0
    0x8000000000000000,  # -0.0
    0x3ff0000000000000,  # 1.0
    0x0000000000000001,  # smallest subnormal
    0x7fefffffffffffff,  # largest finite
    0xffefffffffffffff,  # most negative finite
    0x7ff0000000000000,  # inf
    0xfff0000000000000,  # -inf
    0x7ff8000000000000,  # canonical quiet NaN
    0xfff8000000000000,  # negative quiet NaN
    0x7ff8000000000abc,  # quiet NaN with payload
]

FLOAT32_BIT_PATTERNS = [
    0x00000000,  # 0.0
    0x80000000,  # -0.0
    0x3f800000,  # 1.0
    0x00000001,  # smallest subnormal
    0x7f7fffff,  # largest finite
    0xff7fffff,  # most negative finite
    0x7f800000,  # inf
    0xff800000,  # -inf
    0x7fc00000,  # canonical quiet NaN
    0xffc00000,  # negative quiet NaN
    0x7f800001,  # signaling NaN, smallest payload
    0x7fa00000,  # signaling NaN
    0xff800123,  # negative signaling NaN with payload
    0x7fc00abc,  # quiet NaN with payload
]


@pytest.mark.parametrize('order_name', ['BIG', 'LITTLE'])
@pytest.mark.parametrize('bits', FLOAT64_BIT_PATTERNS)
def test_f64_bit_pattern_round_trip(bits, order_name) -> None:
    from byteorder_pack import F64, ByteOrder
    from byteorder_pack.encoding.float import float_from_bits, float_to_bits
    order = ByteOrder[order_name]
    value = float_from_bits(bits, length=8)
    data = F64.to_bytes(value, order)
    assert len(data) == 8
    assert data == bits.to_bytes(8, byteorder=order.byteorder)
    assert float_to_bits(F64.from_bytes(data, order), length=8) == bits


@pytest.mark.parametrize('order_name', ['BIG', 'LITTLE'])
@pytest.mark.parametrize('bits', FLOAT32_BIT_PATTERNS)
def test_f32_bit_pattern_round_trip(bits, order_name) -> None:
    from byteorder_pack import F32, ByteOrder
    from byteorder_pack.encoding.float import float_from_bits, float_to_bits
    order = ByteOrder[order_name]
    value = float_from_bits(bits, length=4)
    data = F32.to_bytes(value, order)
    assert len(data) == 4
    assert data == bits.to_bytes(4, byteorder=order.byteorder)
    assert float_to_bits(F32.from_bytes(data, order), length=4) == bits


@pytest.mark.parametrize('value', [0.0, 1.5, -2.25, 1e-300, 1e300, math.pi, -math.e])
def test_f64_matches_struct(value) -> None:
    from byteorder_pack import F64, ByteOrder
    assert F64.to_bytes(value, ByteOrder.BIG) == struct.pack('>d', value)
    assert F64.to_bytes(value, ByteOrder.LITTLE) == struct.pack('<d', value)
    assert F64.from_bytes(struct.pack('>d', value), ByteOrder.BIG) == value


def test_f32_loses_precision() -> None:
    from byteorder_pack import F32, ByteOrder
    # 0.1 isn't representable in binary32, the result is the nearest binary32 value
    result = F32.from_bytes(F32.to_bytes(0.1, ByteOrder.BIG), ByteOrder.BIG)
    assert result != 0.1
    assert result == struct.unpack('>f', struct.pack('>f', 0.1))[0]


def test_f32_too_large() -> None:
    from byteorder_pack import F32, ByteOrder, SerializationValueError
    with pytest.raises(SerializationValueError):
        F32.to_bytes(1e39, ByteOrder.BIG)
    with pytest.raises(SerializationValueError):
        F32.to_bytes(-1e39, ByteOrder.LITTLE)
    # infinities are fine
    assert F32.to_bytes(math.inf, ByteOrder.BIG) == b'\x7f\x80\x00\x00'


def test_float_wrong_type() -> None:
    from byteorder_pack import F32, F64, ByteOrder, SerializationTypeError
    for pack_type in (F32, F64):
        for value in [1, True, '1.0', None]:
            with pytest.raises(SerializationTypeError):
                pack_type.to_bytes(value, ByteOrder.BIG)


def test_float_short_read() -> None:
    from byteorder_pack import F64, ByteOrder, OutOfDataError
    with pytest.raises(OutOfDataError):
        F64.from_bytes(b'\x00' * 7, ByteOrder.LITTLE)


@pytest.mark.parametrize('order_name', ['BIG', 'LITTLE'])
@pytest.mark.parametrize('bits', [0x7f800001, 0x7fa00000, 0xff800123, 0x7fc00abc])
def test_f32_nan_bytes_are_kept(bits, order_name) -> None:
    from byteorder_pack import F32, ByteOrder
    order = ByteOrder[order_name]
    data = bits.to_bytes(4, byteorder=order.byteorder)
    value = F32.from_bytes(data, order)
    assert math.isnan(value)
    assert F32.to_bytes(value, order) == data


def test_f64_nan_packed_as_f32() -> None:
    from byteorder_pack import F32, ByteOrder
    from byteorder_pack.encoding.float import float_from_bits
    # the top of the payload fits in binary32
    assert F32.to_bytes(float_from_bits(0xfff4000000000000, length=8), ByteOrder.BIG) == b'\xff\xa0\x00\x00'
    # a payload only in the low bits still packs as a NaN
    data = F32.to_bytes(float_from_bits(0x7ff0000000000001, length=8), ByteOrder.BIG)
    assert data == b'\x7f\xc0\x00\x00'
