import io

import pytest


def test_be_le_functions() -> None:
    import byteorder_pack as bp
    assert bp.pack_be(bp.U32, 0x01020304) == b'\x01\x02\x03\x04'
    assert bp.pack_le(bp.U32, 0x01020304) == b'\x04\x03\x02\x01'
    assert bp.unpack_be(bp.U32, b'\x01\x02\x03\x04') == 0x01020304
    assert bp.unpack_le(bp.U32, b'\x01\x02\x03\x04') == 0x04030201
    assert bp.width_of(bp.U32) == 4


def test_channel_functions() -> None:
    import byteorder_pack as bp
    sink = io.BytesIO()
    bp.pack_to_be(bp.I16, sink, -2)
    bp.pack_to_le(bp.I16, sink, -2)
    bp.pack_to(bp.BOOL, sink, True, bp.ByteOrder.LITTLE)
    assert sink.getvalue() == b'\xff\xfe\xfe\xff\x01'

    source = io.BytesIO(sink.getvalue())
    assert bp.unpack_from_be(bp.I16, source) == -2
    assert bp.unpack_from_le(bp.I16, source) == -2
    assert bp.unpack_from(bp.BOOL, source, bp.ByteOrder.BIG) is True
    assert source.read() == b''


def test_methods_match_functions() -> None:
    from byteorder_pack import F64, pack_be, pack_le
    sink = io.BytesIO()
    F64.pack_to_be(sink, 2.5)
    F64.pack_to_le(sink, 2.5)
    assert sink.getvalue() == pack_be(F64, 2.5) + pack_le(F64, 2.5)
    sink.seek(0)
    assert F64.unpack_from_be(sink) == 2.5
    assert F64.unpack_from_le(sink) == 2.5


def test_serializer_as_sink() -> None:
    from byteorder_pack import U16, ByteOrder, Deserializer, Serializer
    se = Serializer.build_bytes_serializer()
    U16.pack_to(se, 1, ByteOrder.BIG)
    U16.pack_to(se, 2, ByteOrder.LITTLE)
    data = bytes(se.finalize())
    assert data == b'\x00\x01\x02\x00'
    de = Deserializer.build_bytes_deserializer(data)
    assert U16.unpack_from(de, ByteOrder.BIG) == 1
    assert U16.unpack_from(de, ByteOrder.LITTLE) == 2
    de.finalize()


def test_trailing_data() -> None:
    from byteorder_pack import U16, BadDataError, unpack_be
    with pytest.raises(BadDataError):
        unpack_be(U16, b'\x00\x01\x02')


def test_unpack_accepts_any_buffer() -> None:
    from byteorder_pack import U16, unpack_le
    assert unpack_le(U16, bytearray(b'\x01\x00')) == 1
    assert unpack_le(U16, memoryview(b'\x00\x01\x02')[1:]) == 0x0201


def test_pack_returns_bytes() -> None:
    from byteorder_pack import U8, pack_be
    assert type(pack_be(U8, 1)) is bytes


def test_multiple_values() -> None:
    from byteorder_pack import U16, ByteOrder, pack_multiple_to, unpack_multiple_from
    sink = io.BytesIO()
    pack_multiple_to(U16, sink, [1, 2, 3], ByteOrder.LITTLE)
    assert sink.getvalue() == b'\x01\x00\x02\x00\x03\x00'
    sink.seek(0)
    assert unpack_multiple_from(U16, sink, 3, ByteOrder.LITTLE) == [1, 2, 3]
    with pytest.raises(ValueError):
        unpack_multiple_from(U16, sink, -1, ByteOrder.LITTLE)


def test_multiple_values_checked_first() -> None:
    from byteorder_pack import U16, ByteOrder, SerializationValueError, pack_multiple_to
    sink = io.BytesIO()
    with pytest.raises(SerializationValueError):
        pack_multiple_to(U16, sink, [1, 2, -3], ByteOrder.BIG)
    assert sink.getvalue() == b''


def test_no_native_byte_order() -> None:
    from byteorder_pack import ByteOrder
    assert {order.name for order in ByteOrder} == {'BIG', 'LITTLE'}
    assert ByteOrder.BIG.struct_prefix == '>'
    assert ByteOrder.LITTLE.struct_prefix == '<'


def test_order_is_required() -> None:
    from byteorder_pack import U16
    with pytest.raises(TypeError):
        U16.to_bytes(1)


def test_not_a_channel() -> None:
    from byteorder_pack import U16, ByteOrder
    with pytest.raises(TypeError):
        U16.pack_to(bytearray(), 1, ByteOrder.BIG)
    with pytest.raises(TypeError):
        U16.unpack_from(b'\x00\x01', ByteOrder.BIG)
