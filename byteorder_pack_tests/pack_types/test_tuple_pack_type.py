import pytest


def test_composite_ordering() -> None:
    from byteorder_pack import U8, U16, ArrayPackType, ByteOrder, TuplePackType
    layout = TuplePackType(U8, U8, ArrayPackType(U16, 2))
    data = layout.to_bytes((1, 2, [3, 4]), ByteOrder.BIG)
    assert data == bytes([0x01, 0x02, 0x00, 0x03, 0x00, 0x04])
    assert layout.from_bytes(data, ByteOrder.BIG) == (1, 2, [3, 4])
    assert layout.to_bytes((1, 2, [3, 4]), ByteOrder.LITTLE) == bytes([0x01, 0x02, 0x03, 0x00, 0x04, 0x00])


def test_heterogeneous_tuple() -> None:
    from byteorder_pack import BOOL, F32, I64, U128, ByteOrder, TuplePackType
    layout = TuplePackType(BOOL, I64, F32, U128)
    assert layout.width == 1 + 8 + 4 + 16
    value = (True, -5, 0.5, 1 << 100)
    for order in ByteOrder:
        data = layout.to_bytes(value, order)
        assert len(data) == layout.width
        result = layout.from_bytes(data, order)
        assert isinstance(result, tuple)
        assert result == value


def test_lists_are_accepted_as_tuples() -> None:
    from byteorder_pack import U8, ByteOrder, TuplePackType
    layout = TuplePackType(U8, U8)
    assert layout.to_bytes([7, 8], ByteOrder.BIG) == b'\x07\x08'


def test_unit() -> None:
    from byteorder_pack import UNIT, ByteOrder, TuplePackType
    assert UNIT.width == 0
    assert UNIT.arity == 0
    assert repr(UNIT) == 'UNIT'
    assert UNIT.to_bytes((), ByteOrder.BIG) == b''
    assert UNIT.from_bytes(b'', ByteOrder.LITTLE) == ()
    assert TuplePackType().width == 0


@pytest.mark.parametrize('arity', range(0, 13))
def test_width_additivity(arity) -> None:
    from byteorder_pack import ByteOrder, TuplePackType
    from byteorder_pack.pack_types import SCALAR_PACK_TYPES
    args = tuple(SCALAR_PACK_TYPES[i % len(SCALAR_PACK_TYPES)] for i in range(arity))
    layout = TuplePackType(*args)
    assert layout.arity == arity
    assert layout.args == args
    assert layout.width == sum(arg.width for arg in args)

    value = tuple(_sample_value(arg) for arg in args)
    for order in ByteOrder:
        data = layout.to_bytes(value, order)
        assert len(data) == layout.width
        assert layout.from_bytes(data, order) == value


def _sample_value(pack_type):
    from byteorder_pack import BOOL, F32, F64
    if pack_type is BOOL:
        return True
    if pack_type in (F32, F64):
        return -1.25
    return pack_type._upper_bound_value()


def test_arity_limit() -> None:
    from byteorder_pack import U8, PackTypeDefinitionError, TuplePackType
    from byteorder_pack.conf import get_global_settings
    max_arity = get_global_settings().MAX_TUPLE_ARITY
    assert max_arity == 12
    TuplePackType(*([U8] * max_arity))
    with pytest.raises(PackTypeDefinitionError):
        TuplePackType(*([U8] * (max_arity + 1)))


def test_tuple_definition_errors() -> None:
    from byteorder_pack import U8, PackTypeDefinitionError, TuplePackType
    with pytest.raises(PackTypeDefinitionError):
        TuplePackType(U8, int)


def test_tuple_wrong_values() -> None:
    import io

    from byteorder_pack import BOOL, U8, U16, ByteOrder, SerializationTypeError, SerializationValueError, TuplePackType
    layout = TuplePackType(U8, U16, BOOL)
    with pytest.raises(SerializationValueError):
        layout.to_bytes((1, 2), ByteOrder.BIG)
    with pytest.raises(SerializationTypeError):
        layout.to_bytes('abc', ByteOrder.BIG)
    with pytest.raises(SerializationTypeError):
        layout.to_bytes((1, 2, 1), ByteOrder.BIG)

    # the second element is invalid, the first one isn't written either
    sink = io.BytesIO()
    with pytest.raises(SerializationValueError):
        layout.pack_to(sink, (1, 65536, True), ByteOrder.BIG)
    assert sink.getvalue() == b''


def test_tuple_fail_fast() -> None:
    from byteorder_pack import BOOL, U8, U32, BadDataError, ByteOrder, Deserializer, TuplePackType
    layout = TuplePackType(U8, BOOL, U32)
    de = Deserializer.build_bytes_deserializer(b'\x01\x05\x00\x00\x00\x01')
    with pytest.raises(BadDataError):
        layout.unpack(de, ByteOrder.BIG)
    # the U32 was never read
    assert de.cur_pos() == 2


def test_nested_tuples() -> None:
    from byteorder_pack import I8, U16, ByteOrder, TuplePackType
    layout = TuplePackType(TuplePackType(I8, I8), U16)
    assert layout.width == 4
    assert layout.to_bytes(((-1, 1), 0xabcd), ByteOrder.LITTLE) == b'\xff\x01\xcd\xab'
    assert layout.from_bytes(b'\xff\x01\xcd\xab', ByteOrder.LITTLE) == ((-1, 1), 0xabcd)
    assert repr(layout) == 'TuplePackType(TuplePackType(I8, I8), U16)'
