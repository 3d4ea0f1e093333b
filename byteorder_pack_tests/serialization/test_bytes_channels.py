import pytest


def test_bytes_serializer_parts() -> None:
    from byteorder_pack import Serializer
    se = Serializer.build_bytes_serializer()
    assert se.cur_pos() == 0
    se.write_byte(0xab)
    se.write_bytes(b'cd')
    se.write_struct((1, 2), '>BH')
    assert se.cur_pos() == 6
    assert bytes(se.finalize()) == b'\xabcd\x01\x00\x02'


def test_bytes_serializer_copies_mutable_buffers() -> None:
    from byteorder_pack import Serializer
    se = Serializer.build_bytes_serializer()
    buf = bytearray(b'\x01\x02')
    se.write_bytes(buf)
    buf[0] = 0xff
    assert bytes(se.finalize()) == b'\x01\x02'


def test_bytes_serializer_byte_range() -> None:
    from byteorder_pack import Serializer
    se = Serializer.build_bytes_serializer()
    with pytest.raises(OverflowError):
        se.write_byte(256)


def test_bytes_deserializer_reads() -> None:
    from byteorder_pack import Deserializer
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04\x05')
    assert de.read_byte() == 1
    assert bytes(de.read_bytes(2)) == b'\x02\x03'
    assert de.read_struct('>H') == (0x0405,)
    assert de.cur_pos() == 5
    assert de.is_empty()
    de.finalize()


def test_bytes_deserializer_errors() -> None:
    from byteorder_pack import BadDataError, Deserializer, OutOfDataError
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    with pytest.raises(OutOfDataError):
        de.read_bytes(3)
    with pytest.raises(ValueError):
        de.read_bytes(-1)
    assert de.cur_pos() == 0
    with pytest.raises(BadDataError, match='trailing data'):
        de.finalize()

    de = Deserializer.build_bytes_deserializer(b'')
    with pytest.raises(OutOfDataError):
        de.read_byte()


def test_from_sink_and_source() -> None:
    import io

    from byteorder_pack import Deserializer, Serializer
    from byteorder_pack.stream_deserializer import StreamDeserializer
    from byteorder_pack.stream_serializer import StreamSerializer

    se = Serializer.build_bytes_serializer()
    assert Serializer.from_sink(se) is se
    assert isinstance(Serializer.from_sink(io.BytesIO()), StreamSerializer)
    with pytest.raises(TypeError):
        Serializer.from_sink(b'not a sink')

    de = Deserializer.build_bytes_deserializer(b'')
    assert Deserializer.from_source(de) is de
    assert isinstance(Deserializer.from_source(io.BytesIO()), StreamDeserializer)
    with pytest.raises(TypeError):
        Deserializer.from_source(42)


def test_stream_channels_do_not_finalize() -> None:
    import io

    from byteorder_pack import Deserializer, Serializer
    with pytest.raises(TypeError):
        Serializer.build_stream_serializer(io.BytesIO()).finalize()
    with pytest.raises(TypeError):
        Deserializer.build_stream_deserializer(io.BytesIO()).finalize()
