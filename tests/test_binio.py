import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from seaboy.binio import BinaryReader, BinaryWriter, StateError


def _written(fn):
    buf = io.BytesIO()
    fn(BinaryWriter(buf))
    return buf.getvalue()


def _reader(data):
    return BinaryReader(io.BytesIO(data))


def test_write16_is_little_endian():
    assert _written(lambda w: w.write16(0x1234)) == b"\x34\x12"


def test_write32_is_little_endian():
    assert _written(lambda w: w.write32(0x811C9DC5)) == b"\xc5\x9d\x1c\x81"


def test_write_bool_is_one_byte():
    assert _written(lambda w: (w.write_bool(True), w.write_bool(False))) == b"\x01\x00"


def test_write8_wraps_to_byte():
    assert _written(lambda w: w.write8(0x1FF)) == b"\xff"


@given(
    st.integers(0, 0xFF),
    st.integers(0, 0xFFFF),
    st.integers(0, 0xFFFFFFFF),
    st.booleans(),
    st.integers(-(2**31), 2**31 - 1),
    st.floats(allow_nan=False),
    st.binary(max_size=32),
)
def test_round_trip(v8, v16, v32, flag, num, dbl, block):
    buf = io.BytesIO()
    w = BinaryWriter(buf)
    w.write8(v8)
    w.write16(v16)
    w.write32(v32)
    w.write_bool(flag)
    w.write_int(num)
    w.write_double(dbl)
    w.write_block(block)
    buf.seek(0)
    r = BinaryReader(buf)
    assert r.read8() == v8
    assert r.read16() == v16
    assert r.read32() == v32
    assert r.read_bool() is flag
    assert r.read_int() == num
    assert r.read_double() == dbl
    assert r.read_block(len(block)) == block


def test_read_bool_treats_nonzero_as_true():
    assert _reader(b"\x07").read_bool() is True


def test_read8_on_empty_stream_raises():
    with pytest.raises(StateError):
        _reader(b"").read8()


def test_read16_short_raises():
    with pytest.raises(StateError):
        _reader(b"\x01").read16()


def test_read32_short_raises():
    with pytest.raises(StateError):
        _reader(b"\x01\x02").read32()


def test_read_int_short_raises():
    with pytest.raises(StateError):
        _reader(b"\x00").read_int()


def test_read_double_short_raises():
    with pytest.raises(StateError):
        _reader(b"\x00" * 7).read_double()


def test_short_block_raises():
    with pytest.raises(StateError):
        _reader(b"ab").read_block(3)