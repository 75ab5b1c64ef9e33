import pytest
from hypothesis import given
from hypothesis import strategies as st

from seaboy.registers import FLAG_C, FLAG_H, FLAG_N, FLAG_Z, Registers

words = st.integers(min_value=0, max_value=0xFFFF)
bytes8 = st.integers(min_value=0, max_value=0xFF)


@pytest.mark.parametrize(
    "name, expected",
    [("flag_z", 0x80), ("flag_n", 0x40), ("flag_h", 0x20), ("flag_c", 0x10)],
)
def test_each_flag_sets_its_documented_bit(name, expected):
    r = Registers()
    setattr(r, name, True)
    assert r.f == expected
    assert r.f == {"flag_z": FLAG_Z, "flag_n": FLAG_N, "flag_h": FLAG_H, "flag_c": FLAG_C}[name]


def test_flag_setters_touch_only_their_bit():
    r = Registers()
    r.flag_z = True
    assert r.f == FLAG_Z
    r.flag_c = True
    assert r.f == FLAG_Z | FLAG_C
    r.flag_z = False
    assert r.f == FLAG_C
    assert r.flag_c and not r.flag_z and not r.flag_n and not r.flag_h


def test_af_setter_masks_low_nibble_of_f():
    r = Registers()
    r.af = 0x12FF
    assert r.a == 0x12
    assert r.f == 0xF0


@given(words)
def test_bc_de_hl_round_trip(value):
    r = Registers()
    r.bc = value
    r.de = value
    r.hl = value
    assert r.bc == value and r.de == value and r.hl == value
    assert r.b == value >> 8 and r.c == value & 0xFF


def test_r8_encoding_order():
    r = Registers(a=7, b=0, c=1, d=2, e=3, h=4, l=5)
    assert [r.get_r8(i) for i in (0, 1, 2, 3, 4, 5, 7)] == [0, 1, 2, 3, 4, 5, 7]


@pytest.mark.parametrize("index", [6, 14])
def test_r8_index_six_is_indirect(index):
    r = Registers()
    with pytest.raises(ValueError):
        r.get_r8(index)
    with pytest.raises(ValueError):
        r.set_r8(index, 1)


@given(st.sampled_from([0, 1, 2, 3, 4, 5, 7]), bytes8)
def test_set_r8_round_trip(index, value):
    r = Registers()
    r.set_r8(index, value)
    assert r.get_r8(index) == value


def test_rp_and_rp2_differ_at_index_three():
    r = Registers(sp=0xFFFE)
    r.af = 0x01B0
    assert r.get_rp(3) == 0xFFFE
    assert r.get_rp2(3) == 0x01B0


@given(st.integers(min_value=0, max_value=2), words)
def test_rp_and_rp2_share_low_indices(index, value):
    r = Registers()
    r.set_rp(index, value)
    assert r.get_rp(index) == value
    assert r.get_rp2(index) == value


def test_set_rp2_af_masks_flags():
    r = Registers()
    r.set_rp2(3, 0xABCD)
    assert r.get_rp2(3) == 0xABC0


@given(words)
def test_set_rp_sp_round_trip(value):
    r = Registers()
    r.set_rp(3, value)
    assert r.sp == value