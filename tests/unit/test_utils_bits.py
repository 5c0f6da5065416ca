import pytest
from src.vm_translator.utils import u16, sign_extend, fits_a_value, to_bin16, to_hex16

def test_u16():
    assert u16(-1) == 0xFFFF
    assert u16(0x1_0005) == 5

@pytest.mark.parametrize("x, expected", [
    (0x0000, 0), (0x7FFF, 32767), (0x8000, -32768), (0xFFFF, -1), (0xFFFB, -5),
])
def test_sign_extend16(x, expected):
    assert sign_extend(x) == expected

def test_sign_extend_other_width():
    assert sign_extend(0b100, 3) == -4
    assert sign_extend(0b011, 3) == 3
    with pytest.raises(ValueError):
        sign_extend(1, 0)

@pytest.mark.parametrize("x, expected", [(0, True), (32767, True), (32768, False), (-1, False)])
def test_fits_a_value(x, expected):
    assert fits_a_value(x) is expected

def test_formats():
    assert to_bin16(5) == "0000000000000101"
    assert to_hex16(0xEC10) == "0xec10"
    assert to_hex16(-1, prefix=False) == "ffff"
