import pytest
from binstr.binary import bit, extract, mask


# -----------------------------------------------------------------------------

def test_mask():
    assert mask(0) == 0
    assert mask(3) == 0b111
    assert mask(8) == 0xff


# -----------------------------------------------------------------------------

def test_extract():
    assert extract(0b11010010, 8, 0, 1) == 0b1
    assert extract(0b11010010, 8, 1, 3) == 0b10
    assert extract(0b11010010, 8, 3, 8) == 0b10010
    assert extract(0b10000000_00000001, 16, 0, 16) == 0b10000000_00000001


def test_extract_empty_range():
    assert extract(0b11111111, 8, 4, 4) == 0


# -----------------------------------------------------------------------------

@pytest.mark.parametrize(("x", "expected"), [
    (0b00000000, [0, 0, 0, 0, 0, 0, 0, 0]),
    (0b10000000, [1, 0, 0, 0, 0, 0, 0, 0]),
    (0b00000001, [0, 0, 0, 0, 0, 0, 0, 1]),
    (0b01101000, [0, 1, 1, 0, 1, 0, 0, 0]),
    (0b11111111, [1, 1, 1, 1, 1, 1, 1, 1])
])
def test_bit(x, expected):
    assert [bit(x, i) for i in range(8)] == expected
