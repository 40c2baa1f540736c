import logging
from functools import reduce

from binstr.common import (
    BYTE_SIZE, ZERO, ONE,
    InvalidDigit, MalformedLength
)
from binstr.utils import group, strip_newline


log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def decode(digits: str, strip: bool = True) -> bytes:
    if strip is True:
        digits = strip_newline(digits)

    if len(digits) % BYTE_SIZE != 0:
        raise MalformedLength(len(digits))

    log.debug("Decoding %d binary digits", len(digits))

    windows = group(digits_to_bits(digits), BYTE_SIZE)

    return bytes(bits_to_byte(bits) for bits in windows)


# -----------------------------------------------------------------------------

def digits_to_bits(digits: str) -> list[bool]:
    bits = []
    for position, digit in enumerate(digits):
        if digit == ONE:
            bits.append(True)
        elif digit == ZERO:
            bits.append(False)
        else:
            raise InvalidDigit(digit, position)
    return bits


def bits_to_byte(bits: list[bool]) -> int:
    """
    Fold the bits of a window into a byte, most significant bit first.

    >>> bits_to_byte([False, True, False, False, False, False, False, True])
    65
    """
    assert len(bits) == BYTE_SIZE
    return reduce(lambda acc, b: (acc << 1) | int(b), bits, 0)
