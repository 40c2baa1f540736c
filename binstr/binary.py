from binstr.common import BYTE_SIZE


# -----------------------------------------------------------------------------

def mask(n: int) -> int:
    """
    >>> bin(mask(0))
    '0b0'
    >>> bin(mask(1))
    '0b1'
    >>> bin(mask(8))
    '0b11111111'
    """
    return (1 << n) - 1


def extract(x: int, size: int, start: int, stop: int) -> int:
    """
    >>> bin(extract(0b1, 1, 0, 1))
    '0b1'
    >>> bin(extract(0b10101010, 8, 0, 8))
    '0b10101010'
    >>> bin(extract(0b10101010, 8, 2, 5))
    '0b101'
    """
    assert 0 <= start <= stop <= size
    return (x >> (size - stop)) & mask(stop - start)


def bit(x: int, i: int) -> int:
    """
    Return the i-th bit of a byte, counting from the most significant one.

    >>> [bit(0b01000001, i) for i in range(8)]
    [0, 1, 0, 0, 0, 0, 0, 1]
    """
    return extract(x, BYTE_SIZE, i, i + 1)
