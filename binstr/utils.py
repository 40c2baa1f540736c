from typing import TypeVar, overload

from binstr.common import NEWLINE


T = TypeVar('T')


@overload
def group(xs: str, n: int) -> list[str]:
    ...


@overload
def group(xs: bytes, n: int) -> list[bytes]:
    ...


@overload
def group(xs: list[T], n: int) -> list[list[T]]:
    ...


def group(xs, n):
    """
    >>> group([1, 2, 3, 4, 5, 6], 2)
    [[1, 2], [3, 4], [5, 6]]
    >>> group('0100000101', 8)
    ['01000001', '01']
    >>> group('', 8)
    []
    """
    if n < 1:
        raise ValueError('n must be greater than zero')
    return [xs[i:i+n] for i in range(0, len(xs), n)]


@overload
def strip_newline(s: str) -> str:
    ...


@overload
def strip_newline(s: bytes) -> bytes:
    ...


def strip_newline(s):
    """
    Remove a single trailing newline, if any.

    >>> strip_newline('01000001\\n')
    '01000001'
    >>> strip_newline('01000001\\n\\n')
    '01000001\\n'
    >>> strip_newline(b'hello\\n')
    b'hello'
    >>> strip_newline('01000001')
    '01000001'
    """
    newline = NEWLINE if isinstance(s, str) else NEWLINE.encode()
    if s.endswith(newline):
        return s[:-len(newline)]
    return s
