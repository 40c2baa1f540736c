from enum import Enum


# -----------------------------------------------------------------------------

BYTE_SIZE = 8

ZERO = '0'
ONE = '1'
NEWLINE = '\n'


# -----------------------------------------------------------------------------

class Mode(Enum):
    Encode = 'encode'
    Decode = 'decode'


# -----------------------------------------------------------------------------

class BinstrError(ValueError):
    "Base class for errors raised while transforming the input."


class MalformedLength(BinstrError):
    def __init__(self, length: int):
        super().__init__(
            f"Number of binary digits must be a multiple of {BYTE_SIZE}, "
            f"got {length}."
        )
        self.length = length


class InvalidDigit(BinstrError):
    def __init__(self, digit: str, position: int):
        super().__init__(
            f"Encountered non-binary digit {digit!r} at position {position}."
        )
        self.digit = digit
        self.position = position
