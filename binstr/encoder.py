import logging

from binstr.binary import bit
from binstr.common import BYTE_SIZE, ZERO, ONE


log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def encode(data: bytes) -> str:
    log.debug("Encoding %d bytes", len(data))
    return ''.join(encode_byte(x) for x in data)


def encode_byte(x: int) -> str:
    """
    >>> encode_byte(0x41)
    '01000001'
    >>> encode_byte(0)
    '00000000'
    >>> encode_byte(255)
    '11111111'
    """
    assert 0 <= x < 256
    return ''.join(ONE if bit(x, i) else ZERO for i in range(BYTE_SIZE))
