from binstr.utils import group, strip_newline


# -----------------------------------------------------------------------------

def test_group_str():
    assert group('0000000011111111', 8) == ['00000000', '11111111']


def test_group_short_tail():
    assert group([1, 2, 3], 2) == [[1, 2], [3]]


def test_group_empty():
    assert group('', 8) == []


# -----------------------------------------------------------------------------

def test_strip_newline_single():
    assert strip_newline('01000001\n') == '01000001'


def test_strip_newline_only_one():
    assert strip_newline('\n\n') == '\n'


def test_strip_newline_keeps_carriage_return():
    assert strip_newline('01000001\r\n') == '01000001\r'


def test_strip_newline_nothing_to_strip():
    assert strip_newline('') == ''
    assert strip_newline('01000001') == '01000001'


def test_strip_newline_bytes():
    assert strip_newline(b'hello\n') == b'hello'
    assert strip_newline(b'hello\n\n') == b'hello\n'
    assert strip_newline(b'hello') == b'hello'
