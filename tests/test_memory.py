import sys

import pytest

from libft.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 2)
    assert result is buf
    assert buf[:2] == b"xx"
    assert buf[2:] == b"llo"


def test_memset_uses_low_byte():
    buf = bytearray(b"zz")
    memset(buf, ord("A") + 256, 1)
    assert buf == bytearray(b"Az")


def test_memset_zero_count_changes_nothing():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == bytearray(b"abc")


def test_memset_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_memset_read_only_raises():
    with pytest.raises(TypeError):
        memset(b"ab", 0, 1)


def test_bzero():
    buf = bytearray(b"abcd")
    bzero(buf, 3)
    assert buf[:3] == bytearray(3)
    assert buf[3:] == b"d"


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_low_byte():
    data = b"hello"
    assert memchr(data, ord("o") + 256, len(data)) == data.index(b"o")


def test_memchr_respects_count():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_finds_nul():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == data.index(b"\x00")


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest[:3] == b"abc"
    assert dest[3:] == b"..."


def test_memcpy_both_none():
    assert memcpy(None, None, 4) is None
    assert memmove(None, None, 4) is None


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view[:4], 4)
    assert result is dest
    assert bytes(result) == original[:4]
    assert buf[:2] == original[:2]
    assert buf[2:] == original[:4]


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    view = memoryview(buf)
    dest = view[:4]
    result = memmove(dest, view[2:], 4)
    assert result is dest
    assert bytes(result) == original[2:]
    assert buf[:4] == original[2:]
    assert buf[4:] == original[4:]


def test_memcmp_equal_prefix():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) == 0xFF
    assert memcmp(b"\x00", b"\x80", 1) < 0


def test_memcmp_antisymmetric():
    a, b = b"kitten", b"kitchen"
    assert memcmp(a, b, 6) == -memcmp(b, a, 6)


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_request_gives_one_byte():
    assert calloc(0, 5) == bytearray(1)
    assert calloc(5, 0) == bytearray(1)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(sys.maxsize, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)