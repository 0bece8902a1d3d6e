"""Byte-level operations on buffers.

Buffers are objects that support the buffer protocol (bytes, bytearray,
memoryview). Writing functions need a writable buffer; a memoryview
slice stands in for a pointer into the middle of a buffer.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _view(buf: BytesLike) -> memoryview:
    view = memoryview(buf)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _check(view: memoryview, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(view):
        raise ValueError(f"{what} holds {len(view)} bytes, {n} requested")


def memset(buf: BytesLike, c: int, n: int) -> BytesLike:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    view = _view(buf)
    _check(view, n, "buffer")
    view[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: BytesLike, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memchr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of c among
    the first n bytes, or None."""
    view = _view(buf)
    _check(view, n, "buffer")
    index = bytes(view[:n]).find(c & 0xFF)
    return None if index < 0 else index


def _copy(
    dest: Optional[BytesLike], src: Optional[BytesLike], n: int
) -> Optional[BytesLike]:
    if dest is None and src is None:
        return None
    dview = _view(dest)
    sview = _view(src)
    _check(dview, n, "destination")
    _check(sview, n, "source")
    # Snapshot the source first so overlapping regions copy correctly.
    dview[:n] = bytes(sview[:n])
    return dest


def memcpy(
    dest: Optional[BytesLike], src: Optional[BytesLike], n: int
) -> Optional[BytesLike]:
    """Copy n bytes from src into dest and return dest.

    Returns None when both dest and src are None.
    """
    return _copy(dest, src, n)


def memmove(
    dest: Optional[BytesLike], src: Optional[BytesLike], n: int
) -> Optional[BytesLike]:
    """Copy n bytes from src into dest, safe for overlapping regions.

    Returns dest, or None when both dest and src are None.
    """
    return _copy(dest, src, n)


def memcmp(s1: BytesLike, s2: BytesLike, n: int) -> int:
    """Compare the first n bytes as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    v1 = _view(s1)
    v2 = _view(s2)
    _check(v1, n, "first buffer")
    _check(v2, n, "second buffer")
    for a, b in zip(v1[:n], v2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    A zero count or size yields a one-byte zeroed buffer. Raises
    OverflowError when the total exceeds the platform's size limit.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    if nmemb > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(nmemb * size)