"""Writing characters, strings and numbers to file descriptors.

A negative descriptor is ignored and nothing is written.
"""

from __future__ import annotations

import operator
import os

from libft.strings import itoa


def _write(fd: int, text: str) -> None:
    data = text.encode("utf-8")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def put_char(c: int | str, fd: int) -> None:
    """Write a single character to fd."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        ch = c
    else:
        ch = chr(operator.index(c) & 0xFF)
    if fd < 0:
        return
    _write(fd, ch)


def put_str(s: str, fd: int) -> None:
    """Write s to fd."""
    if s is None:
        raise TypeError("put_str() needs a string")
    if fd < 0:
        return
    _write(fd, s)


def put_endl(s: str, fd: int) -> None:
    """Write s followed by a newline to fd."""
    if s is None:
        raise TypeError("put_endl() needs a string")
    if fd < 0:
        return
    _write(fd, s + "\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to fd."""
    text = itoa(n)
    if fd < 0:
        return
    _write(fd, text)