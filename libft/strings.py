"""String utilities with the semantics of the classic C string routines.

Positions are returned as indexes (or None where nothing is found)
rather than pointers, and functions that would fill a caller's buffer
return the new string instead.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Optional

from libft.chars import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _char(c: int | str) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    return chr(operator.index(c) & 0xFF)


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied string and the full length of src, so truncation
    happened when the length is at least size.
    """
    size = _non_negative(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst so the result fits a buffer of size characters
    including the terminator.

    Returns the resulting string and the length the full concatenation
    would have had (or size + len(src) when dst already fills the buffer).
    """
    size = _non_negative(size, "size")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: int | str) -> Optional[int]:
    """Return the index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == "\0":
        return len(s)
    return None


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Return the index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters by code.

    Returns the difference of the first differing codes, treating the end
    of a string as code 0, or 0 when the compared parts are equal.
    """
    n = _non_negative(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find needle wholly within the first n characters of haystack.

    Returns its index, 0 for an empty needle, or None.
    """
    n = _non_negative(n, "n")
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return up to length characters of s beginning at start.

    A start at or past the end gives an empty string.
    """
    if s is None:
        raise TypeError("substr() needs a string")
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin() needs two strings")
    return s1 + s2


def strtrim(s: str, charset: Optional[str]) -> str:
    """Remove characters found in charset from both ends of s.

    A charset of None returns s unchanged.
    """
    if s is None:
        raise TypeError("strtrim() needs a string")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split s on the character sep, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character.

    func is called from the last character to the first.
    """
    if s is None or func is None:
        raise TypeError("strmapi() needs a string and a function")
    mapped = [func(i, s[i]) for i in reversed(range(len(s)))]
    return "".join(reversed(mapped))


def striteri(s: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call func(index, item) on each item of s in order, in place.

    A return value other than None replaces the item at that index.
    """
    if s is None or func is None:
        raise TypeError("striteri() needs a sequence and a function")
    for i, item in enumerate(s):
        result = func(i, item)
        if result is not None:
            s[i] = result


def atoi(s: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted; parsing stops at the first non-digit.
    The result wraps to a 32-bit signed integer.
    """
    chars = iter(s)
    sign = 1
    result = 0
    ch = next(chars, "")
    while ch and is_space(ch):
        ch = next(chars, "")
    if ch in ("-", "+"):
        if ch == "-":
            sign = -1
        ch = next(chars, "")
    while ch and is_digit(ch):
        result = result * 10 + ord(ch) - ord("0")
        ch = next(chars, "")
    value = (result * sign) & 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit a 32-bit signed integer")
    return str(n)