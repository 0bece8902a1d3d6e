"""ASCII character classification and case conversion.

Every function accepts a one-character string or an integer character
code. The classifiers return a bool. The converters return a value of
the same kind they were given.
"""

from __future__ import annotations

import operator

CharLike = "int | str"


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, from space to tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def is_space(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return ord("\t") <= code <= ord("\r") or code == ord(" ")


def _convert(c: int | str, low: str, high: str, shift: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    return _convert(c, "a", "z", ord("A") - ord("a"))


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    return _convert(c, "A", "Z", ord("a") - ord("A"))