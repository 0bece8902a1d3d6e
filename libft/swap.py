"""Exchanging two values."""

from __future__ import annotations

from typing import Any


def swap(a: Any, b: Any) -> tuple[Any, Any]:
    """Return the two values in exchanged order."""
    return b, a