"""ASCII character, byte-buffer, string, linked-list, output and swap utilities."""

__version__ = "1.0.0"
__all__ = ["chars", "memory", "strings", "lists", "output", "swap"]