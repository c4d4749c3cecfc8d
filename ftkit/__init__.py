"""Character, memory, string, conversion, formatting, list and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "convert", "output", "printf", "linkedlist", "lines"]