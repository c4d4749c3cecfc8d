"""String helpers: length, bounded copy and concatenation, searching,
comparison, slicing, trimming, splitting and per-character mapping.

Searches return an index into the string (or None) rather than a
reference into it. The C-style terminator is modelled where it changes
the result: searching for ``"\\0"`` finds the position just past the end,
and comparisons treat the end of a string as a ``"\\0"`` character.
"""

from itertools import takewhile
from typing import Callable, Iterable, MutableSequence, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: Optional[str]) -> int:
    """Return the length of ``s``; None counts as empty."""
    return 0 if s is None else len(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, which tells the caller whether truncation happened.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the untruncated result would
    have had. When ``size`` does not exceed ``len(dst)``, ``dst`` is returned
    unchanged and the length reported is ``size + len(src)``.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: Optional[str], c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for ``"\\0"`` yields ``len(s)``, the terminator's position.
    """
    if s is None:
        return None
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for ``"\\0"`` yields ``len(s)``, the terminator's position.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the code points at the first mismatch, with
    the end of a string counting as code point 0, or 0 when they match.
    """
    _non_negative(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of the first ``little`` lying wholly within the first
    ``length`` characters of ``big``, or None. An empty ``little`` matches at 0."""
    _non_negative(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A ``start`` past the end yields an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return f"{s1}{s2}"


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``.

    Returns None if either argument is None.
    """
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty fields."""
    ch = _char(sep)
    return [part for part in s.split(ch) if part]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Return a new string built from ``f(index, char)`` for each character.

    Returns None if either argument is None.
    """
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on each item of the mutable sequence ``s``.

    When ``f`` returns a value other than None, it replaces the item in
    place. Does nothing if either argument is None.
    """
    if s is None or f is None:
        return
    for i, ch in enumerate(list(s)):
        replacement = f(i, ch)
        if replacement is not None:
            s[i] = replacement


def matrix_len(rows: Iterable[Optional[object]]) -> int:
    """Count the entries of ``rows`` before the first None terminator."""
    return sum(1 for _ in takewhile(lambda row: row is not None, rows))