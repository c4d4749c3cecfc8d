"""Byte-buffer helpers: fill, copy, move, search and compare.

Buffers are ``bytearray`` objects (or writable memoryviews) for the
operations that modify, and any bytes-like object for those that read.
Lengths that are negative or that reach past the end of a buffer raise
``ValueError``.
"""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
Buffer = Union[bytearray, memoryview]


def _check_span(length: int, offset: int, size: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if offset < 0:
        raise ValueError(f"{what} offset must not be negative, got {offset}")
    if offset + length > size:
        raise ValueError(
            f"{what} span of {length} bytes at offset {offset} exceeds buffer of {size} bytes"
        )


def memset(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_span(length, 0, len(buf), "buffer")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Buffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: Buffer, src: BytesLike, length: int) -> Buffer:
    """Copy the first ``length`` bytes of ``src`` into the start of ``dest``."""
    _check_span(length, 0, len(dest), "destination")
    _check_span(length, 0, len(src), "source")
    dest[:length] = bytes(src[:length])
    return dest


def memmove(buf: Buffer, dest: int, src: int, length: int) -> Buffer:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    copied out first.
    """
    size = len(buf)
    _check_span(length, dest, size, "destination")
    _check_span(length, src, size, "source")
    if length:
        buf[dest:dest + length] = bytes(buf[src:src + length])
    return buf


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` (mod 256) within
    the first ``length`` bytes of ``data``, or None if there is none."""
    _check_span(length, 0, len(data), "buffer")
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, length: int) -> int:
    """Compare the first ``length`` bytes of ``a`` and ``b`` as unsigned bytes.

    Returns the difference ``a[i] - b[i]`` at the first differing byte, or 0.
    """
    _check_span(length, 0, len(a), "first")
    _check_span(length, 0, len(b), "second")
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0