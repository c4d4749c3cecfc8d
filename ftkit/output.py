"""Write characters, strings and numbers to a text stream."""

from typing import TextIO, Union

CharLike = Union[str, int]


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _as_str(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s


def put_char_fd(c: CharLike, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    stream.write(_as_char(c))


def put_str_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``."""
    stream.write(_as_str(s))


def put_endl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    stream.write(_as_str(s) + "\n")


def put_nbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    stream.write(str(int(n)))