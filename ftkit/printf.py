"""A small printf supporting the conversions c, s, d, i, u, p, x, X and %.

Integer conversions follow 32-bit C semantics: ``d`` and ``i`` wrap to a
signed 32-bit value, ``u``, ``x`` and ``X`` to an unsigned 32-bit value,
and ``p`` to a 64-bit address. An unknown conversion character produces
no output and consumes no argument.
"""

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_SIGN32 = 0x80000000

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _integer(arg: Any, spec: str) -> int:
    if not isinstance(arg, int):
        raise TypeError(f"%{spec} requires an integer, got {type(arg).__name__}")
    return int(arg)


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c requires a single character, got {arg!r}")
        return arg
    return chr(_integer(arg, "c") & 0xFF)


def _string(arg: Any) -> str:
    if arg is None:
        return _NULL_STRING
    if not isinstance(arg, str):
        raise TypeError(f"%s requires a string, got {type(arg).__name__}")
    return arg


def _signed(arg: Any) -> str:
    value = _integer(arg, "d") & _MASK32
    if value & _SIGN32:
        value -= _MASK32 + 1
    return str(value)


def _unsigned(arg: Any) -> str:
    return str(_integer(arg, "u") & _MASK32)


def _pointer(arg: Any) -> str:
    if arg is None:
        return _NULL_POINTER
    address = _integer(arg, "p") & _MASK64
    if not address:
        return _NULL_POINTER
    return f"0x{address:x}"


def _hex_lower(arg: Any) -> str:
    return f"{_integer(arg, 'x') & _MASK32:x}"


def _hex_upper(arg: Any) -> str:
    return f"{_integer(arg, 'X') & _MASK32:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "p": _pointer,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_argument(arguments: Iterator[Any], spec: str) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format(fmt: Optional[str], *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    A None format yields an empty string. Surplus arguments are ignored;
    too few raise ``TypeError``.
    """
    if fmt is None:
        return ""
    pieces = []
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_argument(arguments, spec)))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format(fmt, *args)
    target = sys.stdout if stream is None else stream
    if text:
        target.write(text)
    return len(text)