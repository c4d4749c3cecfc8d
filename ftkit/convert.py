"""Conversions between decimal text and integers."""


def _is_space(ch: str) -> bool:
    """Return True for the C whitespace characters: tab to carriage return, and space."""
    return ch == " " or "\t" <= ch <= "\r"


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Leading whitespace is skipped and a single ``+`` or ``-`` sign is
    accepted. Parsing stops at the first character that is not a digit.
    Text that holds no number yields 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    pos = 0
    end = len(text)
    while pos < end and _is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < end and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with a leading ``-`` if negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(int(n))