"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

import re

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code in the ASCII range 0-127."""
    return 0 <= _code(c) < 128


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: int | str, low: int, high: int, shift: int) -> int | str:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; other values pass through.

    A string argument gives a string back, an int gives an int.
    """
    return _convert_case(c, 97, 122, -32)


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; other values pass through.

    A string argument gives a string back, an int gives an int.
    """
    return _convert_case(c, 65, 90, 32)


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text with no number gives 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return f"{n:d}"