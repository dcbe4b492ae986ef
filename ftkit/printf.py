"""A small formatted-output facility with the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from ftkit.output import put_str

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)
_POINTER_MASK = (1 << 64) - 1

_FORMAT_PIECE = re.compile(r"%(.)|([^%]+)|(%)", re.DOTALL)


def _require_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _as_unsigned(n: int) -> int:
    return _require_int(n) & _UINT_MASK


def _as_signed(n: int) -> int:
    value = _as_unsigned(n)
    return value - (1 << _INT_BITS) if value & _INT_SIGN else value


def format_char(ch: str | int) -> str:
    """Return the character for ``ch``.

    A one-character string is used as is; an int is reduced to its low byte.
    """
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    return chr(_require_int(ch) & 0xFF)


def format_str(s: str | None) -> str:
    """Return ``s``, or ``(null)`` when it is None."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s


def format_int(n: int) -> str:
    """Return ``n`` as a signed 32-bit decimal integer."""
    return f"{_as_signed(n):d}"


def format_unsigned(n: int) -> str:
    """Return ``n`` as an unsigned 32-bit decimal integer."""
    return f"{_as_unsigned(n):d}"


def format_hex(n: int, upper: bool = False) -> str:
    """Return ``n`` as an unsigned 32-bit hexadecimal integer without prefix."""
    return f"{_as_unsigned(n):{'X' if upper else 'x'}}"


def format_pointer(addr: int | None) -> str:
    """Return a 64-bit address as ``0x`` and lowercase hex, or ``(nil)`` for a null one."""
    if addr is None:
        return "(nil)"
    value = _require_int(addr) & _POINTER_MASK
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, False),
    "X": lambda n: format_hex(n, True),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    for match in _FORMAT_PIECE.finditer(fmt):
        spec, literal = match.group(1), match.group(2)
        if literal is not None:
            yield literal
            continue
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        formatter = _CONVERSIONS.get(spec)
        if formatter is None:
            # Unknown conversions produce nothing and take no argument.
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        yield formatter(arg)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    put_str(text, stream)
    return len(text)