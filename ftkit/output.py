"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(ch: str, stream: TextIO | None = None) -> None:
    """Write the single character ``ch`` to ``stream`` (standard output by default)."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    _target(stream).write(ch)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` to ``stream`` (standard output by default)."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(f"{n:d}")