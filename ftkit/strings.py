"""String searching, comparing, copying, slicing and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _require_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives the index of the end of ``s``.
    """
    _require_char(c)
    if c == _NUL:
        return len(s)
    found = s.find(c)
    return None if found < 0 else found


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives the index of the end of ``s``.
    """
    _require_char(c)
    if c == _NUL:
        return len(s)
    found = s.rfind(c)
    return None if found < 0 else found


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. The match must lie wholly
    within the first ``length`` characters; otherwise None is returned.
    """
    _require_non_negative("length", length)
    if not little:
        return 0
    found = big[:length].find(little)
    return None if found < 0 else found


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the code difference of the first pair that differs, a shorter
    string comparing as if followed by NUL, or 0 when they agree.
    """
    _require_non_negative("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, terminator included.

    Returns the resulting destination and the full length of ``src``; the
    copy was truncated when that length is at least ``size``. A size of 0
    leaves ``dst`` as it was.
    """
    _require_non_negative("size", size)
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a total of ``size`` slots, terminator included.

    Returns the resulting destination and the length the full result would
    have had. When ``dst`` already fills ``size``, nothing is appended and
    the length counted for ``dst`` is ``size``.
    """
    _require_non_negative("size", size)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(charset, str):
        raise TypeError("charset must be a string")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    _require_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str | None, f: Callable[[int, str], str]) -> str:
    """Return a new string of ``f(index, char)`` for each character of ``s``.

    A missing string gives an empty result.
    """
    if s is None:
        return ""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str] | None,
    f: Callable[[int, str], str | None],
) -> None:
    """Call ``f(index, char)`` on each element of ``chars`` in place.

    When ``f`` returns a value, it replaces the element at that index.
    """
    if chars is None:
        return
    for index, ch in enumerate(list(chars)):
        result = f(index, ch)
        if result is not None:
            chars[index] = result