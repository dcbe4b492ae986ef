"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _require(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _require(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _require(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dst: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _require(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: WritableBuffer, src: ReadableBuffer, c: int, n: int) -> int | None:
    """Copy at most ``n`` bytes, stopping after the first byte equal to ``c``.

    Returns the offset in ``dst`` just past the copied ``c``, or None when
    ``c`` was not among the ``n`` bytes, in which case all ``n`` are copied.
    """
    _require(n, dst, src)
    chunk = bytes(src[:n])
    found = chunk.find(c & 0xFF)
    count = n if found < 0 else found + 1
    dst[:count] = chunk[:count]
    return None if found < 0 else count


def memmove(buf: WritableBuffer, dst: int, src: int, n: int) -> WritableBuffer:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if dst + n > len(buf) or src + n > len(buf):
        raise IndexError("region extends past the end of the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: ReadableBuffer, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` in the first ``n`` bytes."""
    _require(n, data)
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _require(n, a, b)
    return next(
        (x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y),
        0,
    )