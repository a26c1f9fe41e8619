"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(n: int, *sizes: int) -> int:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for size in sizes:
        if n > size:
            raise IndexError("byte count runs past the end of a buffer")
    return n


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer holding ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(
    dest: bytearray | None, src: Sequence[int] | bytes | None, n: int
) -> bytearray | None:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``.

    When neither buffer is given, nothing is copied and None comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    if dest == src or n == 0:
        return buffer
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: Sequence[int] | bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_count(n, len(data))
    target = value & 0xFF
    for index, byte in enumerate(data[:n]):
        if byte == target:
            return index
    return None


def memcmp(first: Sequence[int] | bytes, second: Sequence[int] | bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first mismatch, or 0."""
    _check_count(n, len(first), len(second))
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0