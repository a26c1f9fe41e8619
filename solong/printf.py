"""Minimal printf-style output with the conversions the game uses."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_NULL_TEXT = "(null)"
_NIL_POINTER = "(nil)"


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _as_uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _as_uint64(value: int) -> int:
    return value & 0xFFFFFFFFFFFFFFFF


def _to_base(value: int, digits: str) -> str:
    base = len(digits)
    out = []
    while True:
        value, rem = divmod(value, base)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def number_length(n: int) -> int:
    """Number of characters needed to print ``n`` in decimal, sign included."""
    if n == 0:
        return 1
    return len(str(abs(n))) + (1 if n < 0 else 0)


def put_char(ch: str | int, stream: TextIO | None = None) -> int:
    """Write a single character and return the number written (1)."""
    if isinstance(ch, int):
        ch = chr(ch & 0xFF)
    if len(ch) != 1:
        raise ValueError("put_char expects exactly one character")
    _stream(stream).write(ch)
    return 1


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` (or ``(null)`` for None) and return its length."""
    if text is None:
        text = _NULL_TEXT
    _stream(stream).write(text)
    return len(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` followed by a newline; return the characters written."""
    return put_str(text, stream) + put_char("\n", stream)


def put_number(n: int, stream: TextIO | None = None) -> int:
    """Write ``n`` as a signed 32-bit decimal and return its printed length."""
    n = _as_int32(n)
    _stream(stream).write(str(n))
    return number_length(n)


def _next_arg(args: list[Any]) -> Any:
    if not args:
        raise TypeError("not enough arguments for format string")
    return args.pop(0)


def _convert(spec: str, args: list[Any]) -> tuple[str, int]:
    if spec in ("d", "i"):
        value = _as_int32(int(_next_arg(args)))
        return str(value), number_length(value)
    if spec == "s":
        value = _next_arg(args)
        text = _NULL_TEXT if value is None else str(value)
        return text, len(text)
    if spec == "c":
        value = _next_arg(args)
        if isinstance(value, int):
            value = chr(value & 0xFF)
        if not isinstance(value, str) or len(value) != 1:
            raise TypeError("%c requires a single character or an integer")
        return value, 1
    if spec == "u":
        text = str(_as_uint32(int(_next_arg(args))))
        return text, len(text)
    if spec == "x":
        text = _to_base(_as_uint32(int(_next_arg(args))), _HEX_LOWER)
        return text, len(text)
    if spec == "X":
        text = _to_base(_as_uint32(int(_next_arg(args))), _HEX_UPPER)
        return text, len(text)
    if spec == "p":
        value = _next_arg(args)
        address = 0 if value is None else _as_uint64(int(value))
        if address == 0:
            return _NIL_POINTER, len(_NIL_POINTER)
        text = "0x" + _to_base(address, _HEX_LOWER)
        return text, len(text)
    if spec == "%":
        return "%", 1
    # Unknown or missing conversion: nothing is written, one is counted.
    return "", 1


def _render(fmt: str, args: tuple[Any, ...]) -> tuple[str, int]:
    pending = list(args)
    pieces: list[str] = []
    count = 0
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            spec = next(chars, "")
            text, used = _convert(spec, pending)
            if not spec:
                break
        else:
            text, used = ch, 1
        pieces.append(text)
        count += used
    return "".join(pieces), count


def cformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with ``%d %i %s %c %u %x %X %p %%`` conversions applied."""
    return _render(fmt, args)[0]


def cprint(fmt: str, *args: Any) -> int:
    """Print a formatted string to standard output and return the count."""
    text, count = _render(fmt, args)
    sys.stdout.write(text)
    return count