"""ASCII character classification and case conversion."""

from __future__ import annotations


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; other values come back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; other values come back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code