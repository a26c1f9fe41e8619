"""String helpers with the edge-case behaviour of the classic C routines."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_WHITESPACE = " \t\n\v\f\r"
_TERMINATOR = "\0"


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _single_char(ch: str, what: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"{what} must be a single character")
    return ch


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _as_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Decimal text of ``n`` taken as a signed 32-bit integer."""
    return str(_as_int32(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _single_char(sep, "separator")
    return [word for word in text.split(sep) if word]


def strchr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(ch, "character")
    if ch == _TERMINATOR:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(ch, "character")
    if ch == _TERMINATOR:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _non_negative(n, "n")
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _non_negative(size, "size")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)
    

def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed ``len(dst)``, ``dst`` is left as it is and
    the reported length is ``size + len(src)``.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[str], func: Callable[[int, str], str | None]) -> None:
    """Apply ``func(index, char)`` to each character of ``text`` in place.

    A returned character replaces the original; None leaves it unchanged.
    """
    if isinstance(text, str):
        raise TypeError("striteri needs a mutable sequence of characters")
    for index, ch in enumerate(list(text)):
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = _single_char(replacement, "replacement")