"""Length, searching and comparison of NUL-terminated text."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return ``s`` up to, but not including, its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise TypeError(f"expected an int or a one-character str, got {c!r}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator's index for NUL; None if absent."""
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator's index for NUL; None if absent."""
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; 0 for an empty needle; None if absent."""
    hay = _terminated(haystack)
    pin = _terminated(needle)
    if not pin:
        return 0
    index = hay.find(pin)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    hay = _terminated(haystack)
    pin = _terminated(needle)
    if not pin:
        return 0
    index = hay.find(pin)
    if index < 0 or index + len(pin) > length:
        return None
    return index


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; returns a code difference or 0."""
    if n <= 0:
        return 0
    a = _terminated(s1)[:n]
    b = _terminated(s2)[:n]
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return _terminated(s1) == _terminated(s2)


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are given and agree in their first ``n`` characters."""
    if s1 is None or s2 is None:
        return False
    return strncmp(s1, s2, n) == 0