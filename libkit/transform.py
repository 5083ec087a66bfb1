"""Building new strings out of existing ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Callable, List, Optional, Union

CharLike = Union[int, str]

_TRIM_CHARS = " \n\t"
_NUL = "\0"


def _delimiter(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str) and len(c) <= 1:
        return c
    raise TypeError(f"expected an int or a one-character str, got {c!r}")


def strsub(s: Optional[str], start: int, length: int) -> str:
    """Return ``length`` characters of ``s`` starting at ``start``.

    A missing string yields an empty result; a span past the end of ``s``
    raises ValueError.
    """
    if start < 0 or length < 0:
        raise ValueError(f"negative start or length: start={start}, length={length}")
    if s is None:
        return ""
    if start + length > len(s):
        raise ValueError(
            f"span of {length} characters at {start} exceeds string of {len(s)}"
        )
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None if either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: Optional[str]) -> Optional[str]:
    """Remove leading and trailing spaces, newlines and tabs; None if ``s`` is None."""
    if s is None:
        return None
    return s.strip(_TRIM_CHARS)


def strsplit(s: Optional[str], c: CharLike) -> List[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty pieces.

    A missing string or a NUL delimiter yields a single empty string.
    """
    delimiter = _delimiter(c)
    if s is None or delimiter in ("", _NUL):
        return [""]
    return [piece for piece in s.split(delimiter) if piece]


def strmap(s: Optional[str], f: Callable[[str], str]) -> Optional[str]:
    """Apply ``f`` to every character and return the new string; None if ``s`` is None."""
    if s is None:
        return None
    return "".join(f(ch) for ch in s)


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """Apply ``f`` to every index and character; None if ``s`` is None."""
    if s is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striter(s: Optional[str], f: Optional[Callable[[str], object]]) -> None:
    """Call ``f`` on each character of ``s`` in order; nothing happens if either is missing."""
    if s is None or f is None:
        return
    for ch in s:
        f(ch)


def striteri(s: Optional[str], f: Optional[Callable[[int, str], object]]) -> None:
    """Call ``f`` with each index and character of ``s``; nothing happens if either is missing."""
    if s is None or f is None:
        return
    for i, ch in enumerate(s):
        f(i, ch)