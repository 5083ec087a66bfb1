"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

CharLike = Union[int, str]


def _stream(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def putchar(c: CharLike, file: Optional[TextIO] = None) -> None:
    """Write one character to ``file`` (standard output by default)."""
    _stream(file).write(_char(c))


def putstr(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s is None:
        return
    _stream(file).write(s)


def putendl(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    _stream(file).write(s + "\n")


def putnbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``n``."""
    _stream(file).write(str(n))