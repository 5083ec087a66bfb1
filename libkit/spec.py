"""Parsing of the flags, width, precision and length part of a conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

_CONTROL_CHARS = "#0- +lhjzLt."
_FLAG_CHARS = "#0- +"
_DIGITS = "0123456789"


@dataclass
class ConversionSpec:
    """The options read between '%' and the conversion character."""

    alternate: bool = False
    zero: bool = False
    left: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int = 0
    has_precision: bool = False
    h: bool = False
    hh: bool = False
    l: bool = False  # noqa: E741
    ll: bool = False
    j: bool = False
    z: bool = False


def _char_at(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _digit_run(fmt: str, pos: int) -> str:
    end = pos
    while end < len(fmt) and fmt[end] in _DIGITS:
        end += 1
    return fmt[pos:end]


def _read_number(spec: ConversionSpec, fmt: str, pos: int) -> int:
    if fmt[pos] == ".":
        pos += 1
        if _char_at(fmt, pos) == "-":
            pos += 1
        digits = _digit_run(fmt, pos)
        spec.has_precision = True
        spec.precision = int(digits) if digits else 0
    else:
        digits = _digit_run(fmt, pos)
        spec.width = int(digits) if digits else 0
    return pos + len(digits)


def _read_length(spec: ConversionSpec, fmt: str, pos: int) -> int:
    letter = fmt[pos]
    pos += 1
    doubled = _char_at(fmt, pos) == letter
    if doubled:
        pos += 1
    if letter == "h":
        if doubled:
            spec.hh = True
        else:
            spec.h = True
    elif doubled:
        spec.ll = True
    else:
        spec.l = True
    return pos


def _read_flags(spec: ConversionSpec, fmt: str, pos: int) -> int:
    for flag, attr in (("#", "alternate"), ("0", "zero"), ("-", "left"),
                       (" ", "space"), ("+", "plus")):
        if _char_at(fmt, pos) == flag:
            setattr(spec, attr, True)
            pos += 1
    return pos


def parse_spec(fmt: str, pos: int) -> Tuple[ConversionSpec, int]:
    """Parse options starting at ``pos`` (just after '%').

    Returns the spec and the index of the first character not consumed,
    which is the conversion character if one follows.
    """
    spec = ConversionSpec()
    while True:
        ch = _char_at(fmt, pos)
        if not ch or (ch not in _CONTROL_CHARS and ch not in _DIGITS):
            break
        if ch in "123456789.":
            pos = _read_number(spec, fmt, pos)
        if _char_at(fmt, pos) in ("h", "l"):
            pos = _read_length(spec, fmt, pos)
        while _char_at(fmt, pos) and _char_at(fmt, pos) in _FLAG_CHARS:
            pos = _read_flags(spec, fmt, pos)
        if _char_at(fmt, pos) in ("L", "t"):
            pos += 1
        ch = _char_at(fmt, pos)
        if ch == "j":
            spec.j = True
            pos += 1
        elif ch == "z":
            spec.z = True
            pos += 1
    return spec, pos