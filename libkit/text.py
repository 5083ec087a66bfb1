"""The character and string conversions, narrow and wide."""

from __future__ import annotations

from typing import Optional, Union

from .spec import ConversionSpec

# Largest number of bytes a character may take, as in a UTF-8 locale.
MB_CUR_MAX = 4

_NULL_TEXT = "(null)"
_NUL = "\0"


def _check_code(code_point: int) -> None:
    if isinstance(code_point, bool) or not isinstance(code_point, int):
        raise TypeError(f"expected an int code point, got {type(code_point).__name__}")
    if code_point < 0:
        raise ValueError(f"code point must not be negative, got {code_point}")


def _terminated(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s.split(_NUL, 1)[0]


def utf8_length(code_point: int) -> int:
    """Number of bytes the UTF-8 encoding of ``code_point`` takes (1 to 4)."""
    _check_code(code_point)
    if code_point <= 0x7F:
        return 1
    if code_point <= 0x7FF:
        return 2
    if code_point <= 0xFFFF:
        return 3
    return 4


def encode_utf8(code_point: int) -> bytes:
    """UTF-8 bytes of ``code_point``; bits beyond 21 are dropped."""
    size = utf8_length(code_point)
    cp = code_point
    if size == 1:
        return bytes([cp])
    if size == 2:
        return bytes([0xC0 | ((cp >> 6) & 0x1F), 0x80 | (cp & 0x3F)])
    if size == 3:
        return bytes([
            0xE0 | ((cp >> 12) & 0x0F),
            0x80 | ((cp >> 6) & 0x3F),
            0x80 | (cp & 0x3F),
        ])
    return bytes([
        0xF0 | ((cp >> 18) & 0x07),
        0x80 | ((cp >> 12) & 0x3F),
        0x80 | ((cp >> 6) & 0x3F),
        0x80 | (cp & 0x3F),
    ])


def format_string(s: Optional[str], spec: ConversionSpec) -> str:
    """Lay out a string; ``None`` prints as "(null)" and a NUL ends the text.

    The precision limits the number of characters; the '0' flag pads with
    zeros unless the text is left-justified.
    """
    text = _NULL_TEXT if s is None else _terminated(s)
    if spec.has_precision:
        text = text[:spec.precision]
    pad = max(spec.width - len(text), 0)
    if spec.left:
        return text + " " * pad
    return ("0" if spec.zero else " ") * pad + text


def format_wide_string(s: Optional[str], spec: ConversionSpec) -> bytes:
    """Lay out a wide string as UTF-8 bytes.

    The precision limits the number of bytes and never splits a character;
    the width is measured in bytes as well.
    """
    text = _NULL_TEXT if s is None else _terminated(s)
    limit = spec.precision if spec.has_precision else None
    encoded = bytearray()
    for ch in text:
        piece = encode_utf8(ord(ch))
        if limit is not None and len(encoded) + len(piece) > limit:
            break
        encoded += piece
    pad = max(spec.width - len(encoded), 0)
    if spec.left:
        return bytes(encoded) + b" " * pad
    return (b"0" if spec.zero else b" ") * pad + bytes(encoded)


def _as_char(c: Union[int, str]) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def format_char(c: Union[int, str], spec: ConversionSpec) -> str:
    """Lay out a single character.

    A NUL character is always printed last, after its padding, even when
    left-justified.
    """
    ch = _as_char(c)
    pad = max(spec.width - 1, 0)
    if ch == _NUL:
        fill = "0" if spec.zero and not spec.left else " "
        return fill * pad + ch
    if spec.left:
        return ch + " " * pad
    return ("0" if spec.zero else " ") * pad + ch


def format_wide_char(
    code_point: int, spec: ConversionSpec, mb_cur_max: int = MB_CUR_MAX
) -> bytes:
    """Lay out a wide character as bytes.

    A character longer than ``mb_cur_max`` bytes is reduced to its low byte.
    """
    _check_code(code_point)
    if isinstance(mb_cur_max, bool) or not isinstance(mb_cur_max, int) or mb_cur_max < 1:
        raise ValueError(f"mb_cur_max must be a positive int, got {mb_cur_max!r}")
    if code_point == 0:
        fill = b"0" if spec.zero else b" "
        return fill * max(spec.width - 1, 0) + b"\0"
    size = utf8_length(code_point)
    if size != 1 and mb_cur_max < size:
        size = 1
    encoded = bytes([code_point & 0xFF]) if size == 1 else encode_utf8(code_point)
    pad = max(spec.width - size, 0)
    if spec.left:
        return encoded + b" " * pad
    return (b"0" if spec.zero else b" ") * pad + encoded