"""Formatted output driven by a printf-style format string."""

from __future__ import annotations

import dataclasses
import sys
from typing import Any, Iterator, Optional, Union

from .hexadecimal import format_hex, format_pointer, hex_argument
from .integers import format_signed, format_unsigned, signed_argument, unsigned_argument
from .octal import format_octal, octal_argument
from .radix import to_base
from .spec import ConversionSpec, parse_spec
from .text import format_char, format_string, format_wide_char, format_wide_string

_CAPITALS = "DOUSC"
_WINT_MODULUS = 1 << 32

Text = Union[str, bytes, bytearray]


def _byte_text(value: Text) -> str:
    """A str holding one character per byte of ``value`` (str is taken as UTF-8)."""
    if isinstance(value, str):
        return value.encode("utf-8").decode("latin-1")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def _narrow(text: str) -> bytes:
    return text.encode("latin-1")


def _take(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{conversion}") from None


def _code_point(arg: Any) -> int:
    if isinstance(arg, bool):
        raise TypeError("expected a character, got bool")
    if isinstance(arg, int):
        return arg
    if isinstance(arg, str) and len(arg) == 1:
        return ord(arg)
    if isinstance(arg, (bytes, bytearray)) and len(arg) == 1:
        return arg[0]
    raise TypeError(f"expected a character, got {arg!r}")


def _optional_text(arg: Any) -> Optional[str]:
    if arg is None:
        return None
    return _byte_text(arg)


def _wide_text(arg: Any) -> Optional[str]:
    if arg is None or isinstance(arg, str):
        return arg
    raise TypeError(f"expected str for a wide string, got {type(arg).__name__}")


def _convert(conversion: str, spec: ConversionSpec, args: Iterator[Any]) -> bytes:
    if conversion in "diD":
        if conversion == "D":
            spec = dataclasses.replace(spec, j=False, z=False)
        value = signed_argument(spec, conversion, _take(args, conversion))
        return _narrow(format_signed(value, spec))
    if conversion in "cC%":
        if conversion == "%":
            return _narrow(format_char("%", spec))
        code = _code_point(_take(args, conversion))
        if spec.l:
            return format_wide_char(code % _WINT_MODULUS, spec)
        return _narrow(format_char(chr(code & 0xFF), spec))
    if conversion in "uU":
        value = unsigned_argument(spec, conversion, _take(args, conversion))
        return _narrow(format_unsigned(value, spec))
    if conversion in "xX":
        value = hex_argument(spec, conversion, _take(args, conversion))
        return _narrow(format_hex(to_base(value, 16, conversion == "X"), spec, conversion))
    if conversion in "oO":
        value = octal_argument(spec, conversion, _take(args, conversion))
        return _narrow(format_octal(to_base(value, 8), spec))
    if conversion in "sS":
        arg = _take(args, conversion)
        if spec.l:
            return format_wide_string(_wide_text(arg), spec)
        return _narrow(format_string(_optional_text(arg), spec))
    if conversion == "p":
        return _narrow(format_pointer(_take(args, conversion), spec))
    # Any other character is printed like %c, with the same padding.
    return _narrow(format_char(conversion, spec))


def render(fmt: Text, *args: Any) -> bytes:
    """Return the bytes that :func:`printf` would write for ``fmt`` and ``args``.

    A str format is taken as UTF-8; the format ends at its first NUL.
    Surplus arguments are ignored; too few raise TypeError.
    """
    text = _byte_text(fmt).split("\0", 1)[0]
    arguments = iter(args)
    out = bytearray()
    pos = 0
    while pos < len(text):
        percent = text.find("%", pos)
        if percent < 0:
            out += _narrow(text[pos:])
            break
        out += _narrow(text[pos:percent])
        spec, pos = parse_spec(text, percent + 1)
        if pos >= len(text):
            break
        conversion = text[pos]
        pos += 1
        if conversion in _CAPITALS:
            spec.l = True
        out += _convert(conversion, spec, arguments)
    return bytes(out)


def printf(fmt: Text, *args: Any) -> int:
    """Write the formatted output to standard output and return the number of bytes."""
    data = render(fmt, *args)
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode("utf-8", errors="replace"))
    else:
        stream.flush()
        buffer.write(data)
        buffer.flush()
    return len(data)