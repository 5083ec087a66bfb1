"""Unsigned numbers in any base, and the padding shared by the octal and hex conversions."""

from __future__ import annotations

from .spec import ConversionSpec

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base(value: int, base: int, upper: bool = False) -> str:
    """Digits of ``value`` in ``base``; zero gives the empty string.

    Letters stand for digits above 9, in capitals when ``upper`` is set.
    """
    if not 2 <= base <= len(_ALPHABET):
        raise ValueError(f"base must be between 2 and {len(_ALPHABET)}, got {base}")
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    alphabet = _ALPHABET.upper() if upper else _ALPHABET
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(alphabet[remainder])
    return "".join(reversed(digits))


def pad_left(digits: str, spec: ConversionSpec) -> str:
    """Left-justify ``digits``: zero-fill to the precision, then space-fill to the width.

    Without an explicit precision a minimum of one digit applies.
    """
    precision = spec.precision if spec.has_precision else 1
    body = "0" * max(precision - len(digits), 0) + digits
    return body.ljust(spec.width)


def pad_empty(conversion: str, width: int) -> str:
    """Render a zero value printed with no digits.

    'p' keeps its "0x" prefix and 'O' (alternate octal) keeps a single "0";
    the rest of ``width`` is filled with leading spaces.
    """
    prefix = ""
    if conversion == "p":
        prefix = "0x"
        width -= 2
    elif conversion == "O":
        prefix = "0"
    return " " * max(width, 0) + prefix