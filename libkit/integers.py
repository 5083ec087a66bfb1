"""Decimal conversions: reading a sized argument and laying out its digits."""

from __future__ import annotations

from .spec import ConversionSpec

_SIGNED_CONVERSIONS = "diD"
_UNSIGNED_CONVERSIONS = "uU"

# Sizes in bits of the C types the length modifiers select (LP64 data model).
_WIDE_BITS = 64
_INT_BITS = 32
_SHORT_BITS = 16
_CHAR_BITS = 8


def _argument_bits(spec: ConversionSpec, capital: bool) -> int:
    """Bit size of the argument a conversion reads.

    Capital conversions always read a long and ignore the other modifiers.
    """
    if capital or spec.z or spec.j or spec.ll or spec.l:
        return _WIDE_BITS
    if spec.hh:
        return _CHAR_BITS
    if spec.h:
        return _SHORT_BITS
    return _INT_BITS


def _check_int(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")


def _wrap_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def _wrap_unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _precision(spec: ConversionSpec) -> int:
    return spec.precision if spec.has_precision else 1


def signed_argument(spec: ConversionSpec, conversion: str, value: int) -> int:
    """Reduce ``value`` to the signed type selected by ``spec`` and ``conversion``."""
    if conversion not in _SIGNED_CONVERSIONS or len(conversion) != 1:
        raise ValueError(f"not a signed decimal conversion: {conversion!r}")
    _check_int(value)
    return _wrap_signed(value, _argument_bits(spec, conversion == "D"))


def unsigned_argument(spec: ConversionSpec, conversion: str, value: int) -> int:
    """Reduce ``value`` to the unsigned type selected by ``spec`` and ``conversion``."""
    if conversion not in _UNSIGNED_CONVERSIONS or len(conversion) != 1:
        raise ValueError(f"not an unsigned decimal conversion: {conversion!r}")
    _check_int(value)
    return _wrap_unsigned(value, _argument_bits(spec, conversion == "U"))


def format_signed(value: int, spec: ConversionSpec) -> str:
    """Lay out a signed decimal number according to ``spec``."""
    _check_int(value)
    precision = _precision(spec)
    width = spec.width
    if value == 0 and precision == 0:
        if width <= 0:
            return ""
        return " " * (width - 1) + ("+" if spec.plus else " ")
    digits = str(abs(value))
    if value < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    zeros = "0" * max(precision - len(digits), 0)
    if spec.left:
        body = sign + zeros + digits
        if spec.j or spec.z:
            # The intmax_t and ssize_t layouts leave the digits out of the width.
            return body + " " * max(width - len(sign) - len(zeros), 0)
        return body.ljust(width)
    pad = max(width - len(sign) - max(precision, len(digits)), 0)
    if spec.zero and not spec.has_precision:
        return sign + "0" * pad + digits
    return " " * pad + sign + zeros + digits


def format_unsigned(value: int, spec: ConversionSpec) -> str:
    """Lay out an unsigned decimal number according to ``spec``."""
    _check_int(value)
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    precision = _precision(spec)
    width = spec.width
    if value == 0 and precision == 0:
        return " " * max(width, 0)
    digits = str(value)
    zeros = "0" * max(precision - len(digits), 0)
    if spec.left:
        return (zeros + digits).ljust(width)
    pad = max(width - max(precision, len(digits)), 0)
    fill = "0" if spec.zero and not spec.has_precision else " "
    return fill * pad + zeros + digits