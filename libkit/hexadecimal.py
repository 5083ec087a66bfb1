"""The hexadecimal and pointer conversions: reading the argument and laying out its digits."""

from __future__ import annotations

import dataclasses
from typing import Optional

from .integers import unsigned_argument
from .radix import pad_empty, pad_left, to_base
from .spec import ConversionSpec

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_POINTER_MODULUS = 1 << 64


def hex_argument(spec: ConversionSpec, conversion: str, value: int) -> int:
    """Reduce ``value`` to the unsigned type selected by the length modifiers in ``spec``.

    Unlike the other capital conversions, 'X' honours every modifier.
    """
    if conversion not in ("x", "X"):
        raise ValueError(f"not a hexadecimal conversion: {conversion!r}")
    return unsigned_argument(spec, "u", value)


def format_hex(digits: str, spec: ConversionSpec, conversion: str) -> str:
    """Lay out hexadecimal ``digits`` (empty for zero) for 'x', 'X' or 'p'."""
    if conversion not in ("x", "X", "p"):
        raise ValueError(f"not a hexadecimal conversion: {conversion!r}")
    if not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"not hexadecimal digits: {digits!r}")
    prefix_text = "0X" if conversion == "X" else "0x"
    precision = spec.precision if spec.has_precision else 1
    length = len(digits)
    if length == 0 and precision == 0:
        return pad_empty("p" if conversion == "p" else "x", spec.width)
    shows_prefix = (spec.alternate and length != 0) or conversion == "p"
    prefix = prefix_text if shows_prefix else ""

    if spec.left:
        rest = dataclasses.replace(spec, width=spec.width - len(prefix))
        return prefix + pad_left(digits, rest)

    width = spec.width
    if spec.alternate or conversion == "p":
        # Room for the prefix is reserved even when it ends up not printed.
        width -= 2
    pad = max(width - max(precision, length), 0)
    zeros = "0" * max(precision - length, 0)
    if spec.has_precision:
        # With an explicit precision the '0' flag suppresses the prefix.
        head = " " * pad + ("" if spec.zero else prefix)
    elif spec.zero:
        head = prefix + "0" * pad
    else:
        head = " " * pad + prefix
    return head + zeros + digits


def format_pointer(address: Optional[int], spec: ConversionSpec) -> str:
    """Lay out a pointer value as lower-case hexadecimal with a "0x" prefix.

    ``None`` stands for the null pointer; addresses wrap to 64 bits.
    """
    if address is None:
        address = 0
    if isinstance(address, bool) or not isinstance(address, int):
        raise TypeError(f"expected an int address, got {type(address).__name__}")
    digits = to_base(address % _POINTER_MODULUS, 16)
    return format_hex(digits, dataclasses.replace(spec, alternate=True), "p")