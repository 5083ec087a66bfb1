"""The octal conversion: reading its argument and laying out its digits."""

from __future__ import annotations

import dataclasses

from .integers import unsigned_argument
from .radix import pad_empty, pad_left
from .spec import ConversionSpec

_OCTAL_DIGITS = frozenset("01234567")


def octal_argument(spec: ConversionSpec, conversion: str, value: int) -> int:
    """Reduce ``value`` to the unsigned type selected by ``spec`` and ``conversion``."""
    if conversion not in ("o", "O"):
        raise ValueError(f"not an octal conversion: {conversion!r}")
    return unsigned_argument(spec, "U" if conversion == "O" else "u", value)


def format_octal(digits: str, spec: ConversionSpec) -> str:
    """Lay out octal ``digits`` (empty for zero) according to ``spec``."""
    if not set(digits) <= _OCTAL_DIGITS:
        raise ValueError(f"not octal digits: {digits!r}")
    precision = spec.precision if spec.has_precision else 1
    length = len(digits)
    if length == 0 and precision == 0:
        return pad_empty("O" if spec.alternate else "o", spec.width)
    prefix = "0" if spec.alternate and precision <= length else ""
    if spec.left:
        rest = dataclasses.replace(spec, width=spec.width - len(prefix))
        return prefix + pad_left(digits, rest)
    lead = "0" if spec.alternate else ""
    used = precision if precision > length else length + len(lead)
    zeros = "0" * max(precision - len(lead) - length, 0)
    fill = "0" if spec.zero and not spec.has_precision else " "
    return fill * max(spec.width - used, 0) + lead + zeros + digits