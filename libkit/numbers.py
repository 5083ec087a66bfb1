"""Integer parsing, formatting and small arithmetic helpers."""

from __future__ import annotations

import math
import re
from typing import Tuple, TypeVar

_T = TypeVar("_T")
_U = TypeVar("_U")

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")

FACTORIAL_LIMIT = 12


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if there is none."""
    match = _LEADING_INT.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def factorial(n: int) -> int:
    """Return n! for 0 <= n <= 12, and 0 outside that range."""
    if n < 0 or n > FACTORIAL_LIMIT:
        return 0
    return math.factorial(n)


def exact_sqrt(n: int) -> int:
    """Return the integer square root of a positive perfect square, otherwise 0."""
    if n <= 0:
        return 0
    root = math.isqrt(n)
    return root if root * root == n else 0


def swap(a: _T, b: _U) -> Tuple[_U, _T]:
    """Return the two values in the opposite order."""
    return b, a