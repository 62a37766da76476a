"""Numeric helpers shared by the scorers and the input boundary"""

import math
import re
from typing import Any

# ASCII-only numeric prefix, the way a browser's parseFloat reads a form value
LEADING_NUMBER = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Integers at or beyond this magnitude do not fit in a float
_FLOAT_INT_LIMIT = 2 ** 1024


def coerce_number(value: Any) -> float:
    """
    Convert a form entry to a float, treating anything unusable as 0.

    Empty strings, None, non-numeric text, NaN and infinities all become 0.0.
    Leading numeric text is accepted the way a form field would read it
    ("12.5%" -> 12.5, "1_000" -> 1.0).
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, int) and not -_FLOAT_INT_LIMIT < value < _FLOAT_INT_LIMIT:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        number = _parse_leading_float(str(value))

    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _parse_leading_float(text: str) -> float:
    """Parse the longest numeric prefix of text, 0.0 if there is none"""
    match = LEADING_NUMBER.match(text)
    if match is None:
        return 0.0
    return float(match.group())


def clamp(value: int, low: int, high: int) -> int:
    """Limit value to the inclusive range [low, high]"""
    return max(low, min(high, value))
