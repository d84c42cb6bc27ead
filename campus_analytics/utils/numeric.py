"""Numeric coercion and rounding utilities"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any


def safe(value: Any) -> float:
    """
    Coerce any value to a finite float.

    Contract: returns 0.0 when conversion fails (None, non-numeric strings,
    unsupported types) or yields a non-finite number (NaN, inf). Never raises.
    """
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def round_half_up(value: float, digits: int = 1) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    Works on the exact binary value (like JS toFixed), so 2.25 -> 2.3 where
    the builtin round() would give 2.2. Non-finite input rounds to 0.0.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(safe(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound value to [lower, upper]"""
    return max(lower, min(upper, value))
