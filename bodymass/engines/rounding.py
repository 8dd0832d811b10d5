"""
Fixed-decimal rounding used by every displayed value.

Python's round() rounds half to even (round(22.25, 1) == 22.2); displayed
BMI values must round half away from zero instead (22.25 -> 22.3).
"""

from __future__ import annotations

import math


def round_half_away(value: float, digits: int = 1) -> float:
    """Round to `digits` decimals, ties away from zero."""
    factor = 10 ** digits
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    if rounded == 0:
        return 0.0
    return math.copysign(rounded, value)
