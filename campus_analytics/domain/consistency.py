"""Consistency scoring based on the coefficient of variation"""

import math
from typing import Any, Optional, Sequence

from campus_analytics.domain.thresholds import CONSISTENCY_MIN_MEAN
from campus_analytics.utils.numeric import clamp, round_half_up, safe


def get_consistency_score(series: Optional[Sequence[Any]]) -> float:
    """
    Score 0-100 where 100 means perfectly uniform values.

    score = clamp(100 - cv * 100, 0, 100), cv = population std / mean.
    Scale-independent, so 0-50 and 0-100 totals compare alike.
    """
    if not series or len(series) < 2:
        return 100.0

    values = [safe(v) for v in series]
    n = len(values)
    mean = sum(values) / n

    # All-zero (or near-zero) series has nothing to be inconsistent about
    if mean < CONSISTENCY_MIN_MEAN:
        return 100.0

    variance = sum((v - mean) ** 2 for v in values) / n
    cv = math.sqrt(variance) / mean

    return round_half_up(clamp(100 - cv * 100, 0.0, 100.0), 1)
