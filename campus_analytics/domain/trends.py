"""Trend analysis - least-squares slope and next-value projection"""

from typing import Optional, Sequence, Any

from campus_analytics.domain.models import TrendForecast
from campus_analytics.utils.numeric import safe


def calculate_slope(series: Optional[Sequence[Any]]) -> float:
    """
    Least-squares slope of series against its index 0..n-1.

    Positive means improving, negative declining. Returns 0.0 for fewer
    than 2 points, a zero regression denominator, or a regression that
    overflows.
    """
    if not series or len(series) < 2:
        return 0.0

    n = len(series)
    sum_x = sum_y = sum_xy = sum_xx = 0.0
    for x, raw in enumerate(series):
        y = safe(raw)
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return 0.0
    return safe((n * sum_xy - sum_x * sum_y) / denominator)


def predict_next_value(series: Optional[Sequence[Any]]) -> float:
    """Last value plus the slope; the lone value (or 0.0) for short series"""
    if not series:
        return 0.0
    if len(series) < 2:
        return safe(series[0])
    return safe(safe(series[-1]) + calculate_slope(series))


def classify_trend(slope: float) -> str:
    """Sign-only direction label (no cutoff applied)"""
    if slope > 0:
        return "Improving"
    if slope < 0:
        return "Declining"
    return "Stable"


def forecast_trend(series: Optional[Sequence[Any]]) -> TrendForecast:
    slope = calculate_slope(series)
    return TrendForecast(
        slope=slope,
        direction=classify_trend(slope),
        next_value=predict_next_value(series),
    )
