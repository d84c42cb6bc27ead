"""Class pass-rate forecast with an attendance-correlated projection"""

from typing import Any, Optional, Sequence

from campus_analytics.domain.models import ForecastStudent, PassRateForecast
from campus_analytics.domain.thresholds import (
    DEFAULT_PASS_MARKS,
    HIGH_ATTENDANCE_ABOVE,
    HIGH_ATTENDANCE_BOOST,
    LOW_ATTENDANCE_BELOW,
    LOW_ATTENDANCE_PENALTY,
    PRACTICAL_MARKS_CEILING,
)
from campus_analytics.utils.numeric import clamp, round_half_up, safe


def project_total(total: float, attendance_pct: float) -> float:
    """
    Project a student's end-of-term total from current total and attendance.

    - attendance > 85:      +5%
    - 0 < attendance < 60:  -10%
    - otherwise unchanged (0 means unknown attendance)

    The result is capped to [0, 50], the internal-marks scale. Totals on a
    larger scale are truncated to 50 even without an adjustment.
    """
    projected = total
    if attendance_pct > HIGH_ATTENDANCE_ABOVE:
        projected = total * HIGH_ATTENDANCE_BOOST
    elif 0 < attendance_pct < LOW_ATTENDANCE_BELOW:
        projected = total * LOW_ATTENDANCE_PENALTY
    return clamp(projected, 0.0, PRACTICAL_MARKS_CEILING)


def predict_class_pass_rate(
    students: Optional[Sequence[ForecastStudent]],
    pass_threshold: Any = DEFAULT_PASS_MARKS,
) -> PassRateForecast:
    """
    Compare the current pass rate with the projected end-of-term pass rate.

    Rates are percentages of the cohort rounded to 1 decimal; at_risk_count
    counts students whose projected total falls below pass_threshold.
    """
    if not students:
        return PassRateForecast(
            current_pass_rate=0.0,
            predicted_pass_rate=0.0,
            at_risk_count=0,
            total_students=0,
        )

    threshold = safe(pass_threshold)
    current_pass = 0
    predicted_pass = 0
    at_risk_count = 0

    for student in students:
        total = safe(student.total)

        if total >= threshold:
            current_pass += 1

        if project_total(total, safe(student.attendance_pct)) >= threshold:
            predicted_pass += 1
        else:
            at_risk_count += 1

    n = len(students)
    return PassRateForecast(
        current_pass_rate=round_half_up(current_pass / n * 100, 1),
        predicted_pass_rate=round_half_up(predicted_pass / n * 100, 1),
        at_risk_count=at_risk_count,
        total_students=n,
    )
