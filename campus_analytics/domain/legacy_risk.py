"""Legacy logistic risk model and rule-based student risk flags"""

import math
from typing import Any, List

from campus_analytics.domain.models import LegacyRisk, StudentRiskAssessment
from campus_analytics.domain.thresholds import (
    DEFAULT_MIN_ATTENDANCE,
    DEFAULT_PASS_MARKS,
    LEGACY_ATTENDANCE_WEIGHT,
    LEGACY_BIAS,
    LEGACY_HIGH_RISK_ABOVE,
    LEGACY_MARKS_WEIGHT,
    LEGACY_MODERATE_FROM,
    threshold_value,
)
from campus_analytics.utils.numeric import round_half_up, safe


def _sigmoid(z: float) -> float:
    # Branch on sign so exp() never overflows
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    e = math.exp(z)
    return e / (1.0 + e)


def calculate_risk(attendance_percentage: Any, avg_marks: Any) -> LegacyRisk:
    """
    Logistic risk probability: P = 1 / (1 + e^-z), z = -0.1*A - 0.1*M + 10.

    Bands:
    - P > 0.7:  High Risk
    - P >= 0.4: Moderate
    - else:     Safe

    Returns probability as a percentage rounded to 2 decimals.
    """
    z = (
        LEGACY_ATTENDANCE_WEIGHT * safe(attendance_percentage)
        + LEGACY_MARKS_WEIGHT * safe(avg_marks)
        + LEGACY_BIAS
    )
    probability = _sigmoid(z)

    if probability > LEGACY_HIGH_RISK_ABOVE:
        risk_level = "High Risk"
    elif probability >= LEGACY_MODERATE_FROM:
        risk_level = "Moderate"
    else:
        risk_level = "Safe"

    return LegacyRisk(probability=round_half_up(probability * 100, 2), risk_level=risk_level)


def assess_student_risk(
    attendance_percentage: Any,
    avg_marks: Any,
    has_marks: bool = True,
    settings: Any = None,
) -> StudentRiskAssessment:
    """
    Flag a student against the configured thresholds.

    Two failing rules make the student Critical, one makes them High.
    Marks are only judged when the student has marks on record.
    """
    min_attendance = threshold_value(settings, "min_attendance", DEFAULT_MIN_ATTENDANCE)
    pass_marks = threshold_value(settings, "pass_marks", DEFAULT_PASS_MARKS)

    attendance = safe(attendance_percentage)
    marks = safe(avg_marks)

    reasons: List[str] = []
    if attendance < min_attendance:
        reasons.append(f"Low Attendance ({attendance:.1f}% < {min_attendance:g}%)")
    if has_marks and marks < pass_marks:
        reasons.append(f"Failing Marks (Avg: {marks:.1f} < {pass_marks:g})")

    if len(reasons) >= 2:
        risk_level = "Critical"
    elif len(reasons) == 1:
        risk_level = "High"
    else:
        risk_level = "Low"

    legacy = calculate_risk(attendance, marks)

    return StudentRiskAssessment(
        attendance_percentage=round_half_up(attendance, 2),
        avg_marks=round_half_up(marks, 2),
        probability=legacy.probability,
        risk_level=risk_level,
        risk_reasons=reasons,
    )
