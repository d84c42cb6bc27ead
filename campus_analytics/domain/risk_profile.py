"""Risk profile engine - penalty-based safety score and engagement for one student"""

from typing import Any, List

from campus_analytics.domain.models import RiskProfile, StudentSignal, TrendSummary
from campus_analytics.domain.thresholds import (
    ATTENDANCE_PENALTY_PER_POINT,
    AT_RISK_ENGAGEMENT_BELOW,
    DECLINE_SLOPE_CUTOFF,
    DECLINING_TREND_PENALTY,
    DECLINING_TREND_SCORE,
    DEFAULT_MIN_ATTENDANCE,
    DEFAULT_PASS_MARKS,
    ENGAGEMENT_ATTENDANCE_WEIGHT,
    ENGAGEMENT_MARKS_WEIGHT,
    ENGAGEMENT_STABILITY_WEIGHT,
    HIGH_ENGAGEMENT_ABOVE,
    HIGH_RISK_BELOW,
    MARKS_PENALTY_PER_POINT,
    MEDIUM_RISK_BELOW,
    STABLE_TREND_SCORE,
    threshold_value,
)
from campus_analytics.domain.trends import calculate_slope, classify_trend
from campus_analytics.utils.numeric import clamp, round_half_up, safe

INSUFFICIENT_ENGAGEMENT = "Insufficient data to compute engagement"
NO_ATTENDANCE_FACTOR = "No attendance records found"


def insufficient_data_profile() -> RiskProfile:
    """Fixed profile returned when a student has no attendance records"""
    return RiskProfile(
        risk_score=None,
        risk_level="N/A",
        risk_factors=[NO_ATTENDANCE_FACTOR],
        engagement_score=None,
        engagement_status=INSUFFICIENT_ENGAGEMENT,
        trends=TrendSummary(attendance="N/A", performance="N/A"),
    )


def determine_risk_level(score: float) -> str:
    """
    Map safety score to a risk band.

    - < 60: High
    - < 80: Medium
    - else: Low
    """
    if score < HIGH_RISK_BELOW:
        return "High"
    elif score < MEDIUM_RISK_BELOW:
        return "Medium"
    return "Low"


def determine_engagement_status(engagement: float) -> str:
    if engagement > HIGH_ENGAGEMENT_ABOVE:
        return "High"
    elif engagement < AT_RISK_ENGAGEMENT_BELOW:
        return "At Risk"
    return "Stable"


def get_risk_profile(signal: StudentSignal, thresholds: Any = None) -> RiskProfile:
    """
    Score a student's academic risk from attendance, marks and their trends.

    Starts from a safety score of 100 and subtracts:
    - 2 per attendance point below min_attendance ("Low Attendance")
    - 3 per mark below pass_marks ("Failing Marks")
    - 10 for an attendance slope below -0.5 ("Declining Attendance")
    - 10 for a marks slope below -0.5 ("Declining Performance")

    thresholds may be AcademicSettings, a mapping, or None. A threshold of 0
    counts as unset and falls back to the default (75 / 20).

    Missing attendance (None) short-circuits to the insufficient-data profile
    regardless of marks.
    """
    if signal.attendance_pct is None:
        return insufficient_data_profile()

    min_attendance = threshold_value(thresholds, "min_attendance", DEFAULT_MIN_ATTENDANCE)
    pass_marks = threshold_value(thresholds, "pass_marks", DEFAULT_PASS_MARKS)

    attendance = safe(signal.attendance_pct)
    marks = safe(signal.internal_marks)

    safety_score = 100.0
    factors: List[str] = []

    if attendance < min_attendance:
        safety_score -= (min_attendance - attendance) * ATTENDANCE_PENALTY_PER_POINT
        factors.append("Low Attendance")

    if marks < pass_marks:
        safety_score -= (pass_marks - marks) * MARKS_PENALTY_PER_POINT
        factors.append("Failing Marks")

    attendance_slope = calculate_slope(signal.attendance_trend or [])
    marks_slope = calculate_slope(signal.marks_trend or [])

    attendance_declining = attendance_slope < DECLINE_SLOPE_CUTOFF
    marks_declining = marks_slope < DECLINE_SLOPE_CUTOFF
    if attendance_declining:
        safety_score -= DECLINING_TREND_PENALTY
        factors.append("Declining Attendance")
    if marks_declining:
        safety_score -= DECLINING_TREND_PENALTY
        factors.append("Declining Performance")

    final_score = clamp(safety_score, 0.0, 100.0)

    trend_stability = (
        DECLINING_TREND_SCORE if attendance_declining or marks_declining else STABLE_TREND_SCORE
    )
    engagement = (
        attendance * ENGAGEMENT_ATTENDANCE_WEIGHT
        + marks * ENGAGEMENT_MARKS_WEIGHT
        + trend_stability * ENGAGEMENT_STABILITY_WEIGHT
    )

    return RiskProfile(
        risk_score=round_half_up(final_score, 1),
        risk_level=determine_risk_level(final_score),
        risk_factors=factors,
        engagement_score=round_half_up(engagement, 1),
        engagement_status=determine_engagement_status(engagement),
        trends=TrendSummary(
            attendance=classify_trend(attendance_slope),
            performance=classify_trend(marks_slope),
        ),
    )
