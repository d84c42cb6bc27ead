"""Tunable scoring constants and settings resolution"""

from typing import Any, Mapping, Optional

from campus_analytics.domain.models import AcademicSettings, Weightage
from campus_analytics.utils.numeric import safe

# Settings defaults (used when a configured value is missing or zero)
DEFAULT_MIN_ATTENDANCE = 75.0
DEFAULT_PASS_MARKS = 20.0
DEFAULT_WEIGHTAGE = Weightage(test1=0.3, test2=0.3, assignment=0.4)
WEIGHTAGE_TOLERANCE = 0.05

# Trend analysis
DECLINE_SLOPE_CUTOFF = -0.5

# Risk profile
ATTENDANCE_PENALTY_PER_POINT = 2
MARKS_PENALTY_PER_POINT = 3
DECLINING_TREND_PENALTY = 10
HIGH_RISK_BELOW = 60
MEDIUM_RISK_BELOW = 80

# Engagement = attendance*0.5 + marks*0.4 + trend_stability*0.1
ENGAGEMENT_ATTENDANCE_WEIGHT = 0.5
ENGAGEMENT_MARKS_WEIGHT = 0.4
ENGAGEMENT_STABILITY_WEIGHT = 0.1
STABLE_TREND_SCORE = 100
DECLINING_TREND_SCORE = 50
HIGH_ENGAGEMENT_ABOVE = 85
AT_RISK_ENGAGEMENT_BELOW = 60

# Legacy logistic model: z = w1*A + w2*M + b
LEGACY_ATTENDANCE_WEIGHT = -0.1
LEGACY_MARKS_WEIGHT = -0.1
LEGACY_BIAS = 10.0
LEGACY_HIGH_RISK_ABOVE = 0.7
LEGACY_MODERATE_FROM = 0.4

# Consistency: mean below this is treated as "nothing to be inconsistent about"
CONSISTENCY_MIN_MEAN = 0.01

# Fallback max for a component when no positive mark was observed
PRACTICAL_COMPONENT_MAX = 50.0

# Pass-rate forecast
PRACTICAL_MARKS_CEILING = 50.0  # internal marks scale; projected totals are capped here
HIGH_ATTENDANCE_ABOVE = 85
LOW_ATTENDANCE_BELOW = 60
HIGH_ATTENDANCE_BOOST = 1.05
LOW_ATTENDANCE_PENALTY = 0.90


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def resolve_weightage(raw: Optional[Mapping[str, Any]]) -> Weightage:
    """
    Validate a raw weightage mapping.

    Weights that do not sum to 1.0 +/- 0.05 are replaced wholesale by the
    defaults; otherwise each zero/missing weight falls back individually.
    """
    if not raw:
        return DEFAULT_WEIGHTAGE

    test1 = safe(raw.get("test1"))
    test2 = safe(raw.get("test2"))
    assignment = safe(raw.get("assignment"))

    if abs(test1 + test2 + assignment - 1.0) > WEIGHTAGE_TOLERANCE:
        return DEFAULT_WEIGHTAGE

    return Weightage(
        test1=test1 or DEFAULT_WEIGHTAGE.test1,
        test2=test2 or DEFAULT_WEIGHTAGE.test2,
        assignment=assignment or DEFAULT_WEIGHTAGE.assignment,
    )


def resolve_settings(raw: Optional[Mapping[str, Any]]) -> AcademicSettings:
    """
    Build AcademicSettings from whatever settings record the caller loaded.

    Accepts snake_case or camelCase keys. Zero or missing thresholds fall
    back to the defaults. Never raises.
    """
    if not raw:
        return AcademicSettings(
            min_attendance=DEFAULT_MIN_ATTENDANCE,
            pass_marks=DEFAULT_PASS_MARKS,
            weightage=DEFAULT_WEIGHTAGE,
        )

    weightage = _pick(raw, "weightage")
    return AcademicSettings(
        min_attendance=safe(_pick(raw, "min_attendance", "minAttendance")) or DEFAULT_MIN_ATTENDANCE,
        pass_marks=safe(_pick(raw, "pass_marks", "passMarks")) or DEFAULT_PASS_MARKS,
        weightage=resolve_weightage(weightage if isinstance(weightage, Mapping) else None),
    )


def threshold_value(thresholds: Any, name: str, default: float) -> float:
    """
    Read one threshold from settings, a mapping, or None.

    A zero threshold is indistinguishable from "unset" and falls back to
    the default.
    """
    if thresholds is None:
        raw = None
    elif isinstance(thresholds, Mapping):
        camel = name.split("_")[0] + "".join(part.title() for part in name.split("_")[1:])
        raw = _pick(thresholds, name, camel)
    else:
        raw = getattr(thresholds, name, None)
    return safe(raw) or default
