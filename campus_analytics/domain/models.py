"""Domain models - pure Python dataclasses representing analytics inputs and results"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class Weightage:
    """Share of each mark component in a student's weighted total"""

    test1: float = 0.3
    test2: float = 0.3
    assignment: float = 0.4


@dataclass(frozen=True)
class AcademicSettings:
    """Per-request thresholds resolved by the caller"""

    min_attendance: float = 75.0
    pass_marks: float = 20.0
    weightage: Weightage = field(default_factory=Weightage)


@dataclass
class StudentSignal:
    """Raw attendance and marks history for one student"""

    attendance_pct: Any  # None means no attendance records exist
    internal_marks: Any = 0
    attendance_trend: List[Any] = field(default_factory=list)  # oldest -> newest
    marks_trend: List[Any] = field(default_factory=list)


@dataclass
class TrendSummary:
    """Direction of the attendance and performance series"""

    attendance: str
    performance: str


@dataclass
class RiskProfile:
    """Composite risk and engagement output for one student"""

    risk_score: Optional[float]
    risk_level: str  # Low | Medium | High | N/A
    risk_factors: List[str]
    engagement_score: Optional[float]
    engagement_status: str
    trends: TrendSummary


@dataclass
class LegacyRisk:
    """Logistic-model probability kept for older API consumers"""

    probability: float  # percentage
    risk_level: str  # Safe | Moderate | High Risk


@dataclass
class StudentRiskAssessment:
    """Rule-based risk flags plus the legacy probability"""

    attendance_percentage: float
    avg_marks: float
    probability: float
    risk_level: str  # Low | High | Critical
    risk_reasons: List[str]


@dataclass
class TrendForecast:
    """Slope, direction and one-step projection of a series"""

    slope: float
    direction: str
    next_value: float


@dataclass
class MarkEntry:
    """One marks record; a None field was never entered"""

    test1: Any = None
    test2: Any = None
    assignment: Any = None


@dataclass
class ComponentScores:
    test1: float = 0.0
    test2: float = 0.0
    assignment: float = 0.0


@dataclass
class ComponentDeviation:
    """Per-component class averages and the weakest component"""

    weak_component: str
    averages: ComponentScores
    percentages: ComponentScores


@dataclass
class ForecastStudent:
    """Input row for the class pass-rate forecast"""

    total: Any
    attendance_pct: Any


@dataclass
class PassRateForecast:
    """Current vs projected pass rate over a cohort"""

    current_pass_rate: float
    predicted_pass_rate: float
    at_risk_count: int
    total_students: int
