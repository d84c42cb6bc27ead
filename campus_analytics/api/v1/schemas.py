"""Pydantic schemas for API request/response validation

JSON field names are camelCase because the dashboards read them by name.
Requests also accept snake_case. Numeric inputs are typed Any on purpose:
the engine coerces them with safe() rather than rejecting them.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ---


class AcademicSettingsSchema(CamelModel):
    """Optional per-request thresholds; omitted fields use service defaults"""

    min_attendance: Any = None
    pass_marks: Any = None
    weightage: Optional[Dict[str, Any]] = None


class StudentSignalSchema(CamelModel):
    attendance_pct: Any = Field(..., description="Attendance percentage, null when no records exist")
    internal_marks: Any = 0
    attendance_trend: List[Any] = Field(default_factory=list, description="Oldest to newest")
    marks_trend: List[Any] = Field(default_factory=list, description="Oldest to newest")


class RiskProfileRequest(CamelModel):
    """Request body for POST /v1/students/risk-profile"""

    signal: StudentSignalSchema
    settings: Optional[AcademicSettingsSchema] = None


class LegacyRiskRequest(CamelModel):
    """Request body for POST /v1/students/legacy-risk"""

    attendance_percentage: Any = None
    avg_marks: Any = None


class RiskAssessmentRequest(CamelModel):
    """Request body for POST /v1/students/risk-assessment"""

    attendance_percentage: Any = None
    avg_marks: Any = None
    has_marks: bool = True
    settings: Optional[AcademicSettingsSchema] = None


class SeriesRequest(CamelModel):
    """Ordered numeric series, oldest first"""

    series: List[Any]


class MarkEntrySchema(CamelModel):
    test1: Any = None
    test2: Any = None
    assignment: Any = None


class ComponentDeviationRequest(CamelModel):
    """Request body for POST /v1/classes/component-deviation"""

    marks: List[MarkEntrySchema]


class ForecastStudentSchema(CamelModel):
    total: Any = None
    attendance_pct: Any = None


class PassRateForecastRequest(CamelModel):
    """Request body for POST /v1/classes/pass-rate-forecast"""

    students: List[ForecastStudentSchema]
    pass_threshold: Any = None


class ClassInsightsRequest(CamelModel):
    """Request body for POST /v1/classes/insights"""

    signals: List[StudentSignalSchema]
    settings: Optional[AcademicSettingsSchema] = None


class ClassSummaryRequest(CamelModel):
    """Request body for POST /v1/classes/summary"""

    marks: List[MarkEntrySchema] = Field(default_factory=list)
    students: List[ForecastStudentSchema] = Field(default_factory=list)
    settings: Optional[AcademicSettingsSchema] = None


# --- Responses ---


class TrendsSchema(CamelModel):
    attendance: str
    performance: str


class RiskProfileResponse(CamelModel):
    """Response for POST /v1/students/risk-profile"""

    risk_score: Optional[float]
    risk_level: str
    risk_factors: List[str]
    engagement_score: Optional[float]
    engagement_status: str
    trends: TrendsSchema


class LegacyRiskResponse(CamelModel):
    """Response for POST /v1/students/legacy-risk"""

    probability: float
    risk_level: str


class RiskAssessmentResponse(CamelModel):
    """Response for POST /v1/students/risk-assessment"""

    attendance_percentage: float
    avg_marks: float
    probability: float
    risk_level: str
    risk_reasons: List[str]


class TrendForecastResponse(CamelModel):
    """Response for POST /v1/trends/forecast"""

    slope: float
    direction: str
    next_value: float


class ConsistencyResponse(CamelModel):
    """Response for POST /v1/classes/consistency"""

    consistency_score: float


class ComponentScoresSchema(CamelModel):
    test1: float
    test2: float
    assignment: float


class ComponentDeviationResponse(CamelModel):
    """Response for POST /v1/classes/component-deviation"""

    weak_component: str
    averages: ComponentScoresSchema
    percentages: ComponentScoresSchema


class PassRateForecastResponse(CamelModel):
    """Response for POST /v1/classes/pass-rate-forecast"""

    current_pass_rate: float
    predicted_pass_rate: float
    at_risk_count: int
    total_students: int


class ClassInsightsResponse(CamelModel):
    """Response for POST /v1/classes/insights"""

    insights: List[str]
    profiles: List[RiskProfileResponse]


class ClassSummaryResponse(CamelModel):
    """Response for POST /v1/classes/summary"""

    component_deviation: ComponentDeviationResponse
    forecast: Optional[PassRateForecastResponse] = None
    consistency_score: float
