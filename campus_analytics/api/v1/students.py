"""POST /v1/students/* - per-student risk endpoints"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from campus_analytics.api.v1.schemas import (
    LegacyRiskRequest,
    LegacyRiskResponse,
    RiskAssessmentRequest,
    RiskAssessmentResponse,
    RiskProfileRequest,
    RiskProfileResponse,
)
from campus_analytics.api.dependencies import get_request_id, resolve_request_settings
from campus_analytics.domain.models import StudentSignal
from campus_analytics.domain.risk_profile import get_risk_profile
from campus_analytics.domain.legacy_risk import assess_student_risk, calculate_risk
from campus_analytics.infrastructure.observability.metrics import record_legacy_risk, record_risk_profile
from campus_analytics.infrastructure.observability.logging import log_risk_profile

router = APIRouter()


@router.post("/students/risk-profile", response_model=RiskProfileResponse)
def create_risk_profile(request_body: RiskProfileRequest, request: Request):
    """
    Compute a student's risk profile from pre-fetched attendance and marks.

    Flow:
    1. Resolve thresholds (request overrides on top of service defaults)
    2. Score risk, engagement and trends
    3. Record metrics and a structured log line
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        academic_settings = resolve_request_settings(request_body.settings)
        signal = StudentSignal(**request_body.signal.model_dump())
        profile = get_risk_profile(signal, academic_settings)

        duration_ms = (time.time() - start_time) * 1000
        record_risk_profile(profile.risk_level)
        log_risk_profile(
            request_id, profile.risk_level, profile.risk_score, len(profile.risk_factors), duration_ms
        )

        return RiskProfileResponse.model_validate(asdict(profile))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/students/legacy-risk", response_model=LegacyRiskResponse)
def create_legacy_risk(request_body: LegacyRiskRequest, request: Request):
    """Logistic risk probability, kept for older API consumers"""
    request_id = get_request_id(request)

    try:
        result = calculate_risk(request_body.attendance_percentage, request_body.avg_marks)
        record_legacy_risk(result.risk_level)
        return LegacyRiskResponse.model_validate(asdict(result))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/students/risk-assessment", response_model=RiskAssessmentResponse)
def create_risk_assessment(request_body: RiskAssessmentRequest, request: Request):
    """Threshold-rule flags (Low/High/Critical) with the legacy probability attached"""
    request_id = get_request_id(request)

    try:
        academic_settings = resolve_request_settings(request_body.settings)
        assessment = assess_student_risk(
            request_body.attendance_percentage,
            request_body.avg_marks,
            has_marks=request_body.has_marks,
            settings=academic_settings,
        )
        return RiskAssessmentResponse.model_validate(asdict(assessment))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
