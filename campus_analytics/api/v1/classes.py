"""POST /v1/classes/* - cohort-level analytics endpoints"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from campus_analytics.api.v1.schemas import (
    ClassInsightsRequest,
    ClassInsightsResponse,
    ClassSummaryRequest,
    ClassSummaryResponse,
    ComponentDeviationRequest,
    ComponentDeviationResponse,
    ConsistencyResponse,
    PassRateForecastRequest,
    PassRateForecastResponse,
    RiskProfileResponse,
    SeriesRequest,
)
from campus_analytics.api.dependencies import get_request_id, resolve_request_settings
from campus_analytics.domain.models import ForecastStudent, MarkEntry, StudentSignal
from campus_analytics.domain.components import get_component_deviation, weighted_total
from campus_analytics.domain.consistency import get_consistency_score
from campus_analytics.domain.forecast import predict_class_pass_rate
from campus_analytics.domain.insights import generate_class_insights
from campus_analytics.domain.risk_profile import get_risk_profile
from campus_analytics.infrastructure.observability.metrics import record_forecast, record_risk_profile
from campus_analytics.infrastructure.observability.logging import log_class_forecast

router = APIRouter()


@router.post("/classes/consistency", response_model=ConsistencyResponse)
def create_consistency_score(request_body: SeriesRequest, request: Request):
    request_id = get_request_id(request)

    try:
        return ConsistencyResponse(consistency_score=get_consistency_score(request_body.series))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/classes/component-deviation", response_model=ComponentDeviationResponse)
def create_component_deviation(request_body: ComponentDeviationRequest, request: Request):
    """Weakest mark component across the class, normalized per component"""
    request_id = get_request_id(request)

    try:
        marks = [MarkEntry(**m.model_dump()) for m in request_body.marks]
        return ComponentDeviationResponse.model_validate(asdict(get_component_deviation(marks)))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/classes/pass-rate-forecast", response_model=PassRateForecastResponse)
def create_pass_rate_forecast(request_body: PassRateForecastRequest, request: Request):
    """
    Current vs projected pass rate.

    passThreshold defaults to the service's configured pass marks.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        pass_threshold = request_body.pass_threshold
        if pass_threshold is None:
            pass_threshold = resolve_request_settings(None).pass_marks

        students = [ForecastStudent(**s.model_dump()) for s in request_body.students]
        forecast = predict_class_pass_rate(students, pass_threshold)

        duration_ms = (time.time() - start_time) * 1000
        record_forecast(forecast.predicted_pass_rate, forecast.total_students)
        log_class_forecast(
            request_id, forecast.total_students, forecast.predicted_pass_rate, forecast.at_risk_count, duration_ms
        )

        return PassRateForecastResponse.model_validate(asdict(forecast))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/classes/insights", response_model=ClassInsightsResponse)
def create_class_insights(request_body: ClassInsightsRequest, request: Request):
    """Risk profile per student plus plain-language class insights"""
    request_id = get_request_id(request)

    try:
        academic_settings = resolve_request_settings(request_body.settings)
        profiles = [
            get_risk_profile(StudentSignal(**s.model_dump()), academic_settings)
            for s in request_body.signals
        ]
        for profile in profiles:
            record_risk_profile(profile.risk_level)

        return ClassInsightsResponse(
            insights=generate_class_insights(profiles),
            profiles=[RiskProfileResponse.model_validate(asdict(p)) for p in profiles],
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/classes/summary", response_model=ClassSummaryResponse)
def create_class_summary(request_body: ClassSummaryRequest, request: Request):
    """
    Dashboard bundle for one class.

    Flow:
    1. Weakest component over the raw mark entries
    2. Pass-rate forecast over the student totals (omitted when empty)
    3. Consistency of the weighted totals (0 with fewer than 2 entries)
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        academic_settings = resolve_request_settings(request_body.settings)
        marks = [MarkEntry(**m.model_dump()) for m in request_body.marks]
        students = [ForecastStudent(**s.model_dump()) for s in request_body.students]

        deviation = get_component_deviation(marks)

        forecast = None
        if students:
            forecast = predict_class_pass_rate(students, academic_settings.pass_marks)
            duration_ms = (time.time() - start_time) * 1000
            record_forecast(forecast.predicted_pass_rate, forecast.total_students)
            log_class_forecast(
                request_id,
                forecast.total_students,
                forecast.predicted_pass_rate,
                forecast.at_risk_count,
                duration_ms,
            )

        totals = [weighted_total(m, academic_settings.weightage) for m in marks]
        consistency_score = get_consistency_score(totals) if len(totals) >= 2 else 0.0

        return ClassSummaryResponse(
            component_deviation=ComponentDeviationResponse.model_validate(asdict(deviation)),
            forecast=PassRateForecastResponse.model_validate(asdict(forecast)) if forecast else None,
            consistency_score=consistency_score,
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
