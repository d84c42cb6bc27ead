"""POST /v1/trends/forecast - slope and next-value projection for a series"""

import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from campus_analytics.api.v1.schemas import SeriesRequest, TrendForecastResponse
from campus_analytics.api.dependencies import get_request_id
from campus_analytics.domain.trends import forecast_trend

router = APIRouter()


@router.post("/trends/forecast", response_model=TrendForecastResponse)
def create_trend_forecast(request_body: SeriesRequest, request: Request):
    request_id = get_request_id(request)

    try:
        return TrendForecastResponse.model_validate(asdict(forecast_trend(request_body.series)))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
