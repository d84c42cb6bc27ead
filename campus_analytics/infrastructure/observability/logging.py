"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from campus_analytics.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_risk_profile(
    request_id: str,
    risk_level: str,
    risk_score: Optional[float],
    factor_count: int,
    duration_ms: float,
) -> None:
    """Log structured risk profile outcome for analysis"""
    logging.info(
        "Risk profile computed",
        extra={
            "request_id": request_id,
            "step": "risk_profile_complete",
            "risk_level": risk_level,
            "risk_score": risk_score,
            "factor_count": factor_count,
            "duration_ms": duration_ms,
        },
    )


def log_class_forecast(
    request_id: str,
    total_students: int,
    predicted_pass_rate: float,
    at_risk_count: int,
    duration_ms: float,
) -> None:
    """Log structured class forecast outcome"""
    logging.info(
        "Class forecast computed",
        extra={
            "request_id": request_id,
            "step": "class_forecast_complete",
            "total_students": total_students,
            "predicted_pass_rate": predicted_pass_rate,
            "at_risk_count": at_risk_count,
            "duration_ms": duration_ms,
        },
    )
