"""Dependency helpers for FastAPI endpoints"""

from typing import Optional
from fastapi import Request

from campus_analytics.api.v1.schemas import AcademicSettingsSchema
from campus_analytics.config import settings
from campus_analytics.domain.models import AcademicSettings
from campus_analytics.domain.thresholds import resolve_settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def resolve_request_settings(overrides: Optional[AcademicSettingsSchema]) -> AcademicSettings:
    """Merge per-request overrides onto the service defaults and validate them"""
    raw = settings.academic_defaults()
    if overrides is not None:
        raw.update(overrides.model_dump(exclude_none=True))
    return resolve_settings(raw)
