"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from campus_analytics.api.main import create_app
from campus_analytics.domain.models import AcademicSettings, MarkEntry, StudentSignal


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def default_settings() -> AcademicSettings:
    return AcademicSettings(min_attendance=75, pass_marks=20)


@pytest.fixture
def struggling_student() -> StudentSignal:
    """Low attendance, failing marks, both series falling"""
    return StudentSignal(
        attendance_pct=40,
        internal_marks=10,
        attendance_trend=[80, 70, 60],
        marks_trend=[30, 25, 20],
    )


@pytest.fixture
def thriving_student() -> StudentSignal:
    """Good attendance and marks, both series rising"""
    return StudentSignal(
        attendance_pct=90,
        internal_marks=30,
        attendance_trend=[80, 85, 90],
        marks_trend=[20, 25, 30],
    )


@pytest.fixture
def class_marks() -> list[MarkEntry]:
    """Two mark records; test2 is the weakest relative to its observed max"""
    return [
        MarkEntry(test1=40, test2=30, assignment=20),
        MarkEntry(test1=20, test2=10, assignment=10),
    ]
