"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from campus_analytics.api.middleware import RequestIDMiddleware, MetricsMiddleware
from campus_analytics.api.v1 import classes, students, trends
from campus_analytics.infrastructure.observability.logging import setup_logging
from campus_analytics.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Campus Analytics",
        description="Risk scoring, engagement and class forecasting for academic records",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # RequestIDMiddleware wraps MetricsMiddleware, so timed requests already carry an ID
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(students.router, prefix="/v1", tags=["students"])
    app.include_router(trends.router, prefix="/v1", tags=["trends"])
    app.include_router(classes.router, prefix="/v1", tags=["classes"])

    return app


app = create_app()
