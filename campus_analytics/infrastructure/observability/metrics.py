"""Prometheus metrics for monitoring risk distribution and forecast outcomes"""

from prometheus_client import Counter, Histogram

# Risk metrics
risk_profile_counter = Counter(
    "campus_risk_profile_total",
    "Risk profiles computed",
    ["level"],  # Low | Medium | High | N/A
)

legacy_risk_counter = Counter(
    "campus_legacy_risk_total",
    "Legacy logistic risk evaluations",
    ["level"],  # Safe | Moderate | High Risk
)

# Forecast metrics
predicted_pass_rate_histogram = Histogram(
    "campus_predicted_pass_rate",
    "Predicted class pass rate (percent)",
    buckets=[10, 25, 40, 50, 60, 75, 90, 100],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_risk_profile(risk_level: str) -> None:
    """Record risk level distribution"""
    risk_profile_counter.labels(level=risk_level).inc()


def record_legacy_risk(risk_level: str) -> None:
    legacy_risk_counter.labels(level=risk_level).inc()


def record_forecast(predicted_pass_rate: float, total_students: int) -> None:
    """Record forecast outcome; empty cohorts carry no signal and are skipped"""
    if total_students == 0:
        return
    predicted_pass_rate_histogram.observe(predicted_pass_rate)
