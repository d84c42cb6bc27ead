"""Integration tests for API endpoints"""

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_header(client: TestClient):
    """Test every response carries a request ID, echoing the caller's when sent"""
    assert client.get("/health").headers["X-Request-ID"]
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_risk_profile_endpoint(client: TestClient):
    """Test POST /v1/students/risk-profile with every penalty firing"""
    response = client.post(
        "/v1/students/risk-profile",
        json={
            "signal": {
                "attendancePct": 40,
                "internalMarks": 10,
                "attendanceTrend": [80, 70, 60],
                "marksTrend": [30, 25, 20],
            },
            "settings": {"minAttendance": 75, "passMarks": 20},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["riskLevel"] == "High"
    assert data["riskScore"] == 0.0
    assert data["riskFactors"] == [
        "Low Attendance",
        "Failing Marks",
        "Declining Attendance",
        "Declining Performance",
    ]
    assert data["engagementScore"] == 29.0
    assert data["engagementStatus"] == "At Risk"
    assert data["trends"] == {"attendance": "Declining", "performance": "Declining"}


def test_risk_profile_endpoint_no_attendance(client: TestClient):
    """Test null attendance returns the insufficient-data profile"""
    response = client.post("/v1/students/risk-profile", json={"signal": {"attendancePct": None}})

    assert response.status_code == 200
    data = response.json()
    assert data["riskLevel"] == "N/A"
    assert data["riskScore"] is None
    assert data["engagementScore"] is None
    assert data["riskFactors"] == ["No attendance records found"]


def test_risk_profile_endpoint_accepts_snake_case(client: TestClient):
    response = client.post(
        "/v1/students/risk-profile",
        json={"signal": {"attendance_pct": 90, "internal_marks": 30}},
    )

    assert response.status_code == 200
    assert response.json()["riskLevel"] == "Low"


def test_risk_profile_endpoint_requires_attendance_field(client: TestClient):
    response = client.post("/v1/students/risk-profile", json={"signal": {"internalMarks": 30}})

    assert response.status_code == 422


def test_metrics_endpoint_counts_risk_levels(client: TestClient):
    """Test Prometheus metrics expose risk profile counts"""
    client.post("/v1/students/risk-profile", json={"signal": {"attendancePct": 0, "internalMarks": 0}})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert 'campus_risk_profile_total{level="High"}' in response.text


def test_legacy_risk_endpoint(client: TestClient):
    response = client.post("/v1/students/legacy-risk", json={"attendancePercentage": 50, "avgMarks": 50})

    assert response.status_code == 200
    assert response.json() == {"probability": 50.0, "riskLevel": "Moderate"}


def test_risk_assessment_endpoint(client: TestClient):
    response = client.post(
        "/v1/students/risk-assessment",
        json={"attendancePercentage": 60, "avgMarks": 10, "hasMarks": True},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["riskLevel"] == "Critical"
    assert len(data["riskReasons"]) == 2
    assert data["probability"] == 95.26


def test_trend_forecast_endpoint(client: TestClient):
    response = client.post("/v1/trends/forecast", json={"series": [1, 2, 3, 4]})

    assert response.status_code == 200
    assert response.json() == {"slope": 1.0, "direction": "Improving", "nextValue": 5.0}


def test_consistency_endpoint(client: TestClient):
    response = client.post("/v1/classes/consistency", json={"series": [10, 20]})

    assert response.status_code == 200
    assert response.json() == {"consistencyScore": 66.7}


def test_consistency_endpoint_rejects_non_list(client: TestClient):
    response = client.post("/v1/classes/consistency", json={"series": "abc"})

    assert response.status_code == 422


def test_component_deviation_endpoint(client: TestClient):
    response = client.post(
        "/v1/classes/component-deviation",
        json={"marks": [{"test1": 40, "test2": 30, "assignment": 20}, {"test1": 20, "test2": 10, "assignment": 10}]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["weakComponent"] == "Test 2"
    assert data["averages"] == {"test1": 30.0, "test2": 20.0, "assignment": 15.0}
    assert data["percentages"] == {"test1": 75.0, "test2": 66.7, "assignment": 75.0}


def test_component_deviation_endpoint_empty(client: TestClient):
    response = client.post("/v1/classes/component-deviation", json={"marks": []})

    assert response.json()["weakComponent"] == "None"


def test_pass_rate_forecast_endpoint(client: TestClient):
    """Test passThreshold falls back to the configured pass marks"""
    response = client.post(
        "/v1/classes/pass-rate-forecast",
        json={"students": [{"total": 45, "attendancePct": 90}]},
    )

    assert response.status_code == 200
    assert response.json() == {
        "currentPassRate": 100.0,
        "predictedPassRate": 100.0,
        "atRiskCount": 0,
        "totalStudents": 1,
    }


def test_pass_rate_forecast_endpoint_empty(client: TestClient):
    response = client.post("/v1/classes/pass-rate-forecast", json={"students": [], "passThreshold": 20})

    assert response.json() == {
        "currentPassRate": 0.0,
        "predictedPassRate": 0.0,
        "atRiskCount": 0,
        "totalStudents": 0,
    }


def test_class_insights_endpoint(client: TestClient):
    response = client.post(
        "/v1/classes/insights",
        json={
            "signals": [
                {"attendancePct": 30, "internalMarks": 5},
                {"attendancePct": 95, "internalMarks": 40},
            ]
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["insights"] == ["1 students are in the High risk zone. Immediate intervention advised."]
    assert [p["riskLevel"] for p in data["profiles"]] == ["High", "Low"]


def test_class_summary_endpoint(client: TestClient):
    """Test the dashboard bundle: weakest component, forecast, consistency"""
    response = client.post(
        "/v1/classes/summary",
        json={
            "marks": [
                {"test1": 40, "test2": 30, "assignment": 20},
                {"test1": 20, "test2": 10, "assignment": 10},
            ],
            "students": [
                {"total": 29, "attendancePct": 90},
                {"total": 14, "attendancePct": 50},
            ],
            "settings": {"passMarks": 20},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["componentDeviation"]["weakComponent"] == "Test 2"
    assert data["forecast"]["currentPassRate"] == 50.0
    assert data["forecast"]["atRiskCount"] == 1
    # Weighted totals 29.0 and 13.0: mean 21, std 8
    assert data["consistencyScore"] == 61.9


def test_class_summary_endpoint_without_students(client: TestClient):
    response = client.post("/v1/classes/summary", json={"marks": [{"test1": 10}]})

    assert response.status_code == 200
    data = response.json()
    assert data["forecast"] is None
    assert data["consistencyScore"] == 0.0


def test_component_deviation_endpoint_huge_marks(client: TestClient):
    response = client.post(
        "/v1/classes/component-deviation",
        json={"marks": [{"test1": 1e308}, {"test1": 1e308}]},
    )

    assert response.status_code == 200
    assert response.json()["averages"]["test1"] == 0.0


def test_trend_forecast_endpoint_huge_values(client: TestClient):
    response = client.post("/v1/trends/forecast", json={"series": [1e308, -1e308]})

    assert response.status_code == 200
    assert response.json()["slope"] == 0.0


def test_engine_failure_maps_to_500(client: TestClient, monkeypatch):
    """Test unexpected engine errors become a JSON 500 on every endpoint style"""

    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("campus_analytics.api.v1.trends.forecast_trend", broken)
    monkeypatch.setattr("campus_analytics.api.v1.students.calculate_risk", broken)

    response = client.post("/v1/trends/forecast", json={"series": [1, 2]})
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}

    response = client.post("/v1/students/legacy-risk", json={"attendancePercentage": 50, "avgMarks": 50})
    assert response.status_code == 500


def test_request_metrics_group_unknown_paths(client: TestClient):
    client.post("/v1/trends/forecast", json={"series": [1, 2]})
    client.get("/no/such/path-123")

    text = client.get("/metrics").text
    assert 'endpoint="/v1/trends/forecast"' in text
    assert 'endpoint="unmatched"' in text
    assert "path-123" not in text
