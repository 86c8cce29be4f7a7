"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_quote_total" in response.text


def test_quote_endpoint(client: TestClient):
    """Test POST /v1/quote for the representative $1000 / 12 week loan"""
    response = client.post(
        "/v1/quote",
        json={"principal_cents": 100_000, "term_weeks": 12, "start_date": "2024-01-01"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["apr_percent"] == 20.0
    assert data["total_interest_cents"] == 4615
    assert data["total_repayment_cents"] == 104615
    assert data["weekly_payment_display"] == "$87.18"
    assert data["total_repayment_display"] == "$1,046.15"
    assert data["affordability"] is None

    schedule = data["schedule"]
    assert len(schedule) == 12
    assert schedule[0]["due_date"] == "2024-01-08"
    assert schedule[-1]["remaining_balance_cents"] == 0
    assert sum(item["payment_cents"] for item in schedule) == 104615


def test_quote_endpoint_live_affordability_preview(client: TestClient):
    """Income supplied with the quote adds an affordability block"""
    response = client.post(
        "/v1/quote",
        json={
            "principal_cents": 100_000,
            "term_weeks": 12,
            "monthly_income_cents": 450_000,
            "monthly_expenses_cents": 300_000,
        },
    )

    assert response.status_code == 200
    affordability = response.json()["affordability"]
    # monthly payment $377.49 against $4500 income
    assert affordability["dti_ratio"] == 8.4
    assert affordability["can_afford"] is True
    assert affordability["disposable_income_cents"] == 150_000


def test_quote_endpoint_invalid_amount(client: TestClient):
    """Out-of-range principal returns a field-level message"""
    response = client.post("/v1/quote", json={"principal_cents": 5_000, "term_weeks": 12})

    assert response.status_code == 422
    assert response.json()["detail"] == [
        {"field": "principal_cents", "code": "InvalidLoanAmount", "message": "Minimum loan amount is $100"}
    ]


def test_quote_endpoint_reports_both_field_errors(client: TestClient):
    response = client.post("/v1/quote", json={"principal_cents": 900_000, "term_weeks": 40})

    assert response.status_code == 422
    codes = [error["code"] for error in response.json()["detail"]]
    assert codes == ["InvalidLoanAmount", "InvalidLoanTerm"]


def test_quote_endpoint_echoes_request_id(client: TestClient):
    response = client.post(
        "/v1/quote",
        json={"principal_cents": 30_000, "term_weeks": 2},
        headers={"X-Request-ID": "form-preview-1"},
    )

    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "form-preview-1"
    assert response.json()["apr_percent"] == 35.0


def test_affordability_endpoint(client: TestClient):
    """Test POST /v1/affordability"""
    response = client.post(
        "/v1/affordability",
        json={"monthly_income_cents": 450_000, "monthly_expenses_cents": 300_000, "monthly_payment_cents": 37_500},
    )

    assert response.status_code == 200
    assert response.json() == {"can_afford": True, "dti_ratio": 8.3, "disposable_income_cents": 150_000}


def test_affordability_endpoint_zero_income(client: TestClient):
    response = client.post(
        "/v1/affordability",
        json={"monthly_income_cents": 0, "monthly_expenses_cents": 0, "monthly_payment_cents": 37_500},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["can_afford"] is False
    assert data["dti_ratio"] is None


def test_rates_endpoint(client: TestClient):
    """Test GET /v1/rates"""
    response = client.get("/v1/rates")

    assert response.status_code == 200
    data = response.json()
    assert data["min_principal_cents"] == 10_000
    assert data["max_term_weeks"] == 26
    assert len(data["tiers"]) == 4
    assert data["tiers"][0]["min_apr_percent"] == 28.0
    assert data["tiers"][0]["max_apr_percent"] == 35.0
    assert data["representative_example"]["total_repayment_cents"] == 104615
