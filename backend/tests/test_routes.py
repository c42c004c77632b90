"""Tests for the HTTP endpoints under /api."""
from fastapi.testclient import TestClient

from debt_engine.main import app

client = TestClient(app)

_CARD = {
    "id": "card",
    "name": "Credit Card",
    "balance": 120_000.0,
    "annual_interest_rate_percent": 36.0,
    "minimum_payment": 6_000.0,
    "lender": "HDFC",
    "due_date": "2025-07-05",
    "is_high_priority": True,
}

_CAR = {
    "id": "car",
    "name": "Car Loan",
    "balance": 240_000.0,
    "lender": "SBI",
    "original_principal": 400_000.0,
    "annual_interest_rate_percent": 12.0,
    "minimum_payment": 8_000.0,
    "due_date": "2025-07-10",
}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert set(data["strategies"]) == {"avalanche", "snowball", "custom"}
    assert data["defaults"]["horizon_cap_months"] == 600


# --- Simulations ---


def test_run_simulation_default_config():
    response = client.post("/api/simulations/run", json={"debts": [_CARD, _CAR]})
    assert response.status_code == 200
    data = response.json()
    assert data["strategy"] == "avalanche"
    assert data["summary"]["months_to_debt_free"] == len(data["monthly_timeline"])
    assert set(data["summary"]["payoff_months"]) == {"card", "car"}


def test_run_simulation_with_start_date():
    response = client.post("/api/simulations/run", json={
        "debts": [{"id": "a", "balance": 1_000.0, "minimum_payment": 500.0}],
        "config": {"strategy": "snowball", "start_date": "2025-01-31"},
    })
    assert response.status_code == 200
    assert response.json()["summary"]["debt_free_date"] == "2025-03-31"


def test_run_simulation_unpayable_returns_422():
    response = client.post("/api/simulations/run", json={
        "debts": [{"id": "a", "balance": 10_000.0, "annual_interest_rate_percent": 24.0,
                   "minimum_payment": 150.0}],
        "config": {"horizon_cap_months": 12},
    })
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "unpayable_horizon"
    assert len(detail["partial_timeline"]) == 12


def test_run_simulation_invalid_debt_returns_422():
    response = client.post("/api/simulations/run", json={
        "debts": [{**_CARD, "balance": -1.0}],
    })
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "validation_error"
    assert detail["failures"][0]["field"] == "card.balance"


def test_custom_strategy_requires_order():
    response = client.post("/api/simulations/run", json={
        "debts": [_CARD], "config": {"strategy": "custom"},
    })
    assert response.status_code == 422


def test_compare():
    response = client.post("/api/simulations/compare", json={
        "debts": [_CARD, _CAR], "config": {"extra_monthly_payment": 5_000.0},
    })
    assert response.status_code == 200
    data = response.json()
    assert data["recommended"] in ("avalanche", "snowball")
    assert data["avalanche"]["strategy"] == "avalanche"
    assert data["snowball"]["strategy"] == "snowball"


def test_savings():
    response = client.post("/api/simulations/savings", json={
        "debts": [{"id": "a", "balance": 10_000.0, "annual_interest_rate_percent": 12.0,
                   "minimum_payment": 500.0}],
        "extra_monthly_payment": 500.0,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["months_saved"] == 12
    assert data["new_months_to_debt_free"] == 11


# --- Amortization ---


def test_project_payoff():
    response = client.post("/api/amortization/project", json={
        "balance": 10_000.0, "annual_interest_rate_percent": 12.0, "monthly_payment": 500.0,
    })
    assert response.status_code == 200
    assert response.json()["months"] == 23


def test_project_payoff_non_amortizing():
    response = client.post("/api/amortization/project", json={
        "balance": 10_000.0, "annual_interest_rate_percent": 24.0, "monthly_payment": 150.0,
    })
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "non_amortizing"
    assert abs(detail["minimum_required_payment"] - 200.01) < 1e-9


def test_breakdown():
    response = client.post("/api/amortization/breakdown", json={
        "balance": 10_000.0, "annual_interest_rate_percent": 12.0, "payment": 500.0,
    })
    assert response.status_code == 200
    assert abs(response.json()["principal_portion"] - 400.0) < 1e-9


# --- DTI ---


def test_dti():
    response = client.post("/api/dti/analyze", json={
        "debts": [_CARD, _CAR], "monthly_income": 70_000.0,
    })
    assert response.status_code == 200
    data = response.json()
    assert abs(data["dti_ratio_percent"] - 20.0) < 1e-9
    assert data["health_band"] == "excellent"


def test_dti_zero_income_warns():
    response = client.post("/api/dti/analyze", json={"debts": [_CARD], "monthly_income": 0})
    assert response.status_code == 200
    assert response.json()["warnings"][0]["field"] == "monthly_income"


# --- Debts ---


def test_validate_reports_all_failures():
    response = client.post("/api/debts/validate", json={"debts": [
        {**_CARD, "balance": -5.0, "annual_interest_rate_percent": 150.0},
        _CAR,
        {**_CAR, "name": "Duplicate"},
    ]})
    assert response.status_code == 200
    data = response.json()
    assert data["is_valid"] is False
    fields = {f["field"] for f in data["failures"]}
    assert {"card.balance", "card.annual_interest_rate_percent", "id"} <= fields


def test_validate_accepts_clean_portfolio():
    response = client.post("/api/debts/validate", json={"debts": [_CARD, _CAR]})
    assert response.status_code == 200
    data = response.json()
    assert data["is_valid"] is True
    assert [d["id"] for d in data["debts"]] == ["card", "car"]


def test_summary():
    response = client.post("/api/debts/summary", json={"debts": [_CARD, _CAR], "today": "2025-07-01"})
    assert response.status_code == 200
    data = response.json()
    assert data["debt_count"] == 2
    assert data["upcoming_payments_count"] == 1


def test_suggestions():
    response = client.post("/api/debts/suggestions", json={
        "id": "a", "balance": 10_000.0, "annual_interest_rate_percent": 12.0, "minimum_payment": 500.0,
    })
    assert response.status_code == 200
    assert [s["type"] for s in response.json()] == [
        "minimum", "double_minimum", "interest_plus", "full_payoff",
    ]


def test_payment_check():
    response = client.post("/api/debts/payment-check", json={"debt": _CARD, "amount": 200_000.0})
    assert response.status_code == 200
    data = response.json()
    assert data["is_valid"] is False
    assert "Payment amount cannot exceed current balance" in data["errors"]


def test_dti_rejects_negative_minimum():
    response = client.post("/api/dti/analyze", json={
        "debts": [{**_CARD, "minimum_payment": -500.0}], "monthly_income": 1_000.0,
    })
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "validation_error"


def test_project_payoff_rejects_negative_payment():
    response = client.post("/api/amortization/project", json={
        "balance": 1_000.0, "annual_interest_rate_percent": 12.0, "monthly_payment": -100.0,
    })
    assert response.status_code == 422
    assert response.json()["detail"]["failures"][0]["field"] == "monthly_payment"
