"""Tests for debt-to-income analysis."""
import pytest
from pydantic import ValidationError

from debt_engine.models.debt import Debt, PaymentFrequency
from debt_engine.models.dti import DTIBands, HealthBand
from debt_engine.models.errors import DebtValidationError
from debt_engine.services.dti import analyze_dti, classify_dti, monthly_equivalent


def _make_debt(**overrides) -> Debt:
    defaults = dict(id="D1", balance=50_000.0, annual_interest_rate_percent=12.0, minimum_payment=1_000.0)
    defaults.update(overrides)
    return Debt(**defaults)


@pytest.mark.parametrize("frequency,expected", [
    (PaymentFrequency.weekly, 4_330.0),
    (PaymentFrequency.biweekly, 2_170.0),
    (PaymentFrequency.monthly, 1_000.0),
    (PaymentFrequency.quarterly, 1_000.0 / 3.0),
])
def test_monthly_equivalent(frequency, expected):
    assert monthly_equivalent(1_000.0, frequency) == pytest.approx(expected)


def test_weekly_debt_ratio():
    result = analyze_dti([_make_debt(payment_frequency="weekly")], 50_000.0)
    assert result.total_monthly_equivalent_payments == pytest.approx(4_330.0)
    assert result.dti_ratio_percent == pytest.approx(8.66)
    assert result.health_band == HealthBand.excellent
    assert result.warnings == []


@pytest.mark.parametrize("ratio,band", [
    (0.0, HealthBand.excellent),
    (20.0, HealthBand.excellent),
    (20.01, HealthBand.good),
    (36.0, HealthBand.good),
    (40.0, HealthBand.manageable),
    (43.0, HealthBand.manageable),
    (50.0, HealthBand.high_risk),
])
def test_default_bands(ratio, band):
    assert classify_dti(ratio, DTIBands()) == band


def test_custom_bands():
    bands = DTIBands(excellent_max=10, good_max=20, manageable_max=30)
    result = analyze_dti([_make_debt(minimum_payment=2_500.0)], 10_000.0, bands)
    assert result.dti_ratio_percent == pytest.approx(25.0)
    assert result.health_band == HealthBand.manageable


def test_bands_must_ascend():
    with pytest.raises(ValidationError):
        DTIBands(excellent_max=40, good_max=30, manageable_max=50)


def test_per_debt_breakdown(sample_portfolio):
    result = analyze_dti(sample_portfolio, 80_000.0)
    assert result.monthly_equivalent_payments == {"card": 6_000.0, "car": 8_000.0, "personal": 2_000.0}
    assert result.dti_ratio_percent == pytest.approx(20.0)
    assert result.health_band == HealthBand.excellent


@pytest.mark.parametrize("income", [0.0, -5_000.0])
def test_non_positive_income_warns(income):
    result = analyze_dti([_make_debt()], income)
    assert result.dti_ratio_percent == 0.0
    assert len(result.warnings) == 1
    assert result.warnings[0].kind == "degenerate_input"
    assert result.warnings[0].field == "monthly_income"


def test_no_debts():
    result = analyze_dti([], 50_000.0)
    assert result.dti_ratio_percent == 0.0
    assert result.health_band == HealthBand.excellent


def test_negative_minimum_payment_rejected():
    result = analyze_dti([_make_debt(minimum_payment=-500.0)], 1_000.0)
    assert isinstance(result, DebtValidationError)
    assert [f.field for f in result.failures] == ["D1.minimum_payment"]


def test_duplicate_ids_rejected():
    debts = [_make_debt(id="a", minimum_payment=100.0), _make_debt(id="a", minimum_payment=200.0)]
    result = analyze_dti(debts, 1_000.0)
    assert isinstance(result, DebtValidationError)
    assert "id" in {f.field for f in result.failures}


def test_non_finite_income_rejected():
    result = analyze_dti([_make_debt()], float("nan"))
    assert isinstance(result, DebtValidationError)
    assert result.failures[0].field == "monthly_income"


def test_total_counts_every_debt():
    debts = [
        _make_debt(id="a", minimum_payment=100.0),
        _make_debt(id="b", minimum_payment=200.0, payment_frequency="quarterly"),
    ]
    result = analyze_dti(debts, 1_000.0)
    assert result.total_monthly_equivalent_payments == pytest.approx(100.0 + 200.0 / 3.0)
    assert result.total_monthly_equivalent_payments == pytest.approx(
        sum(result.monthly_equivalent_payments.values())
    )
