"""Tests for portfolio summary figures."""
from datetime import date

import pytest

from debt_engine.models.debt import Debt
from debt_engine.services.summary import (
    calculate_progress,
    days_until_due,
    is_due_soon,
    is_overdue,
    priority_score,
    summarize_portfolio,
)

TODAY = date(2025, 7, 1)


def _make_debt(**overrides) -> Debt:
    defaults = dict(id="D1", balance=50_000.0, annual_interest_rate_percent=12.0, minimum_payment=1_000.0)
    defaults.update(overrides)
    return Debt(**defaults)


def test_progress():
    assert calculate_progress(_make_debt(balance=240_000.0, original_principal=400_000.0)) == pytest.approx(40.0)
    assert calculate_progress(_make_debt(original_principal=None)) == 0.0
    assert calculate_progress(_make_debt(balance=0.0, original_principal=1_000.0)) == 100.0


def test_due_dates():
    soon = _make_debt(due_date=date(2025, 7, 5))
    later = _make_debt(due_date=date(2025, 7, 10))
    late = _make_debt(due_date=date(2025, 6, 1))
    today = _make_debt(due_date=TODAY)
    assert days_until_due(soon, TODAY) == 4
    assert days_until_due(_make_debt(), TODAY) is None
    assert is_due_soon(soon, TODAY)
    assert not is_due_soon(later, TODAY)
    assert not is_due_soon(today, TODAY)
    assert is_overdue(late, TODAY)
    assert not is_overdue(today, TODAY)


def test_priority_score_components():
    card = _make_debt(
        annual_interest_rate_percent=36.0, is_high_priority=True, due_date=date(2025, 7, 5),
    )
    assert priority_score(card, TODAY) == 50 + 25 + 30
    overdue_small = _make_debt(
        balance=1_000.0, annual_interest_rate_percent=16.0, due_date=date(2025, 6, 1),
    )
    assert priority_score(overdue_small, TODAY) == 100 + 20 + 15
    assert priority_score(_make_debt(annual_interest_rate_percent=8.0), TODAY) == 0


def test_summarize_portfolio(sample_portfolio):
    summary = summarize_portfolio(sample_portfolio, TODAY)
    assert summary.total_debt == pytest.approx(400_000.0)
    assert summary.total_minimum_payments == pytest.approx(16_000.0)
    assert summary.average_interest_rate_percent == pytest.approx(22.0)
    assert summary.debt_count == 3
    assert summary.high_priority_count == 1
    assert summary.upcoming_payments_count == 1


def test_summarize_empty_portfolio():
    summary = summarize_portfolio([], TODAY)
    assert summary.debt_count == 0
    assert summary.average_interest_rate_percent == 0.0
