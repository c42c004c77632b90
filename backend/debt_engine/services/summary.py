"""Portfolio summary figures: progress, priority scores, and totals.

Date-dependent figures take ``today`` explicitly so the same inputs always
produce the same output.
"""
from __future__ import annotations

from datetime import date

from debt_engine.models.debt import Debt, PortfolioSummary
from debt_engine.services.dti import monthly_equivalent

_DUE_SOON_DAYS = 7
_SMALL_BALANCE = 5000.0

# (rate above, points) checked highest first
_RATE_POINTS = [(20.0, 30), (15.0, 20), (10.0, 10)]


def calculate_progress(debt: Debt) -> float:
    """Percent of the original principal already repaid, clamped to 0-100."""
    if not debt.original_principal or debt.original_principal <= 0:
        return 0.0
    paid = debt.original_principal - debt.balance
    return max(0.0, min(100.0, paid / debt.original_principal * 100.0))


def days_until_due(debt: Debt, today: date) -> int | None:
    if debt.due_date is None:
        return None
    return (debt.due_date - today).days


def is_overdue(debt: Debt, today: date) -> bool:
    days = days_until_due(debt, today)
    return days is not None and days < 0


def is_due_soon(debt: Debt, today: date) -> bool:
    """Due within the next week (not today, not overdue)."""
    days = days_until_due(debt, today)
    return days is not None and 0 < days <= _DUE_SOON_DAYS


def priority_score(debt: Debt, today: date) -> int:
    """Urgency score for ordering reminders; higher is more urgent."""
    score = 0
    if debt.is_high_priority:
        score += 50
    if is_overdue(debt, today):
        score += 100
    if is_due_soon(debt, today):
        score += 25
    for above, points in _RATE_POINTS:
        if debt.annual_interest_rate_percent > above:
            score += points
            break
    if debt.balance < _SMALL_BALANCE:
        score += 15
    return score


def summarize_portfolio(debts: list[Debt], today: date) -> PortfolioSummary:
    total_debt = sum(d.balance for d in debts)
    total_minimums = sum(monthly_equivalent(d.minimum_payment, d.payment_frequency) for d in debts)
    average_rate = (
        sum(d.annual_interest_rate_percent for d in debts) / len(debts) if debts else 0.0
    )
    return PortfolioSummary(
        total_debt=total_debt,
        total_minimum_payments=total_minimums,
        average_interest_rate_percent=average_rate,
        debt_count=len(debts),
        high_priority_count=sum(1 for d in debts if d.is_high_priority),
        upcoming_payments_count=sum(1 for d in debts if is_due_soon(d, today)),
    )
