"""Amortization calculator — closed-form single-debt payoff projection.

Months to payoff for a fixed payment uses the standard annuity solution

    n = -ln(1 - B*r / P) / ln(1 + r)

rounded up to whole months.  Payments at or below the interest-only amount
never retire the balance and are reported as NonAmortizingError.
"""
from __future__ import annotations

import logging
import math

from debt_engine.config import settings
from debt_engine.models.amortization import (
    AmortizationResult,
    PaymentBreakdown,
    PaymentSuggestion,
)
from debt_engine.models.debt import Debt
from debt_engine.models.errors import DebtValidationError, FieldFailure, NonAmortizingError
from debt_engine.services.dti import monthly_equivalent

logger = logging.getLogger(__name__)

_RELATIVE_EPSILON = 1e-9  # payment within this fraction of interest-only counts as interest-only
_INTEREST_PLUS_AMOUNT = 100.0


def monthly_rate(annual_interest_rate_percent: float) -> float:
    """Convert an annual percentage rate (e.g. 24) to a monthly decimal rate."""
    return annual_interest_rate_percent / 100.0 / 12.0


def _input_failures(
    balance: float, annual_interest_rate_percent: float, monthly_payment: float,
) -> list[FieldFailure]:
    failures: list[FieldFailure] = []
    if not (math.isfinite(balance) and balance >= 0):
        failures.append(FieldFailure(
            field="balance", message="Balance must be a finite amount of zero or more",
        ))
    # Chained comparison is False for NaN
    if not 0 <= annual_interest_rate_percent <= 100:
        failures.append(FieldFailure(
            field="annual_interest_rate_percent",
            message="Interest rate must be between 0% and 100%",
        ))
    if not (math.isfinite(monthly_payment) and monthly_payment >= 0):
        failures.append(FieldFailure(
            field="monthly_payment", message="Monthly payment must be a finite amount of zero or more",
        ))
    return failures


def project_payoff(
    balance: float,
    annual_interest_rate_percent: float,
    monthly_payment: float,
    margin: float = settings.NON_AMORTIZING_MARGIN,
) -> AmortizationResult | NonAmortizingError | DebtValidationError:
    """Project months to payoff and total interest for a fixed monthly payment.

    Args:
        balance: Outstanding balance.
        annual_interest_rate_percent: Nominal annual rate in percent (0-100).
        monthly_payment: Fixed payment applied every month.
        margin: Amount added to the interest-only payment when reporting the
            minimum payment that amortizes at all.

    Returns:
        AmortizationResult; NonAmortizingError when the payment never
        reduces the balance; DebtValidationError for negative, non-finite
        or out-of-range inputs.
    """
    failures = _input_failures(balance, annual_interest_rate_percent, monthly_payment)
    if failures:
        return DebtValidationError(message="Payoff projection inputs are invalid", failures=failures)

    r = monthly_rate(annual_interest_rate_percent)

    if balance <= 0:
        return AmortizationResult(
            balance=balance,
            annual_interest_rate_percent=annual_interest_rate_percent,
            monthly_payment=monthly_payment,
            months=0,
            total_paid=0.0,
            total_interest=0.0,
        )

    interest_only = balance * r
    if monthly_payment <= interest_only * (1.0 + _RELATIVE_EPSILON):
        required = interest_only + margin
        logger.warning(
            "Payment %.2f does not amortize balance %.2f (interest-only %.2f)",
            monthly_payment, balance, interest_only,
        )
        return NonAmortizingError(
            message=(
                f"A payment of {monthly_payment:.2f} never pays off a balance of "
                f"{balance:.2f}; at least {required:.2f} per month is required."
            ),
            balance=balance,
            payment=monthly_payment,
            interest_only_payment=interest_only,
            minimum_required_payment=required,
        )

    if r == 0:
        months = math.ceil(balance / monthly_payment)
        total_interest = 0.0
    else:
        months = math.ceil(-math.log(1.0 - interest_only / monthly_payment) / math.log(1.0 + r))
        # The final payment is usually partial; clamp the overshoot
        total_interest = max(0.0, months * monthly_payment - balance)

    return AmortizationResult(
        balance=balance,
        annual_interest_rate_percent=annual_interest_rate_percent,
        monthly_payment=monthly_payment,
        months=months,
        total_paid=balance + total_interest,
        total_interest=total_interest,
    )


def calculate_payment_breakdown(
    balance: float, annual_interest_rate_percent: float, payment: float,
) -> PaymentBreakdown:
    """Split a single payment into its interest and principal portions."""
    r = monthly_rate(annual_interest_rate_percent)
    monthly_interest = balance * r
    interest_portion = min(monthly_interest, payment)
    principal_portion = max(0.0, payment - interest_portion)
    new_balance = max(0.0, balance - principal_portion)
    return PaymentBreakdown(
        payment=payment,
        interest_portion=interest_portion,
        principal_portion=principal_portion,
        new_balance=new_balance,
        is_full_payoff=new_balance == 0.0,
        monthly_interest_amount=monthly_interest,
        monthly_rate_percent=r * 100.0,
    )


def payment_suggestions(debt: Debt) -> list[PaymentSuggestion]:
    """Candidate payment amounts for a debt, each projected against the minimum.

    Suggestions larger than the outstanding balance are dropped.
    """
    interest_only = debt.balance * monthly_rate(debt.annual_interest_rate_percent)
    minimum = monthly_equivalent(debt.minimum_payment, debt.payment_frequency)
    candidates = [
        ("minimum", minimum, "Minimum Payment", "Required monthly payment"),
        ("double_minimum", minimum * 2, "Double Minimum", "Pay off debt faster"),
        ("interest_plus", interest_only + _INTEREST_PLUS_AMOUNT,
         f"Interest + {_INTEREST_PLUS_AMOUNT:.0f}", "Guaranteed progress on principal"),
        ("full_payoff", debt.balance, "Full Payoff", "Pay off completely"),
    ]

    baseline = project_payoff(debt.balance, debt.annual_interest_rate_percent, minimum)
    suggestions: list[PaymentSuggestion] = []
    for kind, amount, label, description in candidates:
        if amount > debt.balance:
            continue
        projection = project_payoff(debt.balance, debt.annual_interest_rate_percent, amount)
        months = None
        months_saved = None
        interest_saved = None
        if isinstance(projection, AmortizationResult):
            months = projection.months
            if isinstance(baseline, AmortizationResult):
                months_saved = baseline.months - projection.months
                interest_saved = baseline.total_interest - projection.total_interest
        suggestions.append(PaymentSuggestion(
            type=kind,
            amount=amount,
            label=label,
            description=description,
            months=months,
            months_saved=months_saved,
            interest_saved=interest_saved,
        ))
    return suggestions
