"""Debt-to-income analysis."""
from __future__ import annotations

import logging
import math

from debt_engine.models.debt import Debt, PaymentFrequency
from debt_engine.models.dti import DTIBands, DTIResult, HealthBand
from debt_engine.models.errors import DebtValidationError, DegenerateInputWarning, FieldFailure
from debt_engine.services.validation import check_simulation_inputs

logger = logging.getLogger(__name__)

# Payments per month for each frequency (weekly ~52/12, biweekly ~26/12)
_MONTHLY_MULTIPLIERS: dict[PaymentFrequency, float] = {
    PaymentFrequency.weekly: 4.33,
    PaymentFrequency.biweekly: 2.17,
    PaymentFrequency.monthly: 1.0,
}


def monthly_equivalent(amount: float, frequency: PaymentFrequency) -> float:
    """Convert a per-period payment to its monthly equivalent."""
    if frequency == PaymentFrequency.quarterly:
        return amount / 3.0
    return amount * _MONTHLY_MULTIPLIERS[frequency]


def classify_dti(dti_ratio_percent: float, bands: DTIBands) -> HealthBand:
    if dti_ratio_percent <= bands.excellent_max:
        return HealthBand.excellent
    if dti_ratio_percent <= bands.good_max:
        return HealthBand.good
    if dti_ratio_percent <= bands.manageable_max:
        return HealthBand.manageable
    return HealthBand.high_risk


def analyze_dti(
    debts: list[Debt], monthly_income: float, bands: DTIBands | None = None,
) -> DTIResult | DebtValidationError:
    """Compute the debt-to-income ratio from each debt's minimum payment.

    Out-of-range debts, duplicate ids or a non-finite income are returned as a
    DebtValidationError.  Income at or below zero yields a ratio of 0 with a
    DegenerateInputWarning attached rather than an error.
    """
    invalid = check_simulation_inputs(debts)
    if invalid is None and not math.isfinite(monthly_income):
        invalid = DebtValidationError(
            message="Monthly income must be a finite number",
            failures=[FieldFailure(
                field="monthly_income", message="Monthly income must be a finite number",
            )],
        )
    if invalid is not None:
        logger.warning("DTI rejected: %s", invalid.message)
        return invalid

    bands = bands or DTIBands()
    payments = [monthly_equivalent(d.minimum_payment, d.payment_frequency) for d in debts]
    per_debt = {d.id: amount for d, amount in zip(debts, payments)}
    total = sum(payments)

    warnings: list[DegenerateInputWarning] = []
    if monthly_income > 0:
        dti = total / monthly_income * 100.0
    else:
        dti = 0.0
        logger.warning("DTI requested with non-positive income %.2f", monthly_income)
        warnings.append(DegenerateInputWarning(
            message="Monthly income must be positive to compute a debt-to-income ratio",
            field="monthly_income",
        ))

    return DTIResult(
        monthly_equivalent_payments=per_debt,
        total_monthly_equivalent_payments=total,
        monthly_income=monthly_income,
        dti_ratio_percent=dti,
        health_band=classify_dti(dti, bands),
        warnings=warnings,
    )
