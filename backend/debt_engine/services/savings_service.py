"""Extra-payment savings projection.

Savings are always the difference between two full simulator runs (minimum
payments only vs. minimums plus the extra contribution), so the figures
match the timelines shown alongside them.
"""
from __future__ import annotations

import logging

from debt_engine.models.debt import Debt
from debt_engine.models.errors import DebtValidationError, FieldFailure, UnpayableHorizonError
from debt_engine.models.simulation import SavingsProjection, SimulationConfig, SimulationResult
from debt_engine.simulation.engine import simulate_portfolio

logger = logging.getLogger(__name__)


def project_savings(
    debts: list[Debt], config: SimulationConfig, extra_monthly_payment: float,
) -> SavingsProjection | DebtValidationError | UnpayableHorizonError:
    """Quantify what an extra monthly contribution saves under ``config.strategy``.

    The baseline run uses ``extra_monthly_payment=0``; both runs share the
    strategy, horizon cap and epsilon from ``config``.
    """
    if not extra_monthly_payment >= 0:
        return DebtValidationError(
            message="Extra monthly payment must be zero or more",
            failures=[FieldFailure(
                field="extra_monthly_payment", message="Extra monthly payment must be zero or more",
            )],
        )

    baseline = simulate_portfolio(debts, config.model_copy(update={"extra_monthly_payment": 0.0}))
    if not isinstance(baseline, SimulationResult):
        return baseline

    modified = simulate_portfolio(
        debts, config.model_copy(update={"extra_monthly_payment": extra_monthly_payment}),
    )
    if not isinstance(modified, SimulationResult):
        return modified

    months_saved = baseline.summary.months_to_debt_free - modified.summary.months_to_debt_free
    interest_saved = baseline.summary.total_interest_paid - modified.summary.total_interest_paid
    logger.info(
        "Extra %.2f/month saves %d months and %.2f interest",
        extra_monthly_payment, months_saved, interest_saved,
    )
    return SavingsProjection(
        strategy=config.strategy,
        extra_monthly_payment=extra_monthly_payment,
        baseline=baseline,
        modified=modified,
        months_saved=months_saved,
        interest_saved=interest_saved,
        new_months_to_debt_free=modified.summary.months_to_debt_free,
    )
