"""Strategy comparison service.

Runs the portfolio simulator once per strategy under identical settings
and reports the difference, with an explicit recommendation policy:

- avalanche is recommended by default (it never costs more interest);
- snowball is recommended when avalanche saves less than the materiality
  threshold (``materiality_threshold_pct`` percent of the total starting
  debt), since clearing small balances first gives quicker visible wins
  at negligible cost.
"""
from __future__ import annotations

import logging

from debt_engine.models.debt import Debt
from debt_engine.models.errors import DebtValidationError, UnpayableHorizonError
from debt_engine.models.simulation import (
    SimulationConfig,
    SimulationResult,
    Strategy,
    StrategyComparison,
)
from debt_engine.simulation.engine import simulate_portfolio

logger = logging.getLogger(__name__)

RATIONALE_MATERIAL = "interest_savings_material"
RATIONALE_IMMATERIAL = "interest_difference_immaterial"


def materiality_threshold(debts: list[Debt], threshold_pct: float) -> float:
    """Absolute interest difference below which the strategies count as equivalent."""
    total_debt = sum(d.balance for d in debts)
    return total_debt * threshold_pct / 100.0


def recommend(interest_difference: float, threshold: float) -> tuple[Strategy, str]:
    """Apply the recommendation policy to a snowball-minus-avalanche interest delta."""
    if interest_difference < threshold:
        return Strategy.snowball, RATIONALE_IMMATERIAL
    return Strategy.avalanche, RATIONALE_MATERIAL


def compare_strategies(
    debts: list[Debt], config: SimulationConfig,
) -> StrategyComparison | DebtValidationError | UnpayableHorizonError:
    """Compare avalanche and snowball for a portfolio.

    ``config.strategy`` is ignored; every other setting (extra payment,
    horizon cap, epsilon, start date) is shared by both runs.
    """
    runs: dict[Strategy, SimulationResult] = {}
    for strategy in (Strategy.avalanche, Strategy.snowball):
        result = simulate_portfolio(
            debts, config.model_copy(update={"strategy": strategy, "custom_order": None}),
        )
        if not isinstance(result, SimulationResult):
            return result
        runs[strategy] = result

    avalanche = runs[Strategy.avalanche]
    snowball = runs[Strategy.snowball]
    months_difference = (
        snowball.summary.months_to_debt_free - avalanche.summary.months_to_debt_free
    )
    interest_difference = (
        snowball.summary.total_interest_paid - avalanche.summary.total_interest_paid
    )
    threshold = materiality_threshold(debts, config.materiality_threshold_pct)
    recommended, rationale = recommend(interest_difference, threshold)

    logger.info(
        "Compared strategies: avalanche saves %.2f interest / %d months; recommending %s",
        interest_difference, months_difference, recommended.value,
    )
    return StrategyComparison(
        avalanche=avalanche,
        snowball=snowball,
        months_difference=months_difference,
        interest_difference=interest_difference,
        materiality_threshold=threshold,
        recommended=recommended,
        rationale=rationale,
    )
