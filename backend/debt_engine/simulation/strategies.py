"""Repayment orderings — which open debt receives freed capacity first.

Each strategy maps to a sort key over the simulator's working state.  Every
key ends with the debt's position in the input portfolio so ties resolve
the same way on every run.
"""
from __future__ import annotations

from typing import Callable, Protocol, Sequence

from debt_engine.models.simulation import Strategy


class RankedDebt(Protocol):
    debt_id: str
    position: int
    annual_interest_rate_percent: float
    remaining_balance: float


_SortKey = Callable[[RankedDebt], tuple]

_STRATEGY_KEYS: dict[Strategy, _SortKey] = {
    Strategy.avalanche: lambda d: (-d.annual_interest_rate_percent, d.position),
    Strategy.snowball: lambda d: (d.remaining_balance, d.position),
}

_DESCRIPTIONS: dict[Strategy, str] = {
    Strategy.avalanche: "Highest interest rate first",
    Strategy.snowball: "Lowest remaining balance first",
    Strategy.custom: "Caller-supplied order of debt ids",
}


def rank_debts(
    debts: Sequence[RankedDebt],
    strategy: Strategy,
    custom_order: Sequence[str] | None = None,
) -> list[RankedDebt]:
    """Return debts in the order they should receive surplus payment.

    For the custom strategy, ids missing from ``custom_order`` rank after
    every listed id, in portfolio order.
    """
    if strategy == Strategy.custom:
        order = {debt_id: i for i, debt_id in enumerate(custom_order or [])}
        unlisted = len(order)
        return sorted(debts, key=lambda d: (order.get(d.debt_id, unlisted), d.position))
    return sorted(debts, key=_STRATEGY_KEYS[strategy])


def list_strategies() -> dict[str, str]:
    """Return all strategy names with a short description."""
    return {strategy.value: text for strategy, text in _DESCRIPTIONS.items()}
