"""Portfolio simulator — month-by-month waterfall payoff of a set of debts.

Each month:
  1. every open debt accrues interest and receives its minimum payment,
     converted to a monthly equivalent (never more than it owes);
  2. freed capacity = extra payment + the minimum payments retired debts
     no longer need;
  3. open debts are ranked by the active strategy and the freed capacity
     is poured into them in order, cascading when a debt is cleared.

The total monthly outlay is therefore constant (sum of minimums plus the
extra payment) until the final month.  Balances are carried at full float
precision; rounding happens only when results are formatted for display.
"""
from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date

from debt_engine.models.debt import Debt
from debt_engine.models.errors import DebtValidationError, UnpayableHorizonError
from debt_engine.models.simulation import (
    DebtMonthState,
    MonthSnapshot,
    SimulationConfig,
    SimulationResult,
    SimulationSummary,
)
from debt_engine.services.dti import monthly_equivalent
from debt_engine.services.validation import check_simulation_inputs
from debt_engine.simulation.amortization import monthly_rate
from debt_engine.simulation.strategies import rank_debts

logger = logging.getLogger(__name__)


@dataclass
class _DebtState:
    """Engine-owned working state for one debt; never leaves this module."""
    debt_id: str
    position: int
    annual_interest_rate_percent: float
    monthly_rate: float
    minimum_payment: float
    remaining_balance: float
    cumulative_interest: float = 0.0
    cumulative_principal: float = 0.0
    payoff_month: int | None = None
    # Per-month accumulators, cleared by close_month()
    month_interest: float = 0.0
    month_payment: float = 0.0

    @classmethod
    def from_debt(cls, debt: Debt, position: int) -> "_DebtState":
        return cls(
            debt_id=debt.id,
            position=position,
            annual_interest_rate_percent=debt.annual_interest_rate_percent,
            monthly_rate=monthly_rate(debt.annual_interest_rate_percent),
            # Non-monthly schedules are folded into one payment per month
            minimum_payment=monthly_equivalent(debt.minimum_payment, debt.payment_frequency),
            remaining_balance=debt.balance,
        )

    def accrue(self) -> None:
        self.month_interest = self.remaining_balance * self.monthly_rate
        self.remaining_balance += self.month_interest

    def pay(self, amount: float) -> None:
        self.month_payment += amount
        self.remaining_balance -= amount

    def close_month(self, month: int, epsilon: float) -> DebtMonthState:
        # Interest charged this month is paid first; the rest of the payment
        # is principal.  Principal is negative only while a payment is below
        # the interest charge (the unpaid interest capitalizes).
        principal = self.month_payment - self.month_interest
        self.cumulative_interest += self.month_interest
        self.cumulative_principal += principal
        if self.payoff_month is None and self.remaining_balance <= epsilon:
            self.payoff_month = month
        snapshot = DebtMonthState(
            debt_id=self.debt_id,
            payment=self.month_payment,
            interest_paid=self.month_interest,
            principal_paid=principal,
            remaining_balance=self.remaining_balance,
        )
        self.month_interest = 0.0
        self.month_payment = 0.0
        return snapshot


def _add_months(start: date, months: int) -> date:
    """Same day-of-month ``months`` later, clamped to the month's last day."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def _outstanding(states: list[_DebtState], epsilon: float) -> bool:
    return any(s.remaining_balance > epsilon for s in states)


def _simulate_month(states: list[_DebtState], config: SimulationConfig) -> None:
    """Apply one month of minimum payments and waterfall surplus."""
    freed = config.extra_monthly_payment

    # a. interest + minimum payments
    for s in states:
        if s.remaining_balance <= 0:
            freed += s.minimum_payment
            continue
        s.accrue()
        payment = min(s.minimum_payment, s.remaining_balance)
        s.pay(payment)
        # b. a debt cleared by its own minimum frees what it did not need
        freed += s.minimum_payment - payment

    # c-d. rank open debts and cascade the freed capacity down the ranking
    open_debts = [s for s in states if s.remaining_balance > 0]
    for s in rank_debts(open_debts, config.strategy, config.custom_order):
        if freed <= 0:
            break
        amount = min(freed, s.remaining_balance)
        s.pay(amount)
        freed -= amount


def _snapshot(month: int, states: list[_DebtState], epsilon: float) -> MonthSnapshot:
    debt_states = [s.close_month(month, epsilon) for s in states]
    return MonthSnapshot(
        month=month,
        debts=debt_states,
        total_interest=sum(d.interest_paid for d in debt_states),
        total_principal=sum(d.principal_paid for d in debt_states),
        total_remaining=sum(d.remaining_balance for d in debt_states),
    )


def simulate_portfolio(
    debts: list[Debt], config: SimulationConfig,
) -> SimulationResult | DebtValidationError | UnpayableHorizonError:
    """Run the waterfall simulation for a portfolio under one strategy.

    Args:
        debts: Portfolio, unique by id.  Input order is the tie-break.
        config: Strategy, extra payment, horizon cap and epsilon.

    Returns:
        SimulationResult with the full monthly timeline; DebtValidationError
        for out-of-range inputs; UnpayableHorizonError (carrying the partial
        timeline) if balances remain after ``config.horizon_cap_months``.
    """
    invalid = check_simulation_inputs(debts)
    if invalid is not None:
        logger.warning("Simulation rejected: %s", invalid.message)
        return invalid

    states = [_DebtState.from_debt(d, i) for i, d in enumerate(debts)]
    for s in states:
        if s.remaining_balance <= config.epsilon:
            # Already paid off before the first month
            s.payoff_month = 0
    timeline: list[MonthSnapshot] = []
    month = 0

    while _outstanding(states, config.epsilon):
        if month >= config.horizon_cap_months:
            remaining = sum(s.remaining_balance for s in states)
            logger.warning(
                "%s simulation unresolved after %d months (%.2f remaining)",
                config.strategy.value, config.horizon_cap_months, remaining,
            )
            return UnpayableHorizonError(
                message=(
                    f"Debts could not be paid off within {config.horizon_cap_months} months "
                    f"using the {config.strategy.value} strategy."
                ),
                strategy=config.strategy.value,
                horizon_cap_months=config.horizon_cap_months,
                remaining_balance=remaining,
                partial_timeline=timeline,
            )
        month += 1
        _simulate_month(states, config)
        timeline.append(_snapshot(month, states, config.epsilon))

    total_interest = sum(s.cumulative_interest for s in states)
    total_paid = sum(s.cumulative_interest + s.cumulative_principal for s in states)
    payoff_order = [
        s.debt_id for s in sorted(states, key=lambda s: (s.payoff_month, s.position))
    ]
    summary = SimulationSummary(
        months_to_debt_free=month,
        total_interest_paid=total_interest,
        total_paid=total_paid,
        payoff_months={s.debt_id: s.payoff_month for s in states},
        interest_by_debt={s.debt_id: s.cumulative_interest for s in states},
        principal_by_debt={s.debt_id: s.cumulative_principal for s in states},
        payoff_order=payoff_order,
        debt_free_date=_add_months(config.start_date, month) if config.start_date else None,
    )
    logger.info(
        "Simulated %s over %d debts: %d months, interest %.2f",
        config.strategy.value, len(states), month, total_interest,
    )
    return SimulationResult(
        strategy=config.strategy,
        extra_monthly_payment=config.extra_monthly_payment,
        monthly_timeline=timeline,
        summary=summary,
    )
