"""Payoff engine — amortization, strategy ranking, and waterfall simulation."""
from debt_engine.simulation.amortization import (
    calculate_payment_breakdown,
    monthly_rate,
    payment_suggestions,
    project_payoff,
)
from debt_engine.simulation.strategies import list_strategies, rank_debts
from debt_engine.simulation.engine import simulate_portfolio

__all__ = [
    "calculate_payment_breakdown",
    "monthly_rate",
    "payment_suggestions",
    "project_payoff",
    "list_strategies",
    "rank_debts",
    "simulate_portfolio",
]
