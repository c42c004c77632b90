from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from debt_engine.config import settings


class Strategy(str, Enum):
    """Which debt receives the freed monthly capacity first."""
    avalanche = "avalanche"  # highest interest rate first
    snowball = "snowball"    # lowest remaining balance first
    custom = "custom"        # caller-supplied order of debt ids


class SimulationConfig(BaseModel):
    """Configuration for a portfolio simulation run."""
    strategy: Strategy = Strategy.avalanche
    custom_order: Optional[list[str]] = None
    extra_monthly_payment: float = Field(default=0.0, ge=0.0)
    horizon_cap_months: int = Field(default=settings.DEFAULT_HORIZON_CAP_MONTHS, ge=1)
    epsilon: float = Field(default=settings.DEFAULT_EPSILON, gt=0.0)
    materiality_threshold_pct: float = Field(default=settings.MATERIALITY_THRESHOLD_PCT, ge=0.0)
    start_date: Optional[date] = None

    @model_validator(mode="after")
    def _custom_needs_order(self) -> "SimulationConfig":
        if self.strategy == Strategy.custom and not self.custom_order:
            raise ValueError("custom strategy requires custom_order")
        return self


class DebtMonthState(BaseModel):
    """One debt's figures for a single simulated month."""
    debt_id: str
    payment: float
    interest_paid: float
    principal_paid: float
    remaining_balance: float


class MonthSnapshot(BaseModel):
    """Portfolio state at the end of a simulated month."""
    month: int
    debts: list[DebtMonthState]
    total_interest: float
    total_principal: float
    total_remaining: float


class SimulationSummary(BaseModel):
    months_to_debt_free: int
    total_interest_paid: float
    total_paid: float
    payoff_months: dict[str, int]
    interest_by_debt: dict[str, float]
    principal_by_debt: dict[str, float]
    payoff_order: list[str]
    debt_free_date: Optional[date] = None


class SimulationResult(BaseModel):
    """Full month-by-month outcome of one strategy run."""
    strategy: Strategy
    extra_monthly_payment: float
    monthly_timeline: list[MonthSnapshot]
    summary: SimulationSummary


class StrategyComparison(BaseModel):
    """Avalanche vs. snowball under identical settings."""
    avalanche: SimulationResult
    snowball: SimulationResult
    months_difference: int
    interest_difference: float
    materiality_threshold: float
    recommended: Strategy
    rationale: str


class SavingsProjection(BaseModel):
    """Effect of an extra monthly contribution, as a diff of two runs."""
    strategy: Strategy
    extra_monthly_payment: float
    baseline: SimulationResult
    modified: SimulationResult
    months_saved: int
    interest_saved: float
    new_months_to_debt_free: int
