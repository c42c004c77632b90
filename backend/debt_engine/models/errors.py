"""Typed error values returned (not raised) by engine operations.

Every error is a read-only pydantic model with a ``kind`` discriminator so
callers can branch on ``isinstance`` in Python or on ``kind`` over JSON.
None of them is retryable: the engine is deterministic, so re-invoking
with the same inputs yields the same error.
"""
from typing import Literal, Optional

from pydantic import BaseModel

from debt_engine.models.simulation import MonthSnapshot


class EngineError(BaseModel):
    model_config = {"frozen": True}

    kind: str
    message: str
    retryable: bool = False


class FieldFailure(BaseModel):
    field: str
    message: str


class DebtValidationError(EngineError):
    """Malformed or out-of-range debt / income input."""
    kind: Literal["validation_error"] = "validation_error"
    debt_id: Optional[str] = None
    failures: list[FieldFailure]


class NonAmortizingError(EngineError):
    """A fixed payment never retires the balance."""
    kind: Literal["non_amortizing"] = "non_amortizing"
    balance: float
    payment: float
    interest_only_payment: float
    minimum_required_payment: float


class UnpayableHorizonError(EngineError):
    """Simulation ran past the horizon cap with balances remaining."""
    kind: Literal["unpayable_horizon"] = "unpayable_horizon"
    strategy: str
    horizon_cap_months: int
    remaining_balance: float
    partial_timeline: list[MonthSnapshot]


class DegenerateInputWarning(EngineError):
    """Non-fatal: the result was computed but an input was degenerate."""
    kind: Literal["degenerate_input"] = "degenerate_input"
    field: str
