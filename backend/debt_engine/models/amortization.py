from typing import Optional

from pydantic import BaseModel


class AmortizationResult(BaseModel):
    """Closed-form single-debt payoff projection."""
    balance: float
    annual_interest_rate_percent: float
    monthly_payment: float
    months: int
    total_paid: float
    total_interest: float


class PaymentBreakdown(BaseModel):
    """How one payment splits between interest and principal."""
    payment: float
    interest_portion: float
    principal_portion: float
    new_balance: float
    is_full_payoff: bool
    monthly_interest_amount: float
    monthly_rate_percent: float


class PaymentSuggestion(BaseModel):
    type: str
    amount: float
    label: str
    description: str
    months: Optional[int] = None
    months_saved: Optional[int] = None
    interest_saved: Optional[float] = None


class PaymentCheck(BaseModel):
    """Outcome of checking a one-off payment against a debt."""
    is_valid: bool
    errors: list[str] = []
    warnings: list[str] = []
