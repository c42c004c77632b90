from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PaymentFrequency(str, Enum):
    """How often a debt's minimum payment falls due."""
    weekly = "weekly"
    biweekly = "biweekly"
    monthly = "monthly"
    quarterly = "quarterly"


class DebtType(str, Enum):
    credit_card = "credit_card"
    personal_loan = "personal_loan"
    home_loan = "home_loan"
    vehicle_loan = "vehicle_loan"
    education_loan = "education_loan"
    business_loan = "business_loan"
    gold_loan = "gold_loan"
    overdraft = "overdraft"
    emi = "emi"
    other = "other"


class Debt(BaseModel):
    """A single liability, as a snapshot taken for one engine run.

    Range invariants (non-negative balance, rate within 0-100, ...) are
    enforced by ``services.validation`` so every failure can be reported
    at once; this model only enforces types.
    """
    model_config = {"frozen": True}

    id: str
    name: str = ""
    lender: str = ""
    debt_type: DebtType = DebtType.other
    balance: float
    original_principal: Optional[float] = None
    annual_interest_rate_percent: float = 0.0
    minimum_payment: float = 0.0
    payment_frequency: PaymentFrequency = PaymentFrequency.monthly
    due_date: Optional[date] = None
    is_high_priority: bool = False
    is_variable_rate: bool = False


class PortfolioSummary(BaseModel):
    """Aggregate figures for a portfolio, as shown on the dashboard."""
    total_debt: float
    total_minimum_payments: float
    average_interest_rate_percent: float
    debt_count: int
    high_priority_count: int
    upcoming_payments_count: int
