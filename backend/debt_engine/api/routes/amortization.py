from fastapi import APIRouter
from pydantic import BaseModel, Field

from debt_engine.api.deps import unwrap
from debt_engine.models.amortization import AmortizationResult, PaymentBreakdown
from debt_engine.simulation import calculate_payment_breakdown, project_payoff

router = APIRouter(tags=["amortization"])


class ProjectionRequest(BaseModel):
    balance: float = Field(ge=0.0)
    annual_interest_rate_percent: float = Field(ge=0.0, le=100.0)
    monthly_payment: float


class BreakdownRequest(BaseModel):
    balance: float = Field(ge=0.0)
    annual_interest_rate_percent: float = Field(ge=0.0, le=100.0)
    payment: float = Field(ge=0.0)


@router.post("/amortization/project", response_model=AmortizationResult)
def project_endpoint(request: ProjectionRequest):
    """Months to payoff and total interest for a fixed monthly payment.

    Responds 422 with a ``non_amortizing`` error when the payment never
    retires the balance.
    """
    return unwrap(project_payoff(
        request.balance, request.annual_interest_rate_percent, request.monthly_payment,
    ))


@router.post("/amortization/breakdown", response_model=PaymentBreakdown)
def breakdown_endpoint(request: BreakdownRequest):
    return calculate_payment_breakdown(
        request.balance, request.annual_interest_rate_percent, request.payment,
    )
