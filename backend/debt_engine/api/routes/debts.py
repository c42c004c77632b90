from datetime import date
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from debt_engine.models.amortization import PaymentCheck, PaymentSuggestion
from debt_engine.models.debt import Debt, PortfolioSummary
from debt_engine.models.errors import DebtValidationError, FieldFailure
from debt_engine.services.summary import summarize_portfolio
from debt_engine.services.validation import validate_payment, validate_portfolio
from debt_engine.simulation import payment_suggestions

router = APIRouter(tags=["debts"])


class ValidationRequest(BaseModel):
    """Raw candidate records; nothing is coerced before the validator sees it."""
    debts: list[dict[str, Any]]


class ValidationReport(BaseModel):
    is_valid: bool
    debts: list[Debt] = []
    failures: list[FieldFailure] = []


class SummaryRequest(BaseModel):
    debts: list[Debt]
    today: date


class PaymentCheckRequest(BaseModel):
    debt: Debt
    amount: float


@router.post("/debts/validate", response_model=ValidationReport)
def validate_debts_endpoint(request: ValidationRequest):
    """Validate candidate debt records, reporting every failure at once."""
    result = validate_portfolio(request.debts)
    if isinstance(result, DebtValidationError):
        return ValidationReport(is_valid=False, failures=result.failures)
    return ValidationReport(is_valid=True, debts=result)


@router.post("/debts/summary", response_model=PortfolioSummary)
def summary_endpoint(request: SummaryRequest):
    return summarize_portfolio(request.debts, request.today)


@router.post("/debts/suggestions", response_model=list[PaymentSuggestion])
def suggestions_endpoint(debt: Debt):
    return payment_suggestions(debt)


@router.post("/debts/payment-check", response_model=PaymentCheck)
def payment_check_endpoint(request: PaymentCheckRequest):
    return validate_payment(request.debt, request.amount)
