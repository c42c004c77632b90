from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from debt_engine.api.deps import unwrap
from debt_engine.models.debt import Debt
from debt_engine.models.dti import DTIBands, DTIResult
from debt_engine.services.dti import analyze_dti

router = APIRouter(tags=["dti"])


class DTIRequest(BaseModel):
    debts: list[Debt]
    monthly_income: float
    bands: Optional[DTIBands] = None


@router.post("/dti/analyze", response_model=DTIResult)
def analyze_dti_endpoint(request: DTIRequest):
    """Debt-to-income ratio and health band; degenerate income is reported in ``warnings``."""
    return unwrap(analyze_dti(request.debts, request.monthly_income, request.bands))
