from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from debt_engine.api.deps import unwrap
from debt_engine.models.debt import Debt
from debt_engine.models.simulation import (
    SavingsProjection,
    SimulationConfig,
    SimulationResult,
    StrategyComparison,
)
from debt_engine.services.comparison_service import compare_strategies
from debt_engine.services.savings_service import project_savings
from debt_engine.simulation import simulate_portfolio

router = APIRouter(tags=["simulations"])


class SimulationRequest(BaseModel):
    """Request body for a simulation — inline portfolio, optional config."""
    debts: list[Debt]
    config: Optional[SimulationConfig] = None


class SavingsRequest(SimulationRequest):
    extra_monthly_payment: float


@router.post("/simulations/run", response_model=SimulationResult)
def run_simulation_endpoint(request: SimulationRequest):
    """Run the waterfall payoff simulation for one strategy."""
    config = request.config or SimulationConfig()
    return unwrap(simulate_portfolio(request.debts, config))


@router.post("/simulations/compare", response_model=StrategyComparison)
def compare_endpoint(request: SimulationRequest):
    """Avalanche vs. snowball under identical settings, with a recommendation."""
    config = request.config or SimulationConfig()
    return unwrap(compare_strategies(request.debts, config))


@router.post("/simulations/savings", response_model=SavingsProjection)
def savings_endpoint(request: SavingsRequest):
    """Months and interest saved by an extra monthly payment."""
    config = request.config or SimulationConfig()
    return unwrap(project_savings(request.debts, config, request.extra_monthly_payment))
