from fastapi import APIRouter

from debt_engine.config import settings
from debt_engine.simulation import list_strategies

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "strategies": list_strategies(),
        "defaults": {
            "horizon_cap_months": settings.DEFAULT_HORIZON_CAP_MONTHS,
            "epsilon": settings.DEFAULT_EPSILON,
            "materiality_threshold_pct": settings.MATERIALITY_THRESHOLD_PCT,
        },
    }
