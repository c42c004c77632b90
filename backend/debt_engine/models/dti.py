from enum import Enum

from pydantic import BaseModel, model_validator

from debt_engine.config import settings
from debt_engine.models.errors import DegenerateInputWarning


class HealthBand(str, Enum):
    excellent = "excellent"
    good = "good"
    manageable = "manageable"
    high_risk = "high_risk"


class DTIBands(BaseModel):
    """Upper bounds (inclusive, in percent) for each DTI health band."""
    excellent_max: float = settings.DTI_EXCELLENT_MAX
    good_max: float = settings.DTI_GOOD_MAX
    manageable_max: float = settings.DTI_MANAGEABLE_MAX

    @model_validator(mode="after")
    def _ascending(self) -> "DTIBands":
        if not (0.0 <= self.excellent_max <= self.good_max <= self.manageable_max):
            raise ValueError("DTI band bounds must be ascending and non-negative")
        return self


class DTIResult(BaseModel):
    monthly_equivalent_payments: dict[str, float]
    total_monthly_equivalent_payments: float
    monthly_income: float
    dti_ratio_percent: float
    health_band: HealthBand
    warnings: list[DegenerateInputWarning] = []
