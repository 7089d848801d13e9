from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from work_value.models.enumerations import Tier
from work_value.scoring.narrative import build_narrative
from work_value.scoring.utils import round_money
from work_value.scoring.work_value_calculator import ValuationResult


class EvaluateRequest(BaseModel):
    """
    Flat form record as posted by the calculator UI.
    """

    fields: Dict[str, Any] = Field(
        default_factory=dict,
        description="camelCase form field -> raw value (string or number)",
        examples=[{
            "annualSalary": "100000",
            "workDaysPerWeek": "5",
            "commuteType": "drive",
            "drivingTime": "30",
            "quitJob": "weekly",
        }],
    )


class ValuationBreakdown(BaseModel):
    """
    Intermediate factors. null means undefined (e.g. zero working days).
    """

    daily_pay: Optional[float] = None
    hourly_pay: Optional[float] = None
    actual_work_days: Optional[float] = None
    commute_burden: Optional[float] = None
    total_invested_time: Optional[float] = None
    effective_work_time: Optional[float] = None
    time_efficiency: Optional[float] = None
    environment_factor: float
    lifetime_factor: Optional[float] = None
    discomfort_factor: float
    relative_value: Optional[float] = None
    total_years: Optional[float] = None
    remaining_years: Optional[float] = None
    remaining_days: Optional[float] = None


class EvaluateResponse(BaseModel):
    final_index: Optional[float] = None
    tier: Tier
    tier_color: str
    breakdown: ValuationBreakdown
    narrative: str
    invalid_fields: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ValuationResult) -> "EvaluateResponse":
        return cls(
            final_index=_to_float(result.final_index, 2),
            tier=result.tier,
            tier_color=result.tier.color,
            breakdown=ValuationBreakdown(
                daily_pay=_to_float(result.daily_pay, 2),
                hourly_pay=_to_float(result.hourly_pay, 2),
                actual_work_days=_to_float(result.actual_work_days),
                commute_burden=_to_float(result.commute_burden),
                total_invested_time=_to_float(result.total_invested_time),
                effective_work_time=_to_float(result.effective_work_time),
                time_efficiency=_to_float(result.time_efficiency),
                environment_factor=float(result.environment_factor),
                lifetime_factor=_to_float(result.lifetime_factor),
                discomfort_factor=float(result.discomfort_factor),
                relative_value=_to_float(result.relative_value),
                total_years=_to_float(result.total_years),
                remaining_years=_to_float(result.remaining_years),
                remaining_days=_to_float(result.remaining_days),
            ),
            narrative=build_narrative(result),
            invalid_fields=list(result.invalid_fields),
        )


class CoefficientTablesResponse(BaseModel):
    levels: Dict[str, float]
    quit_frequency: Dict[str, float]
    neutral: float
    tier_thresholds: Dict[str, float]


def _to_float(value: Optional[Decimal], places: Optional[int] = None) -> Optional[float]:
    if value is None:
        return None
    if places == 2:
        return float(round_money(value))
    return round(float(value), 4)
