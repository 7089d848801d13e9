"""
scoring/work_value_calculator.py — Valuation Engine facade

Runs the full pipeline over one InputSnapshot:

    work days → economic value ─┐
    commute → time efficiency ──┤
    environment ────────────────┼─→ final index → tier
    lifetime ───────────────────┤
    discomfort ─────────────────┘

Stateless: every call recomputes from the snapshot alone. Arithmetic runs in a
local decimal context where overflow and invalid operations yield non-finite
values instead of raising; those surface as None (undefined) in the result.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Any, Mapping, Optional, Tuple

import structlog

from work_value.config import Settings, get_settings
from work_value.models.enumerations import Tier
from work_value.models.inputs import InputSnapshot
from work_value.scoring.aggregator import assess_tier, final_index, relative_value
from work_value.scoring.discomfort import discomfort_factor
from work_value.scoring.economic_value import economic_value
from work_value.scoring.environment import environment_factor
from work_value.scoring.lifetime import lifetime
from work_value.scoring.time_efficiency import time_efficiency
from work_value.scoring.work_days import actual_work_days

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ValuationResult:
    """Output of WorkValueCalculator.calculate(). None means undefined."""
    daily_pay: Optional[Decimal]
    hourly_pay: Optional[Decimal]
    actual_work_days: Optional[Decimal]
    commute_burden: Optional[Decimal]
    total_invested_time: Optional[Decimal]
    effective_work_time: Optional[Decimal]
    time_efficiency: Optional[Decimal]
    environment_factor: Decimal
    lifetime_factor: Optional[Decimal]
    discomfort_factor: Decimal
    final_index: Optional[Decimal]
    relative_value: Optional[Decimal]   # final_index / daily_pay, from the factors
    tier: Tier
    total_years: Optional[Decimal]      # life_expectancy − current_age
    remaining_years: Optional[Decimal]  # life_expectancy − retirement_age
    remaining_days: Optional[Decimal]
    invalid_fields: Tuple[str, ...] = ()


class WorkValueCalculator:
    """Calculate the work value index for one input snapshot."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def calculate(self, snapshot: InputSnapshot) -> ValuationResult:
        """
        Args:
            snapshot: Immutable form snapshot. Never mutated.

        Returns:
            ValuationResult with every intermediate factor, the final index and tier.

        Examples:
            >>> snapshot = InputSnapshot(annual_salary=Decimal("100000"))
            >>> result = WorkValueCalculator().calculate(snapshot)
            >>> result.actual_work_days
            Decimal('236')
        """
        s = self.settings

        with localcontext() as ctx:
            ctx.traps[Overflow] = False
            ctx.traps[InvalidOperation] = False

            work_days = actual_work_days(
                snapshot.work_days_per_week,
                snapshot.annual_leave,
                snapshot.public_holidays,
                weeks_per_year=s.WEEKS_PER_YEAR,
            )
            economic = economic_value(
                snapshot.annual_salary,
                work_days,
                snapshot.work_hours_per_day,
                self_paid_coffee=snapshot.self_paid_coffee,
                coffee_cost_per_day=s.COFFEE_COST_PER_DAY,
            )
            time = time_efficiency(
                snapshot,
                overtime_baseline_hours=s.OVERTIME_BASELINE_HOURS,
                oncall_baseline_hours=s.ONCALL_BASELINE_HOURS,
            )
            environment = environment_factor(snapshot)
            life = lifetime(
                snapshot.current_age,
                snapshot.retirement_age,
                snapshot.life_expectancy,
                days_per_year=s.DAYS_PER_YEAR,
            )
            discomfort = discomfort_factor(snapshot.discomfort, snapshot.quit_job)

            daily = _defined(economic.daily_pay)
            index = final_index(
                daily,
                time.time_efficiency_factor,
                environment,
                life.lifetime_factor,
                discomfort,
            )
            relative = _defined(relative_value(
                daily,
                _defined(time.time_efficiency_factor),
                environment,
                _defined(life.lifetime_factor),
                discomfort,
            ))
        tier = assess_tier(relative, snapshot.awaiting_salary)

        result = ValuationResult(
            daily_pay=daily,
            hourly_pay=_defined(economic.hourly_pay),
            actual_work_days=_defined(work_days),
            commute_burden=_defined(time.commute_burden),
            total_invested_time=_defined(time.total_invested_time),
            effective_work_time=_defined(time.effective_work_time),
            time_efficiency=_defined(time.time_efficiency_factor),
            environment_factor=environment,
            lifetime_factor=_defined(life.lifetime_factor),
            discomfort_factor=discomfort,
            final_index=_defined(index),
            relative_value=relative,
            tier=tier,
            total_years=_defined(life.total_years),
            remaining_years=_defined(life.remaining_years),
            remaining_days=_defined(life.remaining_days),
            invalid_fields=snapshot.invalid_fields,
        )

        logger.info(
            "work_value_calculated",
            commute_mode=snapshot.commute.mode,
            actual_work_days=_as_float(result.actual_work_days),
            daily_pay=_as_float(result.daily_pay),
            time_efficiency=_as_float(result.time_efficiency),
            environment_factor=float(environment),
            lifetime_factor=_as_float(result.lifetime_factor),
            discomfort_factor=float(discomfort),
            final_index=_as_float(result.final_index),
            tier=tier.value,
            invalid_fields=list(snapshot.invalid_fields),
        )
        return result


def evaluate_form(
    fields: Mapping[str, Any],
    settings: Optional[Settings] = None,
) -> ValuationResult:
    """Parse a flat form record and run the full valuation."""
    return WorkValueCalculator(settings).calculate(InputSnapshot.from_form(fields))


def _as_float(value: Optional[Decimal]) -> Optional[float]:
    return None if value is None else float(value)


def _defined(value: Optional[Decimal]) -> Optional[Decimal]:
    """Map NaN / Infinity from the non-trapping context to None."""
    if value is None or not value.is_finite():
        return None
    return value
