"""
scoring/time_efficiency.py — Time Investment Aggregator + Time Efficiency Factor

Formula:
    total_invested = work_hours + commute_burden
                     + overtime_baseline × overtime
                     + oncall_baseline × oncall
                     + makeup_minutes × makeup
    effective_work = work_hours − (poop + slack_off + coffee + lunch)
    time_efficiency = effective_work / total_invested

Overtime and on-call stand in for real hours with a 1-hour baseline each,
scaled by their level. The makeup coefficient is 0 at level lv1 ("none").

No clamping: the factor may exceed 1.0 or go negative.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from work_value.models.enumerations import Level
from work_value.models.inputs import InputSnapshot
from work_value.scoring.coefficients import resolve
from work_value.scoring.commute import commute_burden
from work_value.scoring.utils import safe_divide, total

OVERTIME_BASELINE_HOURS = Decimal("1")
ONCALL_BASELINE_HOURS = Decimal("1")

_UNSET = object()


@dataclass(frozen=True)
class TimeEfficiency:
    commute_burden: Optional[Decimal]
    total_invested_time: Optional[Decimal]
    effective_work_time: Optional[Decimal]
    time_efficiency_factor: Optional[Decimal]


def makeup_coefficient(makeup_level: str) -> Decimal:
    if makeup_level == Level.LV1.value:
        return Decimal("0")
    return resolve(makeup_level)


def total_invested_time(
    snapshot: InputSnapshot,
    overtime_baseline_hours: Decimal = OVERTIME_BASELINE_HOURS,
    oncall_baseline_hours: Decimal = ONCALL_BASELINE_HOURS,
    burden: Any = _UNSET,
) -> Optional[Decimal]:
    """burden: precomputed commute_burden(snapshot.commute), if already known."""
    if burden is _UNSET:
        burden = commute_burden(snapshot.commute)
    makeup_time = None
    if snapshot.makeup_time_per_day is not None:
        makeup_time = snapshot.makeup_time_per_day * makeup_coefficient(snapshot.makeup)

    return total([
        snapshot.work_hours_per_day,
        burden,
        overtime_baseline_hours * resolve(snapshot.overtime_frequency),
        oncall_baseline_hours * resolve(snapshot.free_oncall),
        makeup_time,
    ])


def effective_work_time(snapshot: InputSnapshot) -> Optional[Decimal]:
    if snapshot.work_hours_per_day is None:
        return None
    slack = (
        resolve(snapshot.paid_poop_time)
        + resolve(snapshot.slack_off_time)
        + resolve(snapshot.coffee_time)
        + resolve(snapshot.lunch_break)
    )
    return snapshot.work_hours_per_day - slack


def time_efficiency(
    snapshot: InputSnapshot,
    overtime_baseline_hours: Decimal = OVERTIME_BASELINE_HOURS,
    oncall_baseline_hours: Decimal = ONCALL_BASELINE_HOURS,
) -> TimeEfficiency:
    """Ratio of productive hours to all hours the job consumes."""
    burden = commute_burden(snapshot.commute)
    invested = total_invested_time(
        snapshot, overtime_baseline_hours, oncall_baseline_hours, burden=burden
    )
    effective = effective_work_time(snapshot)
    return TimeEfficiency(
        commute_burden=burden,
        total_invested_time=invested,
        effective_work_time=effective,
        time_efficiency_factor=safe_divide(effective, invested),
    )
