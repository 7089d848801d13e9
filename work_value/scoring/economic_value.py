"""
scoring/economic_value.py — Economic Value Calculator

    daily_pay  = (annual_salary − coffee_cost_per_day × work_days) / work_days
    hourly_pay = daily_pay / work_hours_per_day

coffee_cost_per_day is charged only when the user pays for their own coffee.
Zero work days or zero hours give an undefined (None) result.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from work_value.scoring.utils import safe_divide

COFFEE_COST_PER_DAY = Decimal("5")


@dataclass(frozen=True)
class EconomicValue:
    daily_pay: Optional[Decimal]
    hourly_pay: Optional[Decimal]


def daily_pay(
    annual_salary: Optional[Decimal],
    work_days: Optional[Decimal],
    self_paid_coffee: bool = False,
    coffee_cost_per_day: Decimal = COFFEE_COST_PER_DAY,
) -> Optional[Decimal]:
    if annual_salary is None or work_days is None:
        return None
    coffee_cost = coffee_cost_per_day if self_paid_coffee else Decimal("0")
    return safe_divide(annual_salary - coffee_cost * work_days, work_days)


def hourly_pay(
    daily: Optional[Decimal],
    work_hours_per_day: Optional[Decimal],
) -> Optional[Decimal]:
    return safe_divide(daily, work_hours_per_day)


def economic_value(
    annual_salary: Optional[Decimal],
    work_days: Optional[Decimal],
    work_hours_per_day: Optional[Decimal],
    self_paid_coffee: bool = False,
    coffee_cost_per_day: Decimal = COFFEE_COST_PER_DAY,
) -> EconomicValue:
    """Daily and hourly pay net of self-funded costs."""
    daily = daily_pay(annual_salary, work_days, self_paid_coffee, coffee_cost_per_day)
    return EconomicValue(daily_pay=daily, hourly_pay=hourly_pay(daily, work_hours_per_day))
