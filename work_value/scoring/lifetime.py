"""
scoring/lifetime.py — Remaining-Lifetime Factor

Formula:
    lifetime_factor = (life_expectancy − retirement_age) / (life_expectancy − current_age)
    remaining_years = life_expectancy − retirement_age
    remaining_days  = remaining_years × 365       (no leap-year correction)
    total_years     = life_expectancy − current_age

Out-of-range ages are not validated; they just produce odd numbers.
life_expectancy == current_age gives an undefined factor.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from work_value.scoring.utils import safe_divide

DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class LifetimeResult:
    lifetime_factor: Optional[Decimal]
    total_years: Optional[Decimal]
    remaining_years: Optional[Decimal]
    remaining_days: Optional[Decimal]


def _difference(a: Optional[Decimal], b: Optional[Decimal]) -> Optional[Decimal]:
    if a is None or b is None:
        return None
    return a - b


def lifetime(
    current_age: Optional[Decimal],
    retirement_age: Optional[Decimal],
    life_expectancy: Optional[Decimal],
    days_per_year: int = DAYS_PER_YEAR,
) -> LifetimeResult:
    remaining_years = _difference(life_expectancy, retirement_age)
    total_years = _difference(life_expectancy, current_age)
    remaining_days = None if remaining_years is None else remaining_years * days_per_year
    return LifetimeResult(
        lifetime_factor=safe_divide(remaining_years, total_years),
        total_years=total_years,
        remaining_years=remaining_years,
        remaining_days=remaining_days,
    )
