"""
scoring/work_days.py — Work-Day Counter

    actual_work_days = max(52 × work_days_per_week − (annual_leave + public_holidays), 0)

Never negative. A result of exactly 0 is legitimate and makes every per-day
figure downstream undefined.
"""

from decimal import Decimal
from typing import Optional

WEEKS_PER_YEAR = 52


def actual_work_days(
    work_days_per_week: Optional[Decimal],
    annual_leave: Optional[Decimal],
    public_holidays: Optional[Decimal],
    weeks_per_year: int = WEEKS_PER_YEAR,
) -> Optional[Decimal]:
    """Actual working days per year; None if any input is undefined."""
    if work_days_per_week is None or annual_leave is None or public_holidays is None:
        return None
    nominal = Decimal(weeks_per_year) * work_days_per_week
    return max(nominal - (annual_leave + public_holidays), Decimal("0"))
