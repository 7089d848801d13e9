"""
scoring/narrative.py — result letter

Renders the fixed English letter shown under the calculator. Money and the
index are shown to 2 dp; counts without trailing zeros; undefined values as
PLACEHOLDER.
"""

from decimal import Decimal
from typing import Optional

from work_value.scoring.utils import round_money
from work_value.scoring.work_value_calculator import ValuationResult

PLACEHOLDER = "--"

_TEMPLATE = """Dear friend,

Let me tell you about your work life...

You work {work_days} days every year, which might sound like a lot.

You think you have {total_years} years ahead of you,
but after excluding work time, you only have {remaining_years} years ({remaining_days} days) for yourself.

Your daily compensation is ${daily_pay},
which breaks down to ${hourly_pay} per hour.

Based on our comprehensive analysis, your work-life value index is {final_index}.
This means you are "{tier}".

Remember, life is not just about work.
Make every moment count!
"""


def format_amount(value: Optional[Decimal]) -> str:
    if value is None:
        return PLACEHOLDER
    return str(round_money(value))


def format_count(value: Optional[Decimal]) -> str:
    if value is None:
        return PLACEHOLDER
    return format(value.normalize(), "f")


def build_narrative(result: ValuationResult) -> str:
    return _TEMPLATE.format(
        work_days=format_count(result.actual_work_days),
        total_years=format_count(result.total_years),
        remaining_years=format_count(result.remaining_years),
        remaining_days=format_count(result.remaining_days),
        daily_pay=format_amount(result.daily_pay),
        hourly_pay=format_amount(result.hourly_pay),
        final_index=format_amount(result.final_index),
        tier=result.tier.value,
    )
