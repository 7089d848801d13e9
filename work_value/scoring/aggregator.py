"""
scoring/aggregator.py — Work Value Index + Tier

Formula:
    final_index = daily_pay × time_efficiency × environment × lifetime × discomfort

Tier is a step function of the index relative to an unadjusted baseline
(daily_pay with every factor at 1.0). Daily pay cancels out of that ratio, so
it is taken straight from the factors:

    relative = time_efficiency × environment × lifetime × discomfort

It is only defined when daily_pay is defined and non-zero.

    relative <  0.5            → Living on a Prayer
    0.5 ≤ relative ≤ 0.8       → Just Getting By
    0.8 <  relative ≤ 1.2      → Living the Dream
    relative >  1.2            → Living Like a King
"""

from decimal import Decimal
from typing import Optional

from work_value.models.enumerations import Tier
from work_value.scoring.utils import product

PRAYER_BELOW = Decimal("0.5")
GETTING_BY_MAX = Decimal("0.8")
DREAM_MAX = Decimal("1.2")


def final_index(
    daily_pay: Optional[Decimal],
    time_efficiency_factor: Optional[Decimal],
    environment_factor: Optional[Decimal],
    lifetime_factor: Optional[Decimal],
    discomfort_factor: Optional[Decimal],
) -> Optional[Decimal]:
    return product([
        daily_pay,
        time_efficiency_factor,
        environment_factor,
        lifetime_factor,
        discomfort_factor,
    ])


def classify_tier(relative: Decimal) -> Tier:
    """Map the index/baseline ratio to its tier."""
    if relative < PRAYER_BELOW:
        return Tier.LIVING_ON_A_PRAYER
    if relative <= GETTING_BY_MAX:
        return Tier.JUST_GETTING_BY
    if relative <= DREAM_MAX:
        return Tier.LIVING_THE_DREAM
    return Tier.LIVING_LIKE_A_KING


def relative_value(
    daily_pay: Optional[Decimal],
    time_efficiency_factor: Optional[Decimal],
    environment_factor: Optional[Decimal],
    lifetime_factor: Optional[Decimal],
    discomfort_factor: Optional[Decimal],
) -> Optional[Decimal]:
    """final_index / daily_pay, without dividing the pay back out."""
    if daily_pay is None or daily_pay == 0:
        return None
    return product([
        time_efficiency_factor,
        environment_factor,
        lifetime_factor,
        discomfort_factor,
    ])


def assess_tier(relative: Optional[Decimal], awaiting_salary: bool = False) -> Tier:
    """
    Tier for a relative value, including the two non-error states:
    AWAITING_INPUT when no salary was entered, UNDEFINED when the ratio
    could not be formed.
    """
    if awaiting_salary:
        return Tier.AWAITING_INPUT
    if relative is None:
        return Tier.UNDEFINED
    return classify_tier(relative)
