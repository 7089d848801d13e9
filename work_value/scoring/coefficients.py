"""
scoring/coefficients.py — Coefficient Resolver

Maps categorical level tags to numeric multipliers.

Level table:
    lv1 → 0.8    lv2 → 1.0    lv3 → 1.2

Quit-intention table (how often the user thinks about quitting):
    daily → 1.2    weekly → 1.0    monthly → 0.8    never → 0.6

Unknown tags (typos, blanks, anything else) resolve to the neutral 1.0.
A higher level always means a larger multiplier.
"""

from decimal import Decimal
from typing import Any, Dict

import structlog

from work_value.models.enumerations import Level, QuitFrequency

logger = structlog.get_logger(__name__)

NEUTRAL = Decimal("1.0")

LEVEL_COEFFICIENTS: Dict[str, Decimal] = {
    Level.LV1.value: Decimal("0.8"),
    Level.LV2.value: Decimal("1.0"),
    Level.LV3.value: Decimal("1.2"),
}

QUIT_FREQUENCY_WEIGHTS: Dict[str, Decimal] = {
    QuitFrequency.DAILY.value: Decimal("1.2"),
    QuitFrequency.WEEKLY.value: Decimal("1.0"),
    QuitFrequency.MONTHLY.value: Decimal("0.8"),
    QuitFrequency.NEVER.value: Decimal("0.6"),
}


def _lookup(table: Dict[str, Decimal], tag: Any, table_name: str) -> Decimal:
    key = tag.value if isinstance(tag, (Level, QuitFrequency)) else tag
    coefficient = table.get(key) if isinstance(key, str) else None
    if coefficient is None:
        logger.debug("unknown_level_tag", table=table_name, tag=tag)
        return NEUTRAL
    return coefficient


def resolve(level_tag: Any) -> Decimal:
    """
    Resolve a level tag to its multiplier.

    Total function: never raises. "lv1"/"lv2"/"lv3" map to 0.8/1.0/1.2;
    anything else, including "" and None, maps to 1.0.

    Examples:
        >>> resolve("lv3")
        Decimal('1.2')
        >>> resolve("lvl3")
        Decimal('1.0')
    """
    return _lookup(LEVEL_COEFFICIENTS, level_tag, "level")


def quit_intention_weight(frequency: Any) -> Decimal:
    """Resolve a quit-frequency tag to its weight; unknown tags map to 1.0."""
    return _lookup(QUIT_FREQUENCY_WEIGHTS, frequency, "quit_frequency")
