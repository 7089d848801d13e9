"""
Decimal Utilities
work_value/scoring/utils.py

Undefined-aware decimal math for the valuation engine. None is the
"undefined" marker: every helper returns None when an operand is None or a
divisor is zero, instead of raising.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional


def safe_divide(
    numerator: Optional[Decimal],
    denominator: Optional[Decimal],
) -> Optional[Decimal]:
    """numerator / denominator, or None if either is undefined or denominator is 0."""
    if numerator is None or denominator is None or denominator == 0:
        return None
    return numerator / denominator


def product(values: Iterable[Optional[Decimal]]) -> Optional[Decimal]:
    """Multiply all values; None if any value is undefined."""
    result = Decimal("1")
    for value in values:
        if value is None:
            return None
        result *= value
    return result


def total(values: Iterable[Optional[Decimal]]) -> Optional[Decimal]:
    """Sum all values; None if any value is undefined."""
    result = Decimal("0")
    for value in values:
        if value is None:
            return None
        result += value
    return result


def mean(values: Iterable[Optional[Decimal]]) -> Optional[Decimal]:
    """Arithmetic mean; None for an empty input or any undefined value."""
    items = list(values)
    return safe_divide(total(items), Decimal(len(items)))


def round_money(value: Optional[Decimal]) -> Optional[Decimal]:
    """
    Quantize to 2 dp for display; None stays None.

    Values with more integer digits than the context precision cannot be
    quantized and are returned unchanged.
    """
    if value is None:
        return None
    try:
        return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return value
