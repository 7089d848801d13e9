"""
scoring/discomfort.py — Discomfort Factor

    discomfort_factor = resolve(discomfort) × quit_intention_weight(quit_job)
"""

from decimal import Decimal

from work_value.scoring.coefficients import quit_intention_weight, resolve


def discomfort_factor(discomfort_level: str, quit_frequency: str) -> Decimal:
    return resolve(discomfort_level) * quit_intention_weight(quit_frequency)
