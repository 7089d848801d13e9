"""
scoring/commute.py — Commute Cost Model

Turns the selected commute variant into a minutes-equivalent burden:

    walk    : walk_minutes × tiredness
    drive   : driving_minutes × traffic_jam × parking_ease
    public  : (waiting_minutes + transit_minutes) × crowdedness × punctuality × smell
    none    : 0

Friction levels scale the raw duration multiplicatively: lv3 (1.2) adds
burden, lv1 (0.8) removes it.
"""

from decimal import Decimal
from typing import Optional

from work_value.core.exceptions import UnsupportedCommuteModeException
from work_value.models.inputs import (
    Commute,
    DriveCommute,
    NoCommute,
    PublicTransitCommute,
    WalkCommute,
)
from work_value.scoring.coefficients import resolve
from work_value.scoring.utils import product, total


def commute_burden(commute: Commute) -> Optional[Decimal]:
    """
    Minutes-equivalent commute burden for one commute variant.

    Raises UnsupportedCommuteModeException for anything that is not one of
    the four commute variants.
    """
    if isinstance(commute, WalkCommute):
        return product([commute.walk_minutes, resolve(commute.tiredness)])

    if isinstance(commute, DriveCommute):
        return product([
            commute.driving_minutes,
            resolve(commute.traffic_jam),
            resolve(commute.parking_ease),
        ])

    if isinstance(commute, PublicTransitCommute):
        return product([
            total([commute.waiting_minutes, commute.transit_minutes]),
            resolve(commute.crowdedness),
            resolve(commute.punctuality),
            resolve(commute.smell),
        ])

    if isinstance(commute, NoCommute):
        return Decimal("0")

    raise UnsupportedCommuteModeException(commute)
