"""
scoring/environment.py — Environment Factor

Mean of the seven workplace-quality coefficients, nominally centred on 1.0.
"""

from decimal import Decimal

from work_value.models.inputs import InputSnapshot
from work_value.scoring.coefficients import resolve
from work_value.scoring.utils import mean

ENVIRONMENT_FIELDS = (
    "work_environment",
    "colleague_quality",
    "leader_relation",
    "mentor_guidance",
    "workspace_size",
    "social_environment",
    "education",
)


def environment_factor(snapshot: InputSnapshot) -> Decimal:
    return mean(resolve(getattr(snapshot, name)) for name in ENVIRONMENT_FIELDS)
