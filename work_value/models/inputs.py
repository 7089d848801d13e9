"""
models/inputs.py

Immutable input snapshot for the valuation engine, and the parse step that
builds it from the flat form record supplied by the UI.

Form contract:
    - keys are the camelCase field names the form uses (annualSalary, walkTime, ...)
    - absent keys take the form's initial value
    - blank numeric fields count as 0; unparseable ones become None (undefined)
      and are listed in InputSnapshot.invalid_fields
    - annualSalary is the exception: blank means "awaiting input", not 0
    - qualitative fields keep their raw level tag; resolution happens in scoring
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field

from work_value.models.enumerations import CommuteMode, Level, QuitFrequency

logger = structlog.get_logger(__name__)

_AFFIRMATIVE = {"yes", "y", "true", "1"}

# Accepted magnitude for non-zero form numbers, as decimal exponents.
MIN_EXPONENT = -9
MAX_EXPONENT = 15


def parse_number(value: Any) -> Optional[Decimal]:
    """
    Parse a form value into a finite Decimal.

    Blank (None / empty / whitespace) parses to 0. Anything that is not a
    finite number, or whose magnitude falls outside 1e-9 .. 1e16, parses to
    None.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    else:
        text = str(value).strip()
        if not text:
            return Decimal("0")
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    if not number.is_finite():
        return None
    if number and not MIN_EXPONENT <= number.adjusted() <= MAX_EXPONENT:
        return None
    return number


def parse_flag(value: Any) -> bool:
    """Boolean-like form flag: True / "yes" / "true" / "y" / "1" are affirmative."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _AFFIRMATIVE


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# =============================================================================
# COMMUTE VARIANTS
# =============================================================================


class WalkCommute(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["walk"] = "walk"
    walk_minutes: Optional[Decimal] = Decimal("0")
    tiredness: str = Level.LV2.value


class DriveCommute(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["drive"] = "drive"
    driving_minutes: Optional[Decimal] = Decimal("0")
    traffic_jam: str = Level.LV2.value
    parking_ease: str = Level.LV2.value


class PublicTransitCommute(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["public"] = "public"
    waiting_minutes: Optional[Decimal] = Decimal("0")
    transit_minutes: Optional[Decimal] = Decimal("0")
    crowdedness: str = Level.LV2.value
    punctuality: str = Level.LV2.value
    smell: str = Level.LV2.value


class NoCommute(BaseModel):
    """Unset or unrecognised commute selector. Carries zero burden."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["none"] = "none"


Commute = Annotated[
    Union[WalkCommute, DriveCommute, PublicTransitCommute, NoCommute],
    Field(discriminator="mode"),
]


# =============================================================================
# INPUT SNAPSHOT
# =============================================================================


class InputSnapshot(BaseModel):
    """
    Every user-supplied field at evaluation time.

    Frozen: the engine reads it, never writes it. Numeric fields are
    Optional[Decimal] where None means undefined.
    """

    model_config = ConfigDict(frozen=True)

    # Demographics
    current_age: Optional[Decimal] = Decimal("30")
    retirement_age: Optional[Decimal] = Decimal("60")
    life_expectancy: Optional[Decimal] = Decimal("80")

    # Compensation
    annual_salary: Optional[Decimal] = None
    self_paid_coffee: bool = False

    # Schedule
    work_days_per_week: Optional[Decimal] = Decimal("5")
    work_hours_per_day: Optional[Decimal] = Decimal("8")
    annual_leave: Optional[Decimal] = Decimal("10")
    public_holidays: Optional[Decimal] = Decimal("14")

    # Overtime / on-call
    overtime_frequency: str = Level.LV1.value
    free_oncall: str = Level.LV1.value

    # Slack time during work
    paid_poop_time: str = Level.LV2.value
    slack_off_time: str = Level.LV2.value
    coffee_time: str = Level.LV2.value
    lunch_break: str = Level.LV2.value

    # Commute
    commute: Commute = Field(default_factory=WalkCommute)

    # Work environment
    work_environment: str = Level.LV2.value
    colleague_quality: str = Level.LV2.value
    leader_relation: str = Level.LV2.value
    mentor_guidance: str = Level.LV2.value
    workspace_size: str = Level.LV2.value
    social_environment: str = Level.LV2.value
    education: str = Level.LV2.value

    # Discomfort / makeup
    quit_job: str = QuitFrequency.MONTHLY.value
    makeup: str = Level.LV1.value
    makeup_time_per_day: Optional[Decimal] = Decimal("0")
    discomfort: str = Level.LV2.value

    invalid_fields: Tuple[str, ...] = ()

    @property
    def awaiting_salary(self) -> bool:
        """No salary has been entered yet (blank, not invalid)."""
        return self.annual_salary is None and "annualSalary" not in self.invalid_fields

    @classmethod
    def from_form(cls, fields: Mapping[str, Any]) -> "InputSnapshot":
        """Build a snapshot from the flat camelCase form record."""
        values: Dict[str, Any] = {}
        invalid: List[str] = []

        for form_key, attr in NUMERIC_FIELDS.items():
            if form_key not in fields:
                continue
            number = parse_number(fields[form_key])
            if number is None:
                invalid.append(form_key)
            values[attr] = number

        if "annualSalary" in fields:
            raw_salary = fields["annualSalary"]
            if _is_blank(raw_salary):
                values["annual_salary"] = None
            else:
                salary = parse_number(raw_salary)
                if salary is None:
                    invalid.append("annualSalary")
                values["annual_salary"] = salary

        if "selfPaidCoffee" in fields:
            values["self_paid_coffee"] = parse_flag(fields["selfPaidCoffee"])

        for form_key, attr in LEVEL_FIELDS.items():
            if form_key in fields:
                raw = fields[form_key]
                values[attr] = "" if raw is None else str(raw)

        commute, commute_invalid = _commute_from_form(fields)
        values["commute"] = commute
        invalid.extend(commute_invalid)

        if invalid:
            logger.debug("form_fields_unparseable", fields=invalid)

        return cls(invalid_fields=tuple(invalid), **values)


# form key -> snapshot attribute
NUMERIC_FIELDS: Dict[str, str] = {
    "currentAge": "current_age",
    "retirementAge": "retirement_age",
    "lifeExpectancy": "life_expectancy",
    "workDaysPerWeek": "work_days_per_week",
    "workHoursPerDay": "work_hours_per_day",
    "annualLeave": "annual_leave",
    "publicHolidays": "public_holidays",
    "makeupTimePerDay": "makeup_time_per_day",
}

LEVEL_FIELDS: Dict[str, str] = {
    "overtimeFrequency": "overtime_frequency",
    "freeOncall": "free_oncall",
    "paidPoopTime": "paid_poop_time",
    "slackOffTime": "slack_off_time",
    "coffeeTime": "coffee_time",
    "lunchBreak": "lunch_break",
    "workEnvironment": "work_environment",
    "colleagueQuality": "colleague_quality",
    "leaderRelation": "leader_relation",
    "mentorGuidance": "mentor_guidance",
    "workspaceSize": "workspace_size",
    "socialEnvironment": "social_environment",
    "education": "education",
    "quitJob": "quit_job",
    "makeup": "makeup",
    "discomfort": "discomfort",
}

# commute mode -> {form key: variant attribute}
_COMMUTE_NUMERIC_FIELDS: Dict[CommuteMode, Dict[str, str]] = {
    CommuteMode.WALK: {"walkTime": "walk_minutes"},
    CommuteMode.DRIVE: {"drivingTime": "driving_minutes"},
    CommuteMode.PUBLIC: {
        "waitingTime": "waiting_minutes",
        "transitTime": "transit_minutes",
    },
}

_COMMUTE_LEVEL_FIELDS: Dict[CommuteMode, Dict[str, str]] = {
    CommuteMode.WALK: {"tiredness": "tiredness"},
    CommuteMode.DRIVE: {"trafficJam": "traffic_jam", "parkingEase": "parking_ease"},
    CommuteMode.PUBLIC: {
        "crowdedness": "crowdedness",
        "punctuality": "punctuality",
        "smell": "smell",
    },
}

_COMMUTE_VARIANTS = {
    CommuteMode.WALK: WalkCommute,
    CommuteMode.DRIVE: DriveCommute,
    CommuteMode.PUBLIC: PublicTransitCommute,
}


def _commute_from_form(fields: Mapping[str, Any]) -> Tuple[BaseModel, List[str]]:
    """Pick the commute variant from commuteType and fill its payload."""
    selector = fields.get("commuteType", CommuteMode.WALK.value)
    selector = "" if selector is None else str(selector).strip().lower()

    try:
        mode = CommuteMode(selector)
    except ValueError:
        logger.warning("unknown_commute_type", commute_type=selector)
        return NoCommute(), []

    if mode is CommuteMode.NONE:
        return NoCommute(), []

    payload: Dict[str, Any] = {}
    invalid: List[str] = []
    for form_key, attr in _COMMUTE_NUMERIC_FIELDS[mode].items():
        if form_key not in fields:
            continue
        number = parse_number(fields[form_key])
        if number is None:
            invalid.append(form_key)
        payload[attr] = number
    for form_key, attr in _COMMUTE_LEVEL_FIELDS[mode].items():
        if form_key in fields:
            raw = fields[form_key]
            payload[attr] = "" if raw is None else str(raw)

    return _COMMUTE_VARIANTS[mode](**payload), invalid
