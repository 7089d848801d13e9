# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and form data

REFERENCE PROFILE (the calculator's initial form values + a salary):
- 30 years old, retiring at 60, life expectancy 80
- 5 days/week, 8 hours/day, 10 leave days, 14 public holidays → 236 work days
- annual salary 100000, coffee not self-paid → daily pay ≈ 423.73
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from work_value.config import Settings
from work_value.main import app
from work_value.models.inputs import InputSnapshot
from work_value.scoring.work_value_calculator import WorkValueCalculator


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SETTINGS / CALCULATOR FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def calculator(settings):
    return WorkValueCalculator(settings)


# =============================================================================
# FORM FIXTURES
# =============================================================================

@pytest.fixture
def default_form():
    """The calculator form exactly as first rendered, plus a salary."""
    return {
        "annualSalary": "100000",
        "currentAge": "30",
        "retirementAge": "60",
        "lifeExpectancy": "80",
        "workDaysPerWeek": "5",
        "workHoursPerDay": "8",
        "annualLeave": "10",
        "publicHolidays": "14",
        "selfPaidCoffee": "",
        "overtimeFrequency": "lv1",
        "freeOncall": "lv1",
        "paidPoopTime": "lv2",
        "slackOffTime": "lv2",
        "coffeeTime": "lv2",
        "lunchBreak": "lv2",
        "commuteType": "walk",
        "walkTime": "",
        "tiredness": "lv2",
        "parkingEase": "lv2",
        "trafficJam": "lv2",
        "drivingTime": "",
        "waitingTime": "",
        "punctuality": "lv2",
        "transitTime": "",
        "crowdedness": "lv2",
        "smell": "lv2",
        "workEnvironment": "lv2",
        "colleagueQuality": "lv2",
        "leaderRelation": "lv2",
        "mentorGuidance": "lv2",
        "workspaceSize": "lv2",
        "socialEnvironment": "lv2",
        "education": "lv2",
        "quitJob": "monthly",
        "makeup": "lv1",
        "makeupTimePerDay": "0",
        "discomfort": "lv2",
    }


@pytest.fixture
def reference_snapshot():
    """Snapshot equivalent to default_form, built directly."""
    return InputSnapshot(annual_salary=Decimal("100000"))
