# tests/test_engine_stages.py

"""
Engine Stage Tests - each sub-calculation of the valuation pipeline
"""

from decimal import Decimal

import pytest

from work_value.core.exceptions import UnsupportedCommuteModeException
from work_value.models.inputs import (
    DriveCommute,
    InputSnapshot,
    NoCommute,
    PublicTransitCommute,
    WalkCommute,
)
from work_value.scoring.commute import commute_burden
from work_value.scoring.discomfort import discomfort_factor
from work_value.scoring.economic_value import daily_pay, economic_value
from work_value.scoring.environment import environment_factor
from work_value.scoring.lifetime import lifetime
from work_value.scoring.time_efficiency import (
    effective_work_time,
    makeup_coefficient,
    time_efficiency,
    total_invested_time,
)
from work_value.scoring.work_days import actual_work_days

D = Decimal


# WORK-DAY COUNTER


class TestActualWorkDays:
    """Tests for actual_work_days()."""

    def test_reference_schedule(self):
        """5 days/week, 10 leave, 14 holidays → 260 − 24 = 236."""
        assert actual_work_days(D("5"), D("10"), D("14")) == D("236")

    def test_leave_exceeding_nominal_days_is_zero(self):
        assert actual_work_days(D("1"), D("40"), D("20")) == D("0")

    def test_exactly_zero(self):
        assert actual_work_days(D("1"), D("52"), D("0")) == D("0")

    def test_undefined_input(self):
        assert actual_work_days(None, D("10"), D("14")) is None

    def test_custom_weeks_per_year(self):
        assert actual_work_days(D("5"), D("0"), D("0"), weeks_per_year=50) == D("250")


# ECONOMIC VALUE


class TestEconomicValue:
    """Tests for daily_pay() / economic_value()."""

    def test_reference_pay(self):
        value = economic_value(D("100000"), D("236"), D("8"))
        assert float(value.daily_pay) == pytest.approx(423.73, abs=0.005)
        assert float(value.hourly_pay) == pytest.approx(52.97, abs=0.005)

    def test_self_paid_coffee_costs_five_per_day(self):
        assert daily_pay(D("100000"), D("236"), self_paid_coffee=True) == (
            (D("100000") - D("5") * D("236")) / D("236")
        )

    def test_custom_coffee_cost(self):
        assert daily_pay(D("1000"), D("100"), True, coffee_cost_per_day=D("2")) == D("8")

    def test_zero_work_days_is_undefined(self):
        value = economic_value(D("100000"), D("0"), D("8"))
        assert value.daily_pay is None
        assert value.hourly_pay is None

    def test_zero_hours_is_undefined_hourly_only(self):
        value = economic_value(D("100000"), D("236"), D("0"))
        assert value.daily_pay is not None
        assert value.hourly_pay is None

    def test_missing_salary(self):
        assert daily_pay(None, D("236")) is None


# COMMUTE


class TestCommuteBurden:
    """Tests for commute_burden()."""

    def test_walk(self):
        assert commute_burden(WalkCommute(walk_minutes=D("20"), tiredness="lv3")) == D("24.0")

    def test_drive(self):
        commute = DriveCommute(driving_minutes=D("30"), traffic_jam="lv3", parking_ease="lv1")
        assert commute_burden(commute) == D("30") * D("1.2") * D("0.8")

    def test_public(self):
        commute = PublicTransitCommute(
            waiting_minutes=D("10"),
            transit_minutes=D("20"),
            crowdedness="lv3",
            punctuality="lv1",
            smell="lv2",
        )
        assert commute_burden(commute) == D("30") * D("1.2") * D("0.8") * D("1.0")

    def test_no_commute_is_zero(self):
        assert commute_burden(NoCommute()) == D("0")

    def test_unknown_friction_tag_is_neutral(self):
        assert commute_burden(WalkCommute(walk_minutes=D("15"), tiredness="tired")) == D("15")

    def test_undefined_minutes(self):
        assert commute_burden(WalkCommute(walk_minutes=None)) is None

    @pytest.mark.parametrize("commute", ["walk", None, {"mode": "walk"}, 42])
    def test_non_variant_raises(self, commute):
        with pytest.raises(UnsupportedCommuteModeException):
            commute_burden(commute)


# TIME INVESTMENT / EFFICIENCY


class TestTimeEfficiency:
    """Tests for total_invested_time(), effective_work_time(), time_efficiency()."""

    def test_reference_invested_time(self, reference_snapshot):
        """8 work + 0 commute + 0.8 overtime + 0.8 on-call + no makeup."""
        assert total_invested_time(reference_snapshot) == D("9.6")

    def test_reference_effective_time(self, reference_snapshot):
        """8 hours − four slack levels at 1.0."""
        assert effective_work_time(reference_snapshot) == D("4.0")

    def test_reference_factor(self, reference_snapshot):
        result = time_efficiency(reference_snapshot)
        assert float(result.time_efficiency_factor) == pytest.approx(4.0 / 9.6)

    def test_makeup_none_level_contributes_nothing(self):
        assert makeup_coefficient("lv1") == D("0")
        assert makeup_coefficient("lv3") == D("1.2")
        assert makeup_coefficient("") == D("1.0")

    def test_makeup_time_added(self):
        snapshot = InputSnapshot(makeup="lv3", makeup_time_per_day=D("0.5"))
        assert total_invested_time(snapshot) == D("9.6") + D("0.5") * D("1.2")

    def test_commute_and_baselines(self):
        snapshot = InputSnapshot(
            commute=WalkCommute(walk_minutes=D("10")),
            overtime_frequency="lv3",
            free_oncall="lv2",
        )
        assert total_invested_time(
            snapshot,
            overtime_baseline_hours=D("2"),
            oncall_baseline_hours=D("1"),
        ) == D("8") + D("10") + D("2.4") + D("1.0")

    def test_factor_can_go_negative(self):
        """Slack above work hours is surfaced, not clamped."""
        snapshot = InputSnapshot(work_hours_per_day=D("2"))
        assert time_efficiency(snapshot).time_efficiency_factor < 0

    def test_zero_invested_time_is_undefined(self):
        snapshot = InputSnapshot(
            work_hours_per_day=D("-1.6"),
            commute=NoCommute(),
        )
        assert total_invested_time(snapshot) == D("0")
        assert time_efficiency(snapshot).time_efficiency_factor is None

    def test_undefined_hours(self):
        snapshot = InputSnapshot(work_hours_per_day=None)
        result = time_efficiency(snapshot)
        assert result.effective_work_time is None
        assert result.time_efficiency_factor is None

    def test_commute_burden_computed_once(self, monkeypatch):
        """time_efficiency() evaluates the commute model a single time."""
        calls = []

        def counting_burden(commute):
            calls.append(commute)
            return commute_burden(commute)

        monkeypatch.setattr(
            "work_value.scoring.time_efficiency.commute_burden", counting_burden
        )
        snapshot = InputSnapshot(commute=WalkCommute(walk_minutes=D("10")))
        result = time_efficiency(snapshot)

        assert len(calls) == 1
        assert result.commute_burden == D("10")
        assert result.total_invested_time == D("8") + D("10") + D("0.8") + D("0.8")

    def test_precomputed_burden_is_used(self, reference_snapshot):
        assert total_invested_time(reference_snapshot, burden=D("5")) == D("14.6")
        assert total_invested_time(reference_snapshot, burden=None) is None


# ENVIRONMENT


class TestEnvironmentFactor:
    """Tests for environment_factor()."""

    def test_all_average_is_one(self, reference_snapshot):
        assert environment_factor(reference_snapshot) == D("1")

    def test_mean_of_seven(self):
        snapshot = InputSnapshot(
            work_environment="lv3",
            colleague_quality="lv3",
            leader_relation="lv1",
        )
        expected = (D("1.2") * 2 + D("0.8") + D("1.0") * 4) / 7
        assert environment_factor(snapshot) == expected

    def test_all_excellent(self):
        snapshot = InputSnapshot(
            work_environment="lv3",
            colleague_quality="lv3",
            leader_relation="lv3",
            mentor_guidance="lv3",
            workspace_size="lv3",
            social_environment="lv3",
            education="lv3",
        )
        assert environment_factor(snapshot) == D("1.2")


# LIFETIME


class TestLifetime:
    """Tests for lifetime()."""

    def test_reference(self):
        result = lifetime(D("30"), D("60"), D("80"))
        assert result.lifetime_factor == D("0.4")
        assert result.remaining_years == D("20")
        assert result.remaining_days == D("7300")
        assert result.total_years == D("50")

    def test_life_expectancy_equals_age_is_undefined(self):
        result = lifetime(D("80"), D("60"), D("80"))
        assert result.lifetime_factor is None
        assert result.remaining_years == D("20")

    def test_no_validation_of_odd_ages(self):
        """Retiring after life expectancy gives a negative factor, not an error."""
        result = lifetime(D("30"), D("90"), D("80"))
        assert result.lifetime_factor == D("-0.2")
        assert result.remaining_days == D("-3650")

    def test_undefined_age(self):
        result = lifetime(None, D("60"), D("80"))
        assert result.lifetime_factor is None
        assert result.total_years is None
        assert result.remaining_years == D("20")


# DISCOMFORT


class TestDiscomfortFactor:
    """Tests for discomfort_factor()."""

    def test_reference(self):
        assert discomfort_factor("lv2", "monthly") == D("0.80")

    def test_worst_case(self):
        assert discomfort_factor("lv3", "daily") == D("1.44")

    def test_unknown_tags_neutral(self):
        assert discomfort_factor("meh", "sometimes") == D("1.0")
