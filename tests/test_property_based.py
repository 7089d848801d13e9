# tests/test_property_based.py
"""
Property-Based Tests

Hypothesis tests covering:
  - Coefficient Resolver totality
  - Work-Day Counter non-negativity
  - Tier step function
  - Final index linearity in daily pay
  - Stateless recomputation
"""

from decimal import Decimal

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from work_value.config import Settings
from work_value.models.enumerations import Level, QuitFrequency, Tier
from work_value.models.inputs import InputSnapshot
from work_value.scoring.aggregator import classify_tier, final_index
from work_value.scoring.coefficients import LEVEL_COEFFICIENTS, resolve
from work_value.scoring.work_days import actual_work_days
from work_value.scoring.work_value_calculator import WorkValueCalculator

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

LEVEL_TAGS = [lv.value for lv in Level]

non_negative_st = st.decimals(
    min_value=0, max_value=400, allow_nan=False, allow_infinity=False, places=2
)
factor_st = st.decimals(
    min_value=Decimal("-2"), max_value=Decimal("2"),
    allow_nan=False, allow_infinity=False, places=4,
)
level_st = st.sampled_from(LEVEL_TAGS)


@st.composite
def snapshot_st(draw):
    """Draw a plausible snapshot with a salary and arbitrary levels."""
    return InputSnapshot(
        annual_salary=draw(st.decimals(min_value=1000, max_value=10**7, places=2)),
        current_age=Decimal(draw(st.integers(min_value=18, max_value=70))),
        retirement_age=Decimal(draw(st.integers(min_value=40, max_value=75))),
        life_expectancy=Decimal(draw(st.integers(min_value=71, max_value=100))),
        overtime_frequency=draw(level_st),
        free_oncall=draw(level_st),
        paid_poop_time=draw(level_st),
        slack_off_time=draw(level_st),
        coffee_time=draw(level_st),
        lunch_break=draw(level_st),
        work_environment=draw(level_st),
        colleague_quality=draw(level_st),
        discomfort=draw(level_st),
        quit_job=draw(st.sampled_from([q.value for q in QuitFrequency])),
    )


# ---------------------------------------------------------------------------
# Coefficient Resolver
# ---------------------------------------------------------------------------


class TestResolverProperties:

    @given(st.text())
    @settings(max_examples=300)
    def test_resolve_is_total(self, tag):
        """Any string resolves; non-canonical strings resolve to 1.0."""
        value = resolve(tag)
        if tag in LEVEL_COEFFICIENTS:
            assert value in {Decimal("0.8"), Decimal("1.0"), Decimal("1.2")}
        else:
            assert value == Decimal("1.0")


# ---------------------------------------------------------------------------
# Work-Day Counter
# ---------------------------------------------------------------------------


class TestWorkDayProperties:

    @given(
        st.decimals(min_value=0, max_value=7, places=1),
        non_negative_st,
        non_negative_st,
    )
    @settings(max_examples=300)
    def test_never_negative(self, wd, al, ph):
        days = actual_work_days(wd, al, ph)
        assert days >= 0
        nominal = 52 * wd - al - ph
        if nominal >= 0:
            assert days == nominal


# ---------------------------------------------------------------------------
# Tier classification
# ---------------------------------------------------------------------------


_TIER_ORDER = [
    Tier.LIVING_ON_A_PRAYER,
    Tier.JUST_GETTING_BY,
    Tier.LIVING_THE_DREAM,
    Tier.LIVING_LIKE_A_KING,
]


class TestTierProperties:

    @given(factor_st, factor_st)
    @settings(max_examples=300)
    def test_tier_is_monotonic(self, a, b):
        low, high = sorted([a, b])
        assert _TIER_ORDER.index(classify_tier(low)) <= _TIER_ORDER.index(classify_tier(high))


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------


class TestAggregatorProperties:

    @given(
        st.decimals(min_value=1, max_value=10000, places=2),
        st.decimals(min_value=1, max_value=100, places=2),
        factor_st, factor_st, factor_st, factor_st,
    )
    @settings(max_examples=300)
    def test_index_linear_in_daily_pay(self, pay, k, te, env, life, disc):
        """Scaling daily pay by k scales the index by k, other factors fixed."""
        base = final_index(pay, te, env, life, disc)
        scaled = final_index(pay * k, te, env, life, disc)
        assert float(scaled) == pytest.approx(float(base) * float(k), rel=1e-9, abs=1e-9)


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------


class TestCalculatorProperties:

    @given(snapshot_st(), level_st)
    @settings(max_examples=200, deadline=None)
    def test_single_field_change_matches_fresh_computation(self, snapshot, level):
        calc = WorkValueCalculator(Settings(_env_file=None))
        calc.calculate(snapshot)
        changed = snapshot.model_copy(update={"education": level})
        assert calc.calculate(changed) == WorkValueCalculator(calc.settings).calculate(changed)

    @given(snapshot_st())
    @settings(max_examples=200, deadline=None)
    def test_tier_matches_relative_value(self, snapshot):
        assume(snapshot.life_expectancy != snapshot.current_age)
        result = WorkValueCalculator(Settings(_env_file=None)).calculate(snapshot)
        assume(result.relative_value is not None)
        assert result.tier is classify_tier(result.relative_value)
