"""Estimation model: baseline from the household profile, daily adjustments on top."""

import pytest

from app.core.enums import ApplianceOwnership, ShoppingHabit
from app.models.initial_profile import InitialProfile
from app.schemas.consumption import CATEGORY_FIELDS
from app.schemas.initial_profile import InitialQuizCreate
from app.services.water_estimation import (
    adjust_for_day,
    daily_credits,
    estimate_baseline,
    round_gallons,
)

PLAIN_PROFILE = {
    "dishwasher_type": "none",
    "laundry_type": "none",
    "has_garden": False,
    "has_pool": False,
    "car_wash_method": "none",
    "utility_percentage": 0,
    "shopping_habits": "basics",
}


def _assert_consistent(breakdown):
    values = breakdown.model_dump()
    assert all(isinstance(v, int) for v in values.values())
    assert breakdown.total_gallons >= 0
    assert breakdown.total_gallons == sum(breakdown.categories().values())


# ── Baseline ─────────────────────────────────────────────────────────────

def test_shopping_only_profile():
    b = estimate_baseline(PLAIN_PROFILE)
    assert b.total_gallons == 291
    assert b.shopping_gallons == 291
    for name in CATEGORY_FIELDS:
        if name != "shopping_gallons":
            assert getattr(b, name) == 0


def test_pool_adds_flat_daily_amount():
    b = estimate_baseline({**PLAIN_PROFILE, "has_pool": True})
    assert b.pool_gallons == 65
    assert b.total_gallons == 356


def test_low_flow_showerhead_with_daily_baths():
    b = estimate_baseline({**PLAIN_PROFILE, "appliances": ["showerhead"], "baths_per_month": 30})
    assert b.shower_gallons == 17
    assert b.total_gallons == 17 + 291


def test_negative_total_moves_deficit_into_other():
    profile = {"appliances": ["showerhead"], "baths_per_month": 0, "shopping_habits": None}
    b = estimate_baseline(profile)
    assert b.shower_gallons == -63
    assert b.other_gallons == 63
    assert b.total_gallons == 0
    _assert_consistent(b)


@pytest.mark.parametrize(
    "field, kind, frequency, expected",
    [
        ("dishwasher", "efficient", 30, 4),
        ("dishwasher", "inefficient", 15, 5),
        ("dishwasher", "none", 30, 0),
        ("laundry", "efficient", 15, 7),
        ("laundry", "inefficient", 30, 20),
    ],
)
def test_appliance_loads_are_monthly(field, kind, frequency, expected):
    b = estimate_baseline({f"{field}_type": kind, f"{field}_frequency": frequency})
    assert getattr(b, f"{field}_gallons") == expected


@pytest.mark.parametrize(
    "method, frequency, expected",
    [("garden_hose", 3, 10), ("drive_through", 6, 7), ("self_service", 30, 17), ("none", 10, 0)],
)
def test_car_wash_methods(method, frequency, expected):
    b = estimate_baseline({"car_wash_method": method, "car_wash_frequency": frequency})
    assert b.car_wash_gallons == expected


def test_garden_needs_flag_area_and_frequency():
    assert estimate_baseline({"has_garden": True, "garden_area": 100, "garden_frequency": 30}).garden_gallons == 62
    assert estimate_baseline({"has_garden": False, "garden_area": 100, "garden_frequency": 30}).garden_gallons == 0
    assert estimate_baseline({"has_garden": True, "garden_area": 100}).garden_gallons == 0


def test_energy_and_shopping_tiers_are_flat():
    assert estimate_baseline({"utility_percentage": 50}).energy_gallons == 17
    assert estimate_baseline({"shopping_habits": "moderate"}).shopping_gallons == 583
    assert estimate_baseline({"shopping_habits": ShoppingHabit.ADDICT}).shopping_gallons == 1000


def test_missing_and_unknown_answers_contribute_nothing():
    assert estimate_baseline({}).total_gallons == 0
    assert estimate_baseline(None).total_gallons == 0
    # Legacy spelling is not a known option
    assert estimate_baseline({"dishwasher_type": "yes_efficient", "dishwasher_frequency": 30}).total_gallons == 0
    assert estimate_baseline({"appliances": "showerhead"}).shower_gallons == 0


def test_accepts_orm_rows_and_schemas():
    row = InitialProfile(appliances=["showerhead"], baths_per_month=30, shopping_habits="basics")
    assert estimate_baseline(row).shower_gallons == 17

    quiz = InitialQuizCreate(dishwasher_type=ApplianceOwnership.INEFFICIENT, dishwasher_frequency=30, has_pool=True)
    b = estimate_baseline(quiz)
    assert b.dishwasher_gallons == 10
    assert b.pool_gallons == 65
    assert b.shopping_gallons == 291


def test_baseline_is_idempotent():
    profile = {**PLAIN_PROFILE, "has_pool": True, "utility_percentage": 35, "appliances": ["toilet"]}
    assert estimate_baseline(profile) == estimate_baseline(profile)


def test_rounding_is_half_up():
    assert round_gallons(2.5) == 3
    assert round_gallons(-2.5) == -2
    assert round_gallons(0.49) == 0
    assert round_gallons(17.0000001) == 17


def test_rounding_shortfall_is_absorbed_by_other():
    # raw total -62.26 -> other 62.26 rounds to 62 while shower stays -63
    profile = {
        "appliances": ["showerhead"],
        "utility_percentage": 1,
        "dishwasher_type": "efficient",
        "dishwasher_frequency": 3,
    }
    b = estimate_baseline(profile)
    assert b.shower_gallons == -63
    assert b.energy_gallons == 0
    assert b.dishwasher_gallons == 0
    assert b.other_gallons == 63
    assert b.total_gallons == 0
    _assert_consistent(b)
    _assert_consistent(adjust_for_day({}, profile))


# ── Daily adjustments ────────────────────────────────────────────────────

def test_shower_minutes_without_low_flow_head():
    base = estimate_baseline(PLAIN_PROFILE)
    day = adjust_for_day({"shower_minutes": 10}, PLAIN_PROFILE)
    assert day.shower_gallons - base.shower_gallons == 25
    assert day.total_gallons == 316


def test_each_shower_minute_adds_two_and_a_half_gallons():
    ten = adjust_for_day({"shower_minutes": 10}, PLAIN_PROFILE)
    twelve = adjust_for_day({"shower_minutes": 12}, PLAIN_PROFILE)
    assert twelve.shower_gallons - ten.shower_gallons == 5


def test_low_flow_fixtures_lower_daily_rates():
    profile = {**PLAIN_PROFILE, "appliances": ["showerhead", "bathroom_sink", "toilet"], "baths_per_month": 30}
    day = adjust_for_day(
        {"shower_minutes": 10, "bathroom_sink_minutes": 10, "kitchen_sink_minutes": 10, "toilet_flushes": 5},
        profile,
    )
    assert day.shower_gallons == 17 + 18
    # bathroom sink is low-flow (15), kitchen sink is not (22); both land in kitchen
    assert day.kitchen_gallons == 37
    assert day.toilet_gallons == 8


def test_standard_toilet():
    assert adjust_for_day({"toilet_flushes": 4}, PLAIN_PROFILE).toilet_gallons == 14


def test_lifestyle_answers_go_to_other():
    activity = {
        "miles_driven": 100,
        "recycled_paper": 25,
        "veggies_consumed": 20,
        "meat_consumed": 3,
        "pet_food_used": 10,
    }
    day = adjust_for_day(activity, PLAIN_PROFILE)
    assert day.other_gallons == 32
    assert day.total_gallons == 291 + 32


def test_credits_reduce_total():
    activity = {"rainwater_collected": 50, "recycled_plastic": 100, "recycled_bottles_cans": 100}
    assert daily_credits(activity) == pytest.approx(56.0)
    day = adjust_for_day(activity, PLAIN_PROFILE)
    assert day.other_gallons == -56
    assert day.total_gallons == 235
    _assert_consistent(day)


def test_credits_can_be_ignored_for_legacy_totals():
    activity = {"rainwater_collected": 50, "recycled_plastic": 100}
    day = adjust_for_day(activity, PLAIN_PROFILE, apply_credits=False)
    assert day == estimate_baseline(PLAIN_PROFILE)


def test_credits_never_push_total_below_zero():
    day = adjust_for_day({"rainwater_collected": 500}, PLAIN_PROFILE)
    assert day.total_gallons == 0
    assert day.other_gallons == -291
    _assert_consistent(day)


def test_empty_activity_equals_baseline():
    profile = {**PLAIN_PROFILE, "has_pool": True, "has_garden": True, "garden_area": 250, "garden_frequency": 8}
    assert adjust_for_day({}, profile) == estimate_baseline(profile)
    assert adjust_for_day(None, profile) == estimate_baseline(profile)


@pytest.mark.parametrize(
    "profile, activity",
    [
        ({"appliances": ["showerhead"]}, {"shower_minutes": 3}),
        ({"appliances": ["showerhead"], "shopping_habits": "basics"}, {"rainwater_collected": 999}),
        (PLAIN_PROFILE, {"kitchen_sink_minutes": 7, "veggies_consumed": 3, "recycled_plastic": 17}),
        ({**PLAIN_PROFILE, "utility_percentage": 73, "laundry_type": "efficient", "laundry_frequency": 11}, {}),
    ],
)
def test_totals_are_non_negative_integers_summing_categories(profile, activity):
    _assert_consistent(estimate_baseline(profile))
    _assert_consistent(adjust_for_day(activity, profile))
