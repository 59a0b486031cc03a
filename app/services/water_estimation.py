"""Daily water consumption estimation.

Additive heuristic model, not a physical one: each questionnaire answer adds
(or removes) a fixed number of gallons to one category. Monthly answers
(baths, dishwasher/laundry loads, garden waterings, car washes) are turned
into a daily rate by dividing by 30. The showerhead credit, pool, energy and
shopping figures are applied as-is (already daily).

Two entry points:
- estimate_baseline(profile): average day from the household profile alone.
- adjust_for_day(activity, profile): baseline plus what was logged today.

Both accept ORM rows, Pydantic models or plain dicts. Missing numbers count as
0 and missing choices as "none"; nothing here raises on absent fields.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

from app.core.enums import ApplianceOwnership, CarWashMethod, LowFlowFixture, ShoppingHabit
from app.schemas.consumption import CATEGORY_FIELDS, ConsumptionBreakdown

DAYS_PER_MONTH = 30

# ── Baseline (household profile) ─────────────────────────────────────────

LOW_FLOW_SHOWERHEAD_CREDIT = 63.0  # flat, not divided by 30
GALLONS_PER_BATH = 80.0
DISHWASHER_GALLONS_PER_LOAD = {
    ApplianceOwnership.EFFICIENT: 4.0,
    ApplianceOwnership.INEFFICIENT: 10.0,
}
LAUNDRY_GALLONS_PER_LOAD = {
    ApplianceOwnership.EFFICIENT: 14.0,
    ApplianceOwnership.INEFFICIENT: 20.0,
}
GARDEN_GALLONS_PER_SQFT = 0.623  # per watering
POOL_GALLONS_PER_DAY = 65.0
CAR_WASH_GALLONS = {
    CarWashMethod.GARDEN_HOSE: 100.0,
    CarWashMethod.DRIVE_THROUGH: 35.0,
    CarWashMethod.SELF_SERVICE: 17.0,
}
ENERGY_GALLONS_PER_PERCENT = 0.34
SHOPPING_GALLONS_PER_DAY = {
    ShoppingHabit.BASICS: 291.0,
    ShoppingHabit.MODERATE: 583.0,
    ShoppingHabit.ADDICT: 1000.0,
}

# ── Daily activity ───────────────────────────────────────────────────────

SHOWER_GPM = 2.5
LOW_FLOW_SHOWER_GPM = 1.8
SINK_GPM = 2.2
LOW_FLOW_SINK_GPM = 1.5
TOILET_GALLONS_PER_FLUSH = 3.5
LOW_FLOW_TOILET_GALLONS_PER_FLUSH = 1.6

GALLONS_PER_MILE_DRIVEN = 0.165
GALLONS_PER_RECYCLED_PAPER = 0.04
GALLONS_PER_VEGGIE_SERVING = 0.085
GALLONS_PER_MEAT_SERVING = 2.0
GALLONS_PER_PET_FOOD_SERVING = 0.7

# Credits: reduce the day's total rather than a specific fixture category
GALLONS_CREDIT_PER_RECYCLED_PLASTIC = 0.03
GALLONS_CREDIT_PER_RECYCLED_BOTTLE_CAN = 0.03

E = TypeVar("E", bound=Enum)


def _raw(source: Any, name: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _num(source: Any, name: str) -> float:
    value = _raw(source, name)
    if not value:
        return 0.0
    return float(value)


def _flag(source: Any, name: str) -> bool:
    return bool(_raw(source, name))


def _choice(source: Any, name: str, enum_cls: type[E]) -> E | None:
    """Enum member for the answer, or None when absent / not a known option."""
    value = _raw(source, name)
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None


def fixture_tags(profile: Any) -> frozenset[str]:
    """Low-flow appliance tags on the profile, normalised to lowercase."""
    tags = _raw(profile, "appliances")
    if not tags or isinstance(tags, (str, bytes)) or not isinstance(tags, Iterable):
        return frozenset()
    return frozenset(str(t).strip().lower() for t in tags)


def round_gallons(value: float) -> int:
    """Round half up to a whole gallon (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _finalize(gallons: dict[str, float]) -> ConsumptionBreakdown:
    """Apply the non-negative total correction and round.

    A negative total is moved into "other" so the day sums to zero. The
    persisted total is the sum of the rounded categories; if rounding alone
    pushes that below zero, "other" absorbs the difference again.
    """
    total = sum(gallons.values())
    if total < 0:
        gallons["other_gallons"] += abs(total)

    rounded = {name: round_gallons(gallons[name]) for name in CATEGORY_FIELDS}
    rounded_total = sum(rounded.values())
    if rounded_total < 0:
        rounded["other_gallons"] -= rounded_total
        rounded_total = 0
    return ConsumptionBreakdown(total_gallons=rounded_total, **rounded)


def _baseline_gallons(profile: Any) -> dict[str, float]:
    gallons = {name: 0.0 for name in CATEGORY_FIELDS}
    tags = fixture_tags(profile)

    # Shower / bath
    if LowFlowFixture.SHOWERHEAD.value in tags:
        gallons["shower_gallons"] -= LOW_FLOW_SHOWERHEAD_CREDIT
    gallons["shower_gallons"] += GALLONS_PER_BATH * _num(profile, "baths_per_month") / DAYS_PER_MONTH

    dishwasher = _choice(profile, "dishwasher_type", ApplianceOwnership)
    if dishwasher in DISHWASHER_GALLONS_PER_LOAD:
        gallons["dishwasher_gallons"] += (
            DISHWASHER_GALLONS_PER_LOAD[dishwasher] * _num(profile, "dishwasher_frequency") / DAYS_PER_MONTH
        )

    laundry = _choice(profile, "laundry_type", ApplianceOwnership)
    if laundry in LAUNDRY_GALLONS_PER_LOAD:
        gallons["laundry_gallons"] += (
            LAUNDRY_GALLONS_PER_LOAD[laundry] * _num(profile, "laundry_frequency") / DAYS_PER_MONTH
        )

    if _flag(profile, "has_garden"):
        gallons["garden_gallons"] += (
            GARDEN_GALLONS_PER_SQFT
            * _num(profile, "garden_area")
            * _num(profile, "garden_frequency")
            / DAYS_PER_MONTH
        )

    if _flag(profile, "has_pool"):
        gallons["pool_gallons"] += POOL_GALLONS_PER_DAY

    car_wash = _choice(profile, "car_wash_method", CarWashMethod)
    if car_wash in CAR_WASH_GALLONS:
        gallons["car_wash_gallons"] += (
            CAR_WASH_GALLONS[car_wash] * _num(profile, "car_wash_frequency") / DAYS_PER_MONTH
        )

    gallons["energy_gallons"] += ENERGY_GALLONS_PER_PERCENT * _num(profile, "utility_percentage")

    shopping = _choice(profile, "shopping_habits", ShoppingHabit)
    if shopping in SHOPPING_GALLONS_PER_DAY:
        gallons["shopping_gallons"] += SHOPPING_GALLONS_PER_DAY[shopping]

    # toilet / kitchen only move with daily activity; other is the overflow sink
    return gallons


def estimate_baseline(profile: Any) -> ConsumptionBreakdown:
    """Average-day breakdown from the household profile alone."""
    return _finalize(_baseline_gallons(profile))


def daily_credits(activity: Any) -> float:
    """Gallons saved today by rainwater collection and recycling plastic/bottles/cans."""
    return (
        _num(activity, "rainwater_collected")
        + GALLONS_CREDIT_PER_RECYCLED_PLASTIC * _num(activity, "recycled_plastic")
        + GALLONS_CREDIT_PER_RECYCLED_BOTTLE_CAN * _num(activity, "recycled_bottles_cans")
    )


def adjust_for_day(
    activity: Any,
    profile: Any,
    apply_credits: bool = True,
) -> ConsumptionBreakdown:
    """
    Layer one day's logged activity on top of the (rounded) baseline.

    Sink minutes from both the bathroom and kitchen land in the kitchen
    category; each sink checks its own low-flow tag. Rainwater and recycled
    plastic/bottles/cans are credited against "other" when apply_credits is
    True; with False they are ignored, which matches totals stored before
    credits were counted.
    """
    baseline = estimate_baseline(profile)
    gallons = {name: float(value) for name, value in baseline.categories().items()}
    tags = fixture_tags(profile)

    shower_rate = LOW_FLOW_SHOWER_GPM if LowFlowFixture.SHOWERHEAD.value in tags else SHOWER_GPM
    gallons["shower_gallons"] += shower_rate * _num(activity, "shower_minutes")

    bathroom_rate = LOW_FLOW_SINK_GPM if LowFlowFixture.BATHROOM_SINK.value in tags else SINK_GPM
    gallons["kitchen_gallons"] += bathroom_rate * _num(activity, "bathroom_sink_minutes")
    kitchen_rate = LOW_FLOW_SINK_GPM if LowFlowFixture.KITCHEN_SINK.value in tags else SINK_GPM
    gallons["kitchen_gallons"] += kitchen_rate * _num(activity, "kitchen_sink_minutes")

    flush_rate = (
        LOW_FLOW_TOILET_GALLONS_PER_FLUSH
        if LowFlowFixture.TOILET.value in tags
        else TOILET_GALLONS_PER_FLUSH
    )
    gallons["toilet_gallons"] += flush_rate * _num(activity, "toilet_flushes")

    gallons["other_gallons"] += (
        GALLONS_PER_MILE_DRIVEN * _num(activity, "miles_driven")
        + GALLONS_PER_RECYCLED_PAPER * _num(activity, "recycled_paper")
        + GALLONS_PER_VEGGIE_SERVING * _num(activity, "veggies_consumed")
        + GALLONS_PER_MEAT_SERVING * _num(activity, "meat_consumed")
        + GALLONS_PER_PET_FOOD_SERVING * _num(activity, "pet_food_used")
    )

    if apply_credits:
        gallons["other_gallons"] -= daily_credits(activity)

    return _finalize(gallons)
