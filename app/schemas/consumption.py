"""Water consumption Pydantic schemas: computed breakdown, stored rows, goal progress."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

# Order matters only for display; totals are always the sum over all of these.
CATEGORY_FIELDS: tuple[str, ...] = (
    "shower_gallons",
    "toilet_gallons",
    "kitchen_gallons",
    "dishwasher_gallons",
    "laundry_gallons",
    "garden_gallons",
    "pool_gallons",
    "car_wash_gallons",
    "energy_gallons",
    "shopping_gallons",
    "other_gallons",
)


class ConsumptionBreakdown(BaseModel):
    """Immutable result of the estimation model (whole gallons per day)."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    total_gallons: int = 0
    shower_gallons: int = 0
    toilet_gallons: int = 0
    kitchen_gallons: int = 0
    dishwasher_gallons: int = 0
    laundry_gallons: int = 0
    garden_gallons: int = 0
    pool_gallons: int = 0
    car_wash_gallons: int = 0
    energy_gallons: int = 0
    shopping_gallons: int = 0
    other_gallons: int = 0

    def categories(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in CATEGORY_FIELDS}


class ConsumptionRead(ConsumptionBreakdown):
    """A stored breakdown for one user-day."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    user_id: int
    day: date
    updated_at: datetime


class GoalProgress(BaseModel):
    day: date
    goal: int = Field(..., description="Daily target in gallons")
    total_gallons: int
    remaining_gallons: int = Field(..., description="Goal minus total; negative when over goal")
    percent_of_goal: float
    over_goal: bool
