"""Initial quiz Pydantic schemas: household profile input and read models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.enums import ApplianceOwnership, CarWashMethod, ShoppingHabit


class InitialQuizCreate(BaseModel):
    """Onboarding / retake answers. Omitted answers fall back to 'none' / 0 / false."""

    appliances: list[str] = Field(
        default_factory=list,
        description="Installed low-flow fixtures: showerhead, bathroom_sink, kitchen_sink, toilet",
    )
    greywater: bool = False
    baths_per_month: int = Field(0, ge=0)
    dishwasher_type: ApplianceOwnership = ApplianceOwnership.NONE
    dishwasher_frequency: int = Field(0, ge=0, description="Loads per month")
    laundry_type: ApplianceOwnership = ApplianceOwnership.NONE
    laundry_frequency: int = Field(0, ge=0, description="Loads per month")
    has_garden: bool = False
    garden_area: int = Field(0, ge=0, description="Square feet")
    garden_frequency: int = Field(0, ge=0, description="Waterings per month")
    has_pool: bool = False
    car_wash_method: CarWashMethod = CarWashMethod.NONE
    car_wash_frequency: int = Field(0, ge=0, description="Washes per month")
    utility_percentage: int = Field(0, ge=0, le=100, description="Share of utility from the reference energy source")
    shopping_habits: ShoppingHabit = ShoppingHabit.BASICS

    @field_validator("appliances", mode="before")
    @classmethod
    def _coerce_appliances(cls, value: Any) -> list[str]:
        # Non-list payloads (null, a bare string) are treated as "no fixtures"
        if not isinstance(value, (list, tuple, set)):
            return []
        seen: list[str] = []
        for tag in value:
            tag = str(tag).strip().lower()
            if tag and tag not in seen:
                seen.append(tag)
        return seen


class InitialProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    appliances: list[str]
    greywater: bool
    baths_per_month: int
    dishwasher_type: ApplianceOwnership
    dishwasher_frequency: int
    laundry_type: ApplianceOwnership
    laundry_frequency: int
    has_garden: bool
    garden_area: int
    garden_frequency: int
    has_pool: bool
    car_wash_method: CarWashMethod
    car_wash_frequency: int
    utility_percentage: int
    shopping_habits: ShoppingHabit
    created_at: datetime
    updated_at: datetime
