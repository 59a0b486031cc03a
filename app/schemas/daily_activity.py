"""Daily quiz Pydantic schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DailyQuizCreate(BaseModel):
    shower_minutes: int = Field(0, ge=0)
    bathroom_sink_minutes: int = Field(0, ge=0)
    kitchen_sink_minutes: int = Field(0, ge=0)
    toilet_flushes: int = Field(0, ge=0)
    rainwater_collected: int = Field(0, ge=0, description="Gallons collected today")
    miles_driven: int = Field(0, ge=0)
    recycled_paper: int = Field(0, ge=0)
    recycled_plastic: int = Field(0, ge=0)
    recycled_bottles_cans: int = Field(0, ge=0)
    veggies_consumed: int = Field(0, ge=0)
    meat_consumed: int = Field(0, ge=0)
    pet_food_used: int = Field(0, ge=0)


class DailyQuizUpdate(BaseModel):
    """Partial update of today's answers; omitted fields keep their stored value."""

    shower_minutes: Optional[int] = Field(None, ge=0)
    bathroom_sink_minutes: Optional[int] = Field(None, ge=0)
    kitchen_sink_minutes: Optional[int] = Field(None, ge=0)
    toilet_flushes: Optional[int] = Field(None, ge=0)
    rainwater_collected: Optional[int] = Field(None, ge=0)
    miles_driven: Optional[int] = Field(None, ge=0)
    recycled_paper: Optional[int] = Field(None, ge=0)
    recycled_plastic: Optional[int] = Field(None, ge=0)
    recycled_bottles_cans: Optional[int] = Field(None, ge=0)
    veggies_consumed: Optional[int] = Field(None, ge=0)
    meat_consumed: Optional[int] = Field(None, ge=0)
    pet_food_used: Optional[int] = Field(None, ge=0)


class DailyActivityRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    day: date
    shower_minutes: int
    bathroom_sink_minutes: int
    kitchen_sink_minutes: int
    toilet_flushes: int
    rainwater_collected: int
    miles_driven: int
    recycled_paper: int
    recycled_plastic: int
    recycled_bottles_cans: int
    veggies_consumed: int
    meat_consumed: int
    pet_food_used: int
    created_at: datetime
    updated_at: datetime
