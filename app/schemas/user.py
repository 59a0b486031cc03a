"""User / auth Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_WATER_GOAL, MIN_WATER_GOAL


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1, max_length=72)
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)


class UserLogin(BaseModel):
    username: str
    password: str


class UserRead(BaseModel):
    """Public user view; the password hash is never serialised."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    water_goal: int
    initial_quiz_completed: bool
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime


class GoalUpdate(BaseModel):
    goal: float = Field(
        ...,
        ge=MIN_WATER_GOAL,
        le=MAX_WATER_GOAL,
        description=f"Daily target in gallons ({MIN_WATER_GOAL}-{MAX_WATER_GOAL}); rounded to a whole gallon",
    )


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
