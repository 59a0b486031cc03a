"""Account settings: daily water goal and contact details."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import GoalUpdate, ProfileUpdate, UserRead
from app.services.water_estimation import round_gallons

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/goal", response_model=UserRead)
async def update_goal(
    payload: GoalUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Set the daily goal (800-2000 gallons, rounded to a whole gallon)."""
    user.water_goal = round_gallons(payload.goal)
    await db.flush()
    await db.refresh(user)
    logger.info("User %s goal set to %s gal/day", user.id, user.water_goal)
    return user


@router.post("/profile", response_model=UserRead)
async def update_profile(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update contact details. Empty or omitted fields leave the stored value alone."""
    if payload.name:
        user.name = payload.name
    if payload.email:
        user.email = payload.email
    if payload.phone:
        user.phone = payload.phone
    await db.flush()
    await db.refresh(user)
    return user
