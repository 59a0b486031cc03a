"""Daily quiz: at most one activity log per user per calendar day."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_today
from app.db.session import get_db
from app.models.user import User
from app.schemas.daily_activity import DailyActivityRead, DailyQuizCreate, DailyQuizUpdate
from app.services.consumption_store import (
    get_activity,
    get_current_profile,
    recalculate_for_day,
    upsert_activity,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=DailyActivityRead, status_code=201)
async def submit_daily_quiz(
    payload: DailyQuizCreate,
    response: Response,
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Create (201) or replace (200) today's answers and recompute today's consumption."""
    if await get_current_profile(db, user.id) is None:
        raise HTTPException(status_code=400, detail="Initial quiz must be completed first")

    values = payload.model_dump()
    activity, created = await upsert_activity(db, user.id, today, values)
    if not created:
        response.status_code = 200

    await recalculate_for_day(db, user.id, today)
    return activity


@router.get("", response_model=Optional[DailyActivityRead])
async def get_daily_quiz(
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Today's answers, or null if the daily quiz has not been taken yet."""
    return await get_activity(db, user.id, today)


@router.patch("", response_model=DailyActivityRead)
async def update_daily_quiz(
    payload: DailyQuizUpdate,
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Change some of today's answers. 404 if there is nothing to update yet."""
    activity = await get_activity(db, user.id, today)
    if activity is None:
        raise HTTPException(status_code=404, detail="No daily quiz found for today")

    for name, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(activity, name, value)

    await db.flush()
    await db.refresh(activity)

    await recalculate_for_day(db, user.id, today)
    logger.info("Daily quiz updated for user %s on %s", user.id, today.isoformat())
    return activity
