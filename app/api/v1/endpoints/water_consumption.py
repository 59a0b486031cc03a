"""Water consumption: today's breakdown, history and progress against the goal."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_today
from app.core.constants import MAX_HISTORY_DAYS
from app.db.session import get_db
from app.models.user import User
from app.models.water_consumption import WaterConsumption
from app.schemas.consumption import ConsumptionRead, GoalProgress
from app.services.consumption_store import get_consumption, list_consumption, recalculate_for_day
from app.services.goal_progress import compute_goal_progress

logger = logging.getLogger(__name__)
router = APIRouter()


async def _today_consumption(db: AsyncSession, user_id: int, today: date) -> WaterConsumption | None:
    """Stored row for today; computed on first access of the day when a profile exists."""
    row = await get_consumption(db, user_id, today)
    if row is None:
        row = await recalculate_for_day(db, user_id, today)
        if row is not None:
            logger.info("First read of the day: stored consumption for user %s on %s", user_id, today.isoformat())
    return row


@router.get("", response_model=Optional[ConsumptionRead])
async def get_today_consumption(
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Today's breakdown, or null before the initial quiz is taken."""
    return await _today_consumption(db, user.id, today)


@router.get("/history", response_model=list[ConsumptionRead])
async def get_consumption_history(
    days: Optional[int] = Query(None, ge=1, le=MAX_HISTORY_DAYS, description="Last N days (7, 30, 90). Omit for all."),
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    return await list_consumption(db, user.id, days=days, today=today)


@router.get("/progress", response_model=GoalProgress)
async def get_goal_progress(
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Today's total against the user's daily goal (0 gallons before the initial quiz)."""
    row = await _today_consumption(db, user.id, today)
    total = row.total_gallons if row else 0
    return compute_goal_progress(today, total, user.water_goal)
