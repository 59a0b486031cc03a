"""Initial (onboarding) quiz: one household profile per user, retakes overwrite it."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_today
from app.db.session import get_db
from app.models.initial_profile import InitialProfile
from app.models.user import User
from app.schemas.initial_profile import InitialProfileRead, InitialQuizCreate
from app.services.consumption_store import get_current_profile, recalculate_for_day

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=InitialProfileRead, status_code=201)
async def submit_initial_quiz(
    payload: InitialQuizCreate,
    response: Response,
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """
    Create (201) or overwrite (200) the household profile, then recompute today's
    consumption. If today's daily quiz was already taken its answers are layered
    on top of the new baseline.
    """
    values = payload.model_dump(mode="json")
    profile = await get_current_profile(db, user.id)

    if profile:
        for name, value in values.items():
            setattr(profile, name, value)
        response.status_code = 200
        logger.info("Retake of initial quiz for user %s", user.id)
    else:
        profile = InitialProfile(user_id=user.id, **values)
        db.add(profile)
        logger.info("First initial quiz for user %s", user.id)

    user.initial_quiz_completed = True
    await db.flush()
    await db.refresh(profile)

    await recalculate_for_day(db, user.id, today)
    return profile


@router.get("", response_model=InitialProfileRead)
async def get_initial_quiz(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    profile = await get_current_profile(db, user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Initial quiz not found")
    return profile
