"""Storage side of the water model: read profile/activity, persist breakdowns.

The estimation functions are pure; everything here talks to the database.
Recalculation always re-reads the latest profile and activity before writing,
so concurrent submissions for the same user-day converge (last write wins).
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, TypeVar

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.models.daily_activity import DailyActivity
from app.models.initial_profile import InitialProfile
from app.models.water_consumption import WaterConsumption
from app.schemas.consumption import ConsumptionBreakdown
from app.services.water_estimation import adjust_for_day, estimate_baseline

logger = logging.getLogger(__name__)

DayRow = TypeVar("DayRow", DailyActivity, WaterConsumption)


async def get_current_profile(db: AsyncSession, user_id: int) -> InitialProfile | None:
    result = await db.execute(select(InitialProfile).where(InitialProfile.user_id == user_id))
    return result.scalar_one_or_none()


async def get_activity(db: AsyncSession, user_id: int, day: date) -> DailyActivity | None:
    result = await db.execute(
        select(DailyActivity).where(DailyActivity.user_id == user_id, DailyActivity.day == day)
    )
    return result.scalar_one_or_none()


async def get_consumption(db: AsyncSession, user_id: int, day: date) -> WaterConsumption | None:
    result = await db.execute(
        select(WaterConsumption).where(WaterConsumption.user_id == user_id, WaterConsumption.day == day)
    )
    return result.scalar_one_or_none()


async def list_consumption(
    db: AsyncSession,
    user_id: int,
    days: int | None = None,
    today: date | None = None,
) -> list[WaterConsumption]:
    """Stored breakdowns newest first; `days` limits to the last N calendar days including today."""
    stmt = (
        select(WaterConsumption)
        .where(WaterConsumption.user_id == user_id)
        .order_by(desc(WaterConsumption.day))
    )
    if days is not None:
        cutoff = (today or date.today()) - timedelta(days=days - 1)
        stmt = stmt.where(WaterConsumption.day >= cutoff)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def _get_day_row(db: AsyncSession, model: type[DayRow], user_id: int, day: date) -> DayRow | None:
    result = await db.execute(
        select(model).where(model.user_id == user_id, model.day == day).with_for_update()
    )
    return result.scalar_one_or_none()


async def _upsert_day_row(
    db: AsyncSession,
    model: type[DayRow],
    user_id: int,
    day: date,
    values: dict[str, Any],
) -> tuple[DayRow, bool]:
    """
    Create or overwrite the (user, day) row; returns (row, created).

    An existing row is locked before it is overwritten. When two first
    submissions race, the loser's insert hits the unique (user_id, day) key;
    its savepoint is rolled back and it overwrites the winner's row instead.
    """
    row = await _get_day_row(db, model, user_id, day)
    created = False

    if row is None:
        try:
            async with db.begin_nested():
                row = model(user_id=user_id, day=day, **values)
                db.add(row)
                await db.flush()
            created = True
        except IntegrityError:
            logger.info(
                "%s for user %s on %s was inserted concurrently; overwriting",
                model.__tablename__,
                user_id,
                day.isoformat(),
            )
            row = await _get_day_row(db, model, user_id, day)
            if row is None:
                raise

    if not created:
        for name, value in values.items():
            setattr(row, name, value)
        await db.flush()

    await db.refresh(row)
    return row, created


async def upsert_activity(
    db: AsyncSession,
    user_id: int,
    day: date,
    values: dict[str, Any],
) -> tuple[DailyActivity, bool]:
    """Store the day's quiz answers; returns (row, created)."""
    return await _upsert_day_row(db, DailyActivity, user_id, day, values)


async def upsert_consumption(
    db: AsyncSession,
    user_id: int,
    day: date,
    breakdown: ConsumptionBreakdown,
) -> WaterConsumption:
    """Create or overwrite the (user, day) breakdown."""
    row, _ = await _upsert_day_row(db, WaterConsumption, user_id, day, breakdown.model_dump())
    return row


async def recalculate_for_day(
    db: AsyncSession,
    user_id: int,
    day: date,
) -> WaterConsumption | None:
    """
    Recompute and store the breakdown for one user-day.

    Uses the daily adjustment when an activity log exists for that day,
    otherwise the profile baseline. Returns None if the user has no profile.
    """
    profile = await get_current_profile(db, user_id)
    if profile is None:
        return None

    activity = await get_activity(db, user_id, day)
    if activity is not None:
        breakdown = adjust_for_day(
            activity, profile, apply_credits=get_settings().apply_daily_credits
        )
    else:
        breakdown = estimate_baseline(profile)

    row = await upsert_consumption(db, user_id, day, breakdown)
    logger.info(
        "Recalculated water consumption for user %s on %s (%s): %s gal",
        user_id,
        day.isoformat(),
        "daily" if activity is not None else "baseline",
        row.total_gallons,
    )
    return row
