"""Storage collaborator: create-or-overwrite of the per-day rows."""

import pytest_asyncio
from sqlalchemy import func, select

from app.models.daily_activity import DailyActivity
from app.models.user import User
from app.models.water_consumption import WaterConsumption
from app.schemas.consumption import ConsumptionBreakdown
from app.services import consumption_store
from app.services.consumption_store import upsert_activity, upsert_consumption

from tests.conftest import TODAY


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def user(db):
    row = User(username="river", password="x")
    db.add(row)
    await db.flush()
    return row


def _miss_first_lookup(monkeypatch):
    """Make the first row lookup come back empty, as if another request had not committed yet."""
    real = consumption_store._get_day_row
    calls = []

    async def lookup(db, model, user_id, day):
        calls.append(model)
        if len(calls) == 1:
            return None
        return await real(db, model, user_id, day)

    monkeypatch.setattr(consumption_store, "_get_day_row", lookup)
    return calls


async def _count(db, model):
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


async def test_upsert_consumption_inserts_then_overwrites(db, user):
    first = await upsert_consumption(db, user.id, TODAY, ConsumptionBreakdown(total_gallons=65, pool_gallons=65))
    second = await upsert_consumption(db, user.id, TODAY, ConsumptionBreakdown(total_gallons=291, shopping_gallons=291))

    assert second.id == first.id
    assert second.pool_gallons == 0
    assert second.total_gallons == 291
    assert await _count(db, WaterConsumption) == 1


async def test_upsert_consumption_recovers_from_concurrent_insert(db, user, monkeypatch):
    db.add(WaterConsumption(user_id=user.id, day=TODAY, total_gallons=1, other_gallons=1))
    await db.flush()
    calls = _miss_first_lookup(monkeypatch)

    row = await upsert_consumption(db, user.id, TODAY, ConsumptionBreakdown(total_gallons=291, shopping_gallons=291))

    assert len(calls) == 2
    assert row.total_gallons == 291
    assert row.shopping_gallons == 291
    assert row.other_gallons == 0
    assert await _count(db, WaterConsumption) == 1


async def test_upsert_activity_reports_creation(db, user):
    row, created = await upsert_activity(db, user.id, TODAY, {"shower_minutes": 10})
    assert created is True
    assert row.shower_minutes == 10

    row, created = await upsert_activity(db, user.id, TODAY, {"shower_minutes": 4, "toilet_flushes": 2})
    assert created is False
    assert row.shower_minutes == 4
    assert row.toilet_flushes == 2
    assert await _count(db, DailyActivity) == 1


async def test_upsert_activity_recovers_from_concurrent_insert(db, user, monkeypatch):
    db.add(DailyActivity(user_id=user.id, day=TODAY, shower_minutes=3))
    await db.flush()
    _miss_first_lookup(monkeypatch)

    row, created = await upsert_activity(db, user.id, TODAY, {"shower_minutes": 8})

    assert created is False
    assert row.shower_minutes == 8
    assert await _count(db, DailyActivity) == 1
