"""Print row counts for every water tracker table (connectivity smoke check)."""

import asyncio

from sqlalchemy import func, select

from app.db.session import async_session_maker, engine
from app.models import DailyActivity, InitialProfile, User, WaterConsumption

MODELS = (User, InitialProfile, DailyActivity, WaterConsumption)


async def check_data():
    async with async_session_maker() as session:
        for model in MODELS:
            table = model.__tablename__
            try:
                count = (await session.execute(select(func.count()).select_from(model))).scalar()
                print(f"Table '{table}' row count: {count}")
            except Exception as e:
                print(f"Error querying {table}: {e}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
