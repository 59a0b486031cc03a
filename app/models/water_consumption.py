"""WaterConsumption model: derived per-category gallon breakdown for one user-day."""

from __future__ import annotations

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class WaterConsumption(Base):
    """Never edited directly: recomputed whenever the profile or that day's activity changes."""

    __tablename__ = "water_consumption"
    __table_args__ = (
        UniqueConstraint("user_id", "day", name="uq_water_consumption_user_day"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    day: Mapped[date] = mapped_column(Date, nullable=False)

    total_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    shower_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    toilet_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    kitchen_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dishwasher_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    laundry_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    garden_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    pool_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    car_wash_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    energy_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    shopping_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    other_gallons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
