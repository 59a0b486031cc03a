"""DailyActivity model: one daily quiz per user per calendar day."""

from __future__ import annotations

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class DailyActivity(Base):
    __tablename__ = "daily_activities"
    __table_args__ = (
        UniqueConstraint("user_id", "day", name="uq_daily_activities_user_day"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    day: Mapped[date] = mapped_column(Date, nullable=False)

    shower_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bathroom_sink_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    kitchen_sink_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    toilet_flushes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rainwater_collected: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # gallons
    miles_driven: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    recycled_paper: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    recycled_plastic: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    recycled_bottles_cans: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    veggies_consumed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    meat_consumed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    pet_food_used: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
