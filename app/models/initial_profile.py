"""InitialProfile model: household characteristics from the onboarding quiz."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class InitialProfile(Base):
    """One row per user, overwritten in place when the quiz is retaken.

    `greywater` is stored but not used by the estimation model yet.
    """

    __tablename__ = "initial_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )

    # Low-flow fixture tags: ["showerhead", "bathroom_sink", "kitchen_sink", "toilet"]
    appliances: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list
    )
    greywater: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    baths_per_month: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dishwasher_type: Mapped[str] = mapped_column(String(20), nullable=False, default="none")
    dishwasher_frequency: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # loads / month
    laundry_type: Mapped[str] = mapped_column(String(20), nullable=False, default="none")
    laundry_frequency: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # loads / month
    has_garden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    garden_area: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # sq ft
    garden_frequency: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # waterings / month
    has_pool: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    car_wash_method: Mapped[str] = mapped_column(String(20), nullable=False, default="none")
    car_wash_frequency: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # washes / month
    utility_percentage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # 0-100
    shopping_habits: Mapped[str] = mapped_column(String(20), nullable=False, default="basics")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
