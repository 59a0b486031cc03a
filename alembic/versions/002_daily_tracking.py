"""Daily tracking: daily_activities + water_consumption keyed on (user_id, day).

Revision ID: 002
Revises: 001
Create Date: 2026-10-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ACTIVITY_COLUMNS = (
    "shower_minutes",
    "bathroom_sink_minutes",
    "kitchen_sink_minutes",
    "toilet_flushes",
    "rainwater_collected",
    "miles_driven",
    "recycled_paper",
    "recycled_plastic",
    "recycled_bottles_cans",
    "veggies_consumed",
    "meat_consumed",
    "pet_food_used",
)

GALLON_COLUMNS = (
    "total_gallons",
    "shower_gallons",
    "toilet_gallons",
    "kitchen_gallons",
    "dishwasher_gallons",
    "laundry_gallons",
    "garden_gallons",
    "pool_gallons",
    "car_wash_gallons",
    "energy_gallons",
    "shopping_gallons",
    "other_gallons",
)


def upgrade() -> None:
    op.create_table(
        "daily_activities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("day", sa.Date(), nullable=False),
        *[sa.Column(name, sa.Integer(), nullable=False, server_default="0") for name in ACTIVITY_COLUMNS],
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_daily_activities_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_daily_activities"),
        sa.UniqueConstraint("user_id", "day", name="uq_daily_activities_user_day"),
    )

    # Derived per-day breakdown; the unique key doubles as the history index
    op.create_table(
        "water_consumption",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("day", sa.Date(), nullable=False),
        *[sa.Column(name, sa.Integer(), nullable=False, server_default="0") for name in GALLON_COLUMNS],
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_water_consumption_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_water_consumption"),
        sa.UniqueConstraint("user_id", "day", name="uq_water_consumption_user_day"),
    )


def downgrade() -> None:
    op.drop_table("water_consumption")
    op.drop_table("daily_activities")
