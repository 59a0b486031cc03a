"""Initial schema: users + initial_profiles.

Revision ID: 001
Revises:
Create Date: 2026-09-28

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=150), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("water_goal", sa.Integer(), nullable=False, server_default="1400"),
        sa.Column("initial_quiz_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # initial_profiles: one mutable row per user
    op.create_table(
        "initial_profiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("appliances", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default="[]"),
        sa.Column("greywater", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("baths_per_month", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dishwasher_type", sa.String(length=20), nullable=False, server_default="none"),
        sa.Column("dishwasher_frequency", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("laundry_type", sa.String(length=20), nullable=False, server_default="none"),
        sa.Column("laundry_frequency", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("has_garden", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("garden_area", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("garden_frequency", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("has_pool", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("car_wash_method", sa.String(length=20), nullable=False, server_default="none"),
        sa.Column("car_wash_frequency", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("utility_percentage", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("shopping_habits", sa.String(length=20), nullable=False, server_default="basics"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_initial_profiles_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_initial_profiles"),
        sa.UniqueConstraint("user_id", name="uq_initial_profiles_user_id"),
    )


def downgrade() -> None:
    op.drop_table("initial_profiles")
    op.drop_table("users")
