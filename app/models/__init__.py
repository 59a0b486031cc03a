"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.daily_activity import DailyActivity
from app.models.initial_profile import InitialProfile
from app.models.user import User
from app.models.water_consumption import WaterConsumption

__all__ = [
    "DailyActivity",
    "InitialProfile",
    "User",
    "WaterConsumption",
]
