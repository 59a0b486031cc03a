"""Shared enums for models and API."""

from enum import Enum


class ApplianceOwnership(str, Enum):
    """Dishwasher / washing machine ownership and efficiency class."""

    NONE = "none"
    EFFICIENT = "efficient"  # Energy Star / low-water model
    INEFFICIENT = "inefficient"


class CarWashMethod(str, Enum):
    """How the household usually washes its car."""

    NONE = "none"
    GARDEN_HOSE = "garden_hose"
    DRIVE_THROUGH = "drive_through"
    SELF_SERVICE = "self_service"


class ShoppingHabit(str, Enum):
    """Consumer goods shopping intensity (embedded water in purchases)."""

    BASICS = "basics"
    MODERATE = "moderate"
    ADDICT = "addict"


class LowFlowFixture(str, Enum):
    """Known low-flow appliance tags. Profiles may carry other free-form tags."""

    SHOWERHEAD = "showerhead"
    BATHROOM_SINK = "bathroom_sink"
    KITCHEN_SINK = "kitchen_sink"
    TOILET = "toilet"
