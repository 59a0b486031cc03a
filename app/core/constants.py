"""Application constants."""

# Water goal (gallons/day)
DEFAULT_WATER_GOAL = 1400
MIN_WATER_GOAL = 800
MAX_WATER_GOAL = 2000

# History endpoint
MAX_HISTORY_DAYS = 366
