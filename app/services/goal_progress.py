"""Compare a day's estimated total against the user's daily goal."""

from __future__ import annotations

from datetime import date

from app.schemas.consumption import GoalProgress


def compute_goal_progress(day: date, total_gallons: int, goal: int) -> GoalProgress:
    """Percent is of the goal (100 = exactly on target). A zero goal reports 0%."""
    percent = round(total_gallons / goal * 100, 1) if goal > 0 else 0.0
    return GoalProgress(
        day=day,
        goal=goal,
        total_gallons=total_gallons,
        remaining_gallons=goal - total_gallons,
        percent_of_goal=percent,
        over_goal=total_gallons > goal,
    )
