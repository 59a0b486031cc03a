"""Boundary validation for quiz and account payloads."""

import pytest
from pydantic import ValidationError

from app.core.enums import ApplianceOwnership, ShoppingHabit
from app.schemas.daily_activity import DailyQuizCreate, DailyQuizUpdate
from app.schemas.initial_profile import InitialQuizCreate
from app.schemas.user import GoalUpdate


def test_initial_quiz_defaults():
    quiz = InitialQuizCreate()
    assert quiz.appliances == []
    assert quiz.dishwasher_type is ApplianceOwnership.NONE
    assert quiz.shopping_habits is ShoppingHabit.BASICS
    assert quiz.model_dump(mode="json")["car_wash_method"] == "none"


def test_appliances_are_normalised():
    assert InitialQuizCreate(appliances=None).appliances == []
    assert InitialQuizCreate(appliances="showerhead").appliances == []
    quiz = InitialQuizCreate(appliances=[" Showerhead", "toilet", "showerhead"])
    assert quiz.appliances == ["showerhead", "toilet"]


@pytest.mark.parametrize(
    "payload",
    [
        {"utility_percentage": 101},
        {"baths_per_month": -1},
        {"dishwasher_type": "yes_efficient"},
        {"car_wash_method": "bucket"},
        {"shopping_habits": "none"},
    ],
)
def test_initial_quiz_rejects_out_of_range(payload):
    with pytest.raises(ValidationError):
        InitialQuizCreate(**payload)


def test_daily_quiz_rejects_negative_values():
    with pytest.raises(ValidationError):
        DailyQuizCreate(shower_minutes=-1)
    with pytest.raises(ValidationError):
        DailyQuizUpdate(miles_driven=-5)


def test_daily_update_only_reports_sent_fields():
    update = DailyQuizUpdate(toilet_flushes=3)
    assert update.model_dump(exclude_unset=True) == {"toilet_flushes": 3}


@pytest.mark.parametrize("goal", [800, 1400, 2000, 1234.6])
def test_goal_within_bounds(goal):
    assert GoalUpdate(goal=goal).goal == goal


@pytest.mark.parametrize("goal", [799, 2001, -1])
def test_goal_out_of_bounds(goal):
    with pytest.raises(ValidationError):
        GoalUpdate(goal=goal)
