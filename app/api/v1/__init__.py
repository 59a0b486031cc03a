"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    account,
    auth,
    daily_quiz,
    health,
    initial_quiz,
    water_consumption,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(account.router, tags=["account"])
api_router.include_router(initial_quiz.router, prefix="/initial-quiz", tags=["initial-quiz"])
api_router.include_router(daily_quiz.router, prefix="/daily-quiz", tags=["daily-quiz"])
api_router.include_router(water_consumption.router, prefix="/water-consumption", tags=["water-consumption"])
