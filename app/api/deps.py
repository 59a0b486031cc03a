"""Shared FastAPI dependencies: current user and the calendar day."""

from __future__ import annotations

from datetime import date

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import logout_session, session_user_id
from app.db.session import get_db
from app.models.user import User


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User:
    """Resolve the logged-in user from the session cookie, or 401."""
    user_id = session_user_id(request)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    user = await db.get(User, user_id)
    if user is None:
        # Stale cookie for a deleted account
        logout_session(request)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user


def get_today() -> date:
    """Calendar day that daily quizzes and consumption records are keyed on (server local time)."""
    return date.today()
