"""Auth endpoints: register, login, logout, current user (signed cookie session)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.core.config import get_settings
from app.core.security import hash_password, login_session, logout_session, verify_password
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserLogin, UserRead

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=201)
async def register(payload: UserCreate, request: Request, db: AsyncSession = Depends(get_db)):
    """Create an account and log it in."""
    result = await db.execute(select(User.id).where(User.username == payload.username))
    if result.scalar_one_or_none() is not None:
        raise HTTPException(status_code=400, detail="Username already exists")

    user = User(
        username=payload.username,
        password=hash_password(payload.password),
        water_goal=get_settings().default_water_goal,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)

    login_session(request, user.id)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return user


@router.post("/login", response_model=UserRead)
async def login(payload: UserLogin, request: Request, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User).where(User.username == payload.username))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(payload.password, user.password):
        logger.info("Failed login for %s", payload.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication failed")

    login_session(request, user.id)
    return user


@router.post("/logout")
async def logout(request: Request):
    logout_session(request)
    return {"status": "ok"}


@router.get("/user", response_model=UserRead)
async def current_user(user: User = Depends(get_current_user)):
    return user
