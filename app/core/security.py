"""Security utilities: password hashing (passlib) and cookie-session login state."""

from __future__ import annotations

from passlib.context import CryptContext
from starlette.requests import Request

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

SESSION_USER_KEY = "user_id"


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)


def login_session(request: Request, user_id: int) -> None:
    """Bind the signed session cookie to this user (replaces any previous login)."""
    request.session.clear()
    request.session[SESSION_USER_KEY] = user_id


def logout_session(request: Request) -> None:
    request.session.clear()


def session_user_id(request: Request) -> int | None:
    return request.session.get(SESSION_USER_KEY)
