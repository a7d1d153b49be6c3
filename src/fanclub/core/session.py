"""Session cookie issuing and reading.

The cookie value is a signed token wrapping a JSON snapshot of the public
user fields. It is a point-in-time copy: profile changes made after login
are not visible until the user signs in again.
"""

import logging
from datetime import timedelta

from fastapi import Request, Response
from jose import JWTError
from pydantic import ValidationError

from fanclub.config import settings
from fanclub.core.security import create_session_token, decode_session_token
from fanclub.models.user import User
from fanclub.schemas.auth import SessionUser

logger = logging.getLogger(__name__)


def build_session_user(user: User) -> SessionUser:
    """Take the public snapshot of a user record."""
    return SessionUser.model_validate(user)


def encode_session(session_user: SessionUser) -> str:
    snapshot = session_user.model_dump(mode="json", by_alias=True)
    return create_session_token(snapshot)


def decode_session(token: str | None) -> SessionUser | None:
    """
    Recover the snapshot from a cookie value.

    Args:
        token: Raw cookie value

    Returns:
        The session user, or None when the value is missing, expired,
        tampered with or not a session snapshot
    """
    if not token:
        return None
    try:
        snapshot = decode_session_token(token)
        return SessionUser.model_validate(snapshot)
    except (JWTError, ValidationError) as exc:
        logger.info("Ignoring unreadable session cookie", extra={"error_type": type(exc).__name__})
        return None


def read_session(request: Request) -> SessionUser | None:
    """Resolve the caller from the request cookies (None means anonymous)."""
    return decode_session(request.cookies.get(settings.session_cookie_name))


def set_session_cookie(response: Response, session_user: SessionUser) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=encode_session(session_user),
        max_age=int(timedelta(days=settings.session_max_age_days).total_seconds()),
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
