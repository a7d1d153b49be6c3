"""Security utilities for password hashing and signed session tokens."""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from fanclub.config import settings

# Password hashing with Argon2 (random salt per hash)
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

SESSION_TOKEN_TYPE = "session"


def hash_password(password: str) -> str:
    """
    Hash a password using Argon2.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain_password: Password to verify
        hashed_password: Stored password hash

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def create_session_token(
    snapshot: dict[str, Any], expires_delta: timedelta | None = None
) -> str:
    """
    Sign a user snapshot into a session token.

    Args:
        snapshot: JSON-serializable public user fields
        expires_delta: Optional custom lifetime (defaults to the cookie max age)

    Returns:
        Encoded token string
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.session_max_age_days)

    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {
        "sub": str(snapshot.get("id")),
        "user": snapshot,
        "exp": expire,
        "type": SESSION_TOKEN_TYPE,
    }
    return jwt.encode(to_encode, settings.session_secret, algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> dict[str, Any]:
    """
    Verify a session token and return the embedded user snapshot.

    Raises:
        JWTError: If the token is invalid, expired or not a session token
    """
    payload = jwt.decode(
        token, settings.session_secret, algorithms=[settings.session_algorithm]
    )
    if payload.get("type") != SESSION_TOKEN_TYPE or not isinstance(payload.get("user"), dict):
        raise JWTError("Token is not a session token")
    return payload["user"]
