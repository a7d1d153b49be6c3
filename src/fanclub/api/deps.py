"""FastAPI dependency injection for sessions, services and database."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from fanclub.core.exceptions import UnauthenticatedError
from fanclub.core.session import read_session
from fanclub.db.session import get_db
from fanclub.repositories.reminder import ReminderRepository
from fanclub.repositories.user import UserRepository
from fanclub.schemas.auth import SessionUser
from fanclub.services.auth import AuthService
from fanclub.services.football import FootballDataClient, football_client
from fanclub.services.reminder import ReminderService


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return UserRepository(db)


async def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthService:
    return AuthService(user_repo)


async def get_reminder_service(
    db: AsyncSession = Depends(get_db),
) -> ReminderService:
    return ReminderService(ReminderRepository(db))


async def get_football_client() -> FootballDataClient:
    return football_client


async def get_session_user(request: Request) -> SessionUser | None:
    """
    Resolve the caller from the session cookie.

    Returns:
        The session snapshot, or None for anonymous requests
    """
    session_user = read_session(request)
    if session_user is not None:
        request.state.user = session_user
    return session_user


async def get_current_session(
    session_user: SessionUser | None = Depends(get_session_user),
) -> SessionUser:
    """
    Require a resolved caller.

    Raises:
        UnauthenticatedError: If no valid session cookie was sent
    """
    if session_user is None:
        raise UnauthenticatedError()
    return session_user
