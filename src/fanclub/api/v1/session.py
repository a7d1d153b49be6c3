"""Session endpoints: sign in, current session, sign out."""

from fastapi import APIRouter, Depends, Response

from fanclub.api.deps import get_auth_service, get_current_session, get_session_user
from fanclub.core.session import build_session_user, clear_session_cookie, set_session_cookie
from fanclub.schemas.auth import LoginRequest, LoginResponse, SessionResponse, SessionUser
from fanclub.schemas.common import SuccessResponse
from fanclub.services.auth import AuthService

router = APIRouter(prefix="/session", tags=["session"])


@router.post(
    "",
    response_model=LoginResponse,
    summary="Sign in",
    description="Authenticate with username or email and password; sets the session cookie.",
    responses={
        400: {"description": "Missing username or password"},
        401: {"description": "Invalid username or password"},
    },
)
async def login(
    data: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Authenticate user and issue the session cookie.

    Returns:
        Public user snapshot (the same one stored in the cookie)
    """
    user = await auth_service.authenticate(data.username_or_email, data.password)
    session_user = build_session_user(user)
    set_session_cookie(response, session_user)
    return LoginResponse(user=session_user)


@router.get(
    "",
    response_model=SessionResponse,
    summary="Current session",
    description="Return the user snapshot carried by the session cookie.",
    responses={401: {"description": "No valid session cookie"}},
)
async def current_session(
    session_user: SessionUser = Depends(get_current_session),
) -> SessionResponse:
    return SessionResponse(user=session_user)


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Sign out",
    description="Mark the user as logged out and clear the session cookie.",
)
async def logout(
    response: Response,
    session_user: SessionUser | None = Depends(get_session_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> SuccessResponse:
    """The cookie is cleared whether or not it named a known user."""
    await auth_service.end_session(session_user)
    clear_session_cookie(response)
    return SuccessResponse(message="Logged out successfully")
