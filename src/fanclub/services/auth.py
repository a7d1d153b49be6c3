"""Authentication service with business logic."""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from fanclub.core.exceptions import ConflictError, UnauthenticatedError
from fanclub.core.security import hash_password, verify_password
from fanclub.models.user import LoginStatus, User
from fanclub.repositories.base import is_unique_violation
from fanclub.repositories.user import UserRepository
from fanclub.schemas.auth import SessionUser, SignUpRequest

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already registered"
USERNAME_TAKEN = "Username already taken"


class AuthService:
    """Service for sign-up, sign-in and sign-out."""

    def __init__(self, user_repo: UserRepository):
        """
        Initialize authentication service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def _taken_fields(self, email: str, username: str) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        if await self.user_repo.email_exists(email):
            errors["email"] = [EMAIL_TAKEN]
        if await self.user_repo.username_exists(username):
            errors["username"] = [USERNAME_TAKEN]
        return errors

    async def register(self, data: SignUpRequest) -> User:
        """
        Register a new user.

        Args:
            data: Validated sign-up form

        Returns:
            Created user object

        Raises:
            ConflictError: If the email and/or username is already registered,
                scoped to the colliding field(s)
        """
        taken = await self._taken_fields(data.email, data.username)
        if taken:
            raise ConflictError(error_code="USR_001", field_errors=taken)

        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            username=data.username,
            password_hash=hash_password(data.password),
            login_status=LoginStatus.LOGGED_OUT.value,
        )

        try:
            created_user = await self.user_repo.create(user)
        except IntegrityError as exc:
            await self.user_repo.rollback()
            if not is_unique_violation(exc):
                raise
            # Lost a race with a concurrent sign-up; report which field collided.
            taken = await self._taken_fields(data.email, data.username)
            raise ConflictError(
                error_code="USR_001",
                field_errors=taken or {"email": [EMAIL_TAKEN], "username": [USERNAME_TAKEN]},
            )

        logger.info("User registered", extra={"user_id": str(created_user.id)})
        return created_user

    async def authenticate(self, identifier: str, password: str) -> User:
        """
        Check credentials and mark the user as logged in.

        Args:
            identifier: Username or email, matched exactly as stored
            password: Plain text password

        Returns:
            The authenticated user

        Raises:
            UnauthenticatedError: If the user is unknown or the password is
                wrong (the two cases are indistinguishable)
        """
        user = await self.user_repo.get_by_username_or_email(identifier)
        if user is None or not verify_password(password, user.password_hash):
            raise UnauthenticatedError(error_code="AUTH_001")

        user = await self.user_repo.save(
            user,
            {
                "login_status": LoginStatus.LOGGED_IN.value,
                "last_login_at": datetime.now(timezone.utc),
            },
        )
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return user

    async def end_session(self, session_user: SessionUser | None) -> None:
        """
        Mark the session's user as logged out, if it still exists.

        Args:
            session_user: Snapshot from the cookie, or None
        """
        if session_user is None:
            return

        user = await self.user_repo.get_by_id(session_user.id)
        if user is None:
            return

        await self.user_repo.save(
            user,
            {
                "login_status": LoginStatus.LOGGED_OUT.value,
                "last_logout_at": datetime.now(timezone.utc),
            },
        )
        logger.info("User logged out", extra={"user_id": str(user.id)})
