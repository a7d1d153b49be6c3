"""Pydantic schemas for sign-up, sign-in and session endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, EmailStr, Field, ValidationInfo, field_validator

from fanclub.schemas.common import CamelModel


class SignUpRequest(CamelModel):
    """Request model for user registration."""

    first_name: str = Field(..., min_length=1, max_length=50, description="First name")
    last_name: str = Field(..., min_length=1, max_length=50, description="Last name")
    email: EmailStr = Field(..., description="User email address")
    username: str = Field(..., min_length=3, max_length=30, description="Username (3-30 characters)")
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    confirm_password: str = Field(..., description="Must equal password")

    @field_validator("first_name", "last_name", "username", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise ValueError("Passwords don't match")
        return value


class SignUpResponse(CamelModel):
    """Response model for a successful registration."""

    success: bool = True


class LoginRequest(CamelModel):
    """Request model for user login.

    The identifier is accepted as ``usernameOrEmail`` or ``username``.
    """

    username_or_email: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("usernameOrEmail", "username", "username_or_email"),
        description="Username or email address",
    )
    password: str = Field(..., min_length=1, description="User password")


class SessionUser(CamelModel):
    """Public user fields carried in the session cookie (never the password hash)."""

    id: UUID
    username: str
    first_name: str
    last_name: str
    email: str
    login_status: str
    last_login_at: datetime | None = None


class LoginResponse(CamelModel):
    """Response model for a successful login."""

    success: bool = True
    message: str = "Login successful"
    user: SessionUser


class SessionResponse(CamelModel):
    """Response model for the current session."""

    user: SessionUser
