"""User model for authentication and reminder ownership."""
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fanclub.models.base import BaseModel


class LoginStatus(str, Enum):
    LOGGED_IN = "logged-in"
    LOGGED_OUT = "logged-out"


class User(BaseModel):
    """Registered fan club member."""

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    # Stored lower-cased so the unique index is case-insensitive in practice.
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    username: Mapped[str] = mapped_column(String(30), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    login_status: Mapped[str] = mapped_column(
        String(20), default=LoginStatus.LOGGED_OUT.value, nullable=False
    )
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_logout_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    reminders: Mapped[list["Reminder"]] = relationship(
        "Reminder", back_populates="user", lazy="raise"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username}, login_status={self.login_status})>"
