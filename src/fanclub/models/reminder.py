"""Reminder model: one user's note about one externally sourced match."""
from datetime import date
from uuid import UUID

from sqlalchemy import Date, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fanclub.models.base import BaseModel


class Reminder(BaseModel):
    """A reminder scoped to a (user, match) pair."""

    __tablename__ = "reminders"
    __table_args__ = (
        UniqueConstraint("user_id", "match_id", name="uq_reminders_user_id_match_id"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    match_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # Match identity, copied from the external fixture at creation time
    home_team: Mapped[str] = mapped_column(String(255), nullable=False)
    away_team: Mapped[str] = mapped_column(String(255), nullable=False)
    league: Mapped[str] = mapped_column(String(255), nullable=False)
    game_date: Mapped[date] = mapped_column(Date, nullable=False)
    game_time: Mapped[str] = mapped_column(String(16), default="TBD", nullable=False)

    # Mutable part
    reminder_title: Mapped[str] = mapped_column(String(255), nullable=False)
    reminder_note: Mapped[str] = mapped_column(Text, default="", nullable=False)
    reminder_date: Mapped[date] = mapped_column(Date, nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="reminders")

    def __repr__(self) -> str:
        return f"<Reminder(id={self.id}, user_id={self.user_id}, match_id={self.match_id})>"
