"""Pydantic schemas for reminder endpoints."""

from datetime import date, datetime
from uuid import UUID

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from fanclub.schemas.common import CamelModel


class _ReminderInput(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )


class ReminderCreate(_ReminderInput):
    """Request model for creating a reminder."""

    match_id: str = Field(..., min_length=1, max_length=64, description="External match identifier")
    home_team: str = Field(..., min_length=1, max_length=255)
    away_team: str = Field(..., min_length=1, max_length=255)
    league: str = Field(..., min_length=1, max_length=255)
    game_date: date = Field(..., description="Match date (YYYY-MM-DD)")
    game_time: str | None = Field(None, max_length=16, description="Kick-off time, TBD when unknown")
    reminder_title: str = Field(..., min_length=1, max_length=255)
    reminder_note: str | None = Field(None, description="Optional free-text note")
    reminder_date: date = Field(..., description="Between today and the match date")


class ReminderUpdate(_ReminderInput):
    """Request model for updating a reminder. Only title, note and date can change."""

    match_id: str = Field(..., min_length=1, max_length=64)
    reminder_title: str = Field(..., min_length=1, max_length=255)
    reminder_note: str | None = None
    reminder_date: date


class ReminderResponse(CamelModel):
    """Reminder data for API responses."""

    id: UUID
    user_id: UUID
    match_id: str
    home_team: str
    away_team: str
    league: str
    game_date: date
    game_time: str
    reminder_title: str
    reminder_note: str
    reminder_date: date
    created_at: datetime
    updated_at: datetime


class ReminderListResult(CamelModel):
    """Reminders owned by the caller, soonest first."""

    reminders: list[ReminderResponse]


class ReminderResult(CamelModel):
    """Single reminder with an acknowledgement."""

    success: bool = True
    message: str
    reminder: ReminderResponse
