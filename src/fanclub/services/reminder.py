"""Reminder service: user-scoped CRUD with uniqueness and date rules."""

import logging
from collections.abc import Callable
from datetime import date
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from fanclub.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from fanclub.models.reminder import Reminder
from fanclub.repositories.base import is_unique_violation
from fanclub.repositories.reminder import ReminderRepository
from fanclub.schemas.reminder import ReminderCreate, ReminderUpdate

logger = logging.getLogger(__name__)

REMINDER_IN_PAST = "Reminder date cannot be in the past"
REMINDER_AFTER_MATCH = "Reminder date cannot be after the match date"


def check_reminder_window(reminder_date: date, game_date: date, today: date) -> None:
    """
    Enforce ``today <= reminder_date <= game_date`` (both bounds inclusive).

    Raises:
        InvalidInputError: Scoped to ``reminderDate`` when either bound is broken
    """
    messages = []
    if reminder_date < today:
        messages.append(REMINDER_IN_PAST)
    if reminder_date > game_date:
        messages.append(REMINDER_AFTER_MATCH)
    if messages:
        raise InvalidInputError(
            error_code="VAL_002",
            details={"reminder_date": reminder_date.isoformat(), "game_date": game_date.isoformat()},
            field_errors={"reminderDate": messages},
        )


class ReminderService:
    """Service layer for reminder operations.

    The caller id always comes from the resolved session; a reminder owned by
    another user is reported exactly like a missing one.
    """

    def __init__(self, reminder_repo: ReminderRepository, today: Callable[[], date] = date.today):
        """
        Args:
            reminder_repo: Reminder repository
            today: Clock used for the date window
        """
        self.reminder_repo = reminder_repo
        self.today = today

    async def list_reminders(self, user_id: UUID) -> list[Reminder]:
        return await self.reminder_repo.get_all_by_user(user_id)

    async def create_reminder(self, user_id: UUID, data: ReminderCreate) -> Reminder:
        """
        Create the caller's reminder for a match.

        Raises:
            InvalidInputError: Reminder date outside the window
            ConflictError: A reminder already exists for (caller, match)
        """
        check_reminder_window(data.reminder_date, data.game_date, self.today())

        if await self.reminder_repo.exists_for_user(user_id, data.match_id):
            raise ConflictError(details={"match_id": data.match_id})

        reminder = Reminder(
            user_id=user_id,
            match_id=data.match_id,
            home_team=data.home_team,
            away_team=data.away_team,
            league=data.league,
            game_date=data.game_date,
            game_time=data.game_time or "TBD",
            reminder_title=data.reminder_title,
            reminder_note=data.reminder_note or "",
            reminder_date=data.reminder_date,
        )

        try:
            created = await self.reminder_repo.create(reminder)
        except IntegrityError as exc:
            await self.reminder_repo.rollback()
            if not is_unique_violation(exc):
                raise
            # The unique (user_id, match_id) constraint caught a concurrent create.
            raise ConflictError(details={"match_id": data.match_id})

        logger.info(
            "Reminder created",
            extra={"user_id": str(user_id), "match_id": data.match_id},
        )
        return created

    async def update_reminder(self, user_id: UUID, data: ReminderUpdate) -> Reminder:
        """
        Change title, note and reminder date of the caller's reminder.

        Raises:
            NotFoundError: No reminder for (caller, match)
            InvalidInputError: Reminder date outside the window
        """
        reminder = await self.reminder_repo.get_by_user_and_match(user_id, data.match_id)
        if reminder is None:
            raise NotFoundError(details={"match_id": data.match_id})

        check_reminder_window(data.reminder_date, reminder.game_date, self.today())

        return await self.reminder_repo.save(
            reminder,
            {
                "reminder_title": data.reminder_title,
                "reminder_note": data.reminder_note or "",
                "reminder_date": data.reminder_date,
            },
        )

    async def delete_reminder(self, user_id: UUID, match_id: str) -> None:
        """
        Delete the caller's reminder for a match.

        Raises:
            NotFoundError: No reminder for (caller, match), including a second delete
        """
        reminder = await self.reminder_repo.get_by_user_and_match(user_id, match_id)
        if reminder is None:
            raise NotFoundError(details={"match_id": match_id})

        await self.reminder_repo.remove(reminder)
        logger.info("Reminder deleted", extra={"user_id": str(user_id), "match_id": match_id})
