"""Reminder repository with user-scoped queries."""
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fanclub.models.reminder import Reminder
from fanclub.repositories.base import BaseRepository


class ReminderRepository(BaseRepository[Reminder]):
    """Repository for Reminder model.

    Every lookup is filtered by owner, so a reminder that belongs to someone
    else is indistinguishable from one that does not exist.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(db, Reminder)

    async def get_by_user_and_match(self, user_id: UUID, match_id: str) -> Reminder | None:
        """Get the reminder for a match only if it belongs to the user."""
        result = await self.db.execute(
            select(Reminder).where(Reminder.user_id == user_id, Reminder.match_id == match_id)
        )
        return result.scalar_one_or_none()

    async def get_all_by_user(self, user_id: UUID) -> list[Reminder]:
        """Get all reminders for a user, soonest reminder date first."""
        result = await self.db.execute(
            select(Reminder)
            .where(Reminder.user_id == user_id)
            .order_by(Reminder.reminder_date.asc(), Reminder.created_at.asc())
        )
        return list(result.scalars().all())

    async def exists_for_user(self, user_id: UUID, match_id: str) -> bool:
        result = await self.db.execute(
            select(Reminder.id).where(Reminder.user_id == user_id, Reminder.match_id == match_id)
        )
        return result.scalar_one_or_none() is not None
