"""User repository for credential lookups."""
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fanclub.models.user import User
from fanclub.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model with authentication queries."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_by_username_or_email(self, identifier: str) -> User | None:
        """Find user whose username or email equals the identifier (used for login)."""
        result = await self.db.execute(
            select(User)
            .where(or_(User.username == identifier, User.email == identifier))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        result = await self.db.execute(select(User.id).where(User.email == email))
        return result.scalar_one_or_none() is not None

    async def username_exists(self, username: str) -> bool:
        """Check if username is already taken."""
        result = await self.db.execute(select(User.id).where(User.username == username))
        return result.scalar_one_or_none() is not None
