"""Base repository with generic CRUD operations."""
from typing import Generic, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fanclub.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the integrity error comes from a unique index or constraint."""
    message = str(exc.orig if exc.orig is not None else exc).lower()
    return "unique" in message or "duplicate" in message


class BaseRepository(Generic[T]):
    """Generic repository providing CRUD operations for any model."""

    def __init__(self, db: AsyncSession, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: UUID) -> T | None:
        """Get a single record by ID."""
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def create(self, obj: T) -> T:
        """Create a new record."""
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def save(self, obj: T, data: dict) -> T:
        """Apply provided data to an already loaded record and commit."""
        for key, value in data.items():
            if hasattr(obj, key):
                setattr(obj, key, value)

        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, id: UUID, data: dict) -> T | None:
        """Update a record by ID with provided data."""
        obj = await self.get_by_id(id)
        if not obj:
            return None
        return await self.save(obj, data)

    async def remove(self, obj: T) -> None:
        """Delete an already loaded record."""
        await self.db.delete(obj)
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
