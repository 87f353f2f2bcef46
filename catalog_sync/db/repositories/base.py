from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from catalog_sync.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class Repository(Generic[ModelType]):
    """Data access for one mapped table, bound to the caller's session.

    The session (and so the transaction) belongs to the caller; the repository
    only flushes, it never commits or rolls back.
    """

    def __init__(self, db: AsyncSession, model: Type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def find_one(self, **criteria: Any) -> Optional[ModelType]:
        result = await self.db.execute(
            select(self.model).filter_by(**criteria).limit(1)
        )
        return result.scalar_one_or_none()

    def build(self, **values: Any) -> ModelType:
        return self.model(**values)

    async def save(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def remove(self, entity: ModelType) -> None:
        await self.db.delete(entity)
        await self.db.flush()
