"""Generic SQLAlchemy adapter for the DocumentRepository port.

Concrete repositories declare the ORM ``model``, the columns free-text search
runs over and the default ordering column, and implement ``_to_entity``.
Entity attributes map one-to-one onto columns; enum members are stored by
value.
"""

from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import DocumentRepository, ListQuery
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.base import Base

EntityT = TypeVar("EntityT")


def _column_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return list(value)
    return value


class SQLAlchemyDocumentRepository(DocumentRepository[EntityT], Generic[EntityT]):
    """Implements the DocumentRepository port using SQLAlchemy async sessions."""

    model: ClassVar[type[Base]]
    entity_name: ClassVar[str]
    search_fields: ClassVar[tuple[str, ...]] = ()
    order_field: ClassVar[str] = "created_at"
    newest_first: ClassVar[bool] = False

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: Any) -> EntityT:
        """Map ORM model → domain entity."""
        raise NotImplementedError

    def _columns(self, entity: EntityT) -> dict[str, Any]:
        """Map domain entity → column values."""
        return {
            column.key: _column_value(getattr(entity, column.key))
            for column in self.model.__table__.columns
        }

    def _where(self, stmt, filters: dict[str, Any] | None, search: str | None):
        for name, value in (filters or {}).items():
            stmt = stmt.where(getattr(self.model, name) == _column_value(value))
        if search and self.search_fields:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(*(getattr(self.model, name).ilike(pattern) for name in self.search_fields))
            )
        return stmt

    def _ordering(self, newest_first: bool | None):
        column = getattr(self.model, self.order_field)
        descending = self.newest_first if newest_first is None else newest_first
        if descending:
            return column.desc(), self.model.id.desc()
        return column.asc(), self.model.id.asc()

    async def get_by_id(self, entity_id: str) -> EntityT | None:
        result = await self._session.get(self.model, entity_id)
        return self._to_entity(result) if result else None

    async def get_one_by(self, field_name: str, value: Any) -> EntityT | None:
        stmt = (
            select(self.model)
            .where(getattr(self.model, field_name) == _column_value(value))
            .order_by(*self._ordering(None))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def get_all(self, query: ListQuery) -> list[EntityT]:
        stmt = self._where(select(self.model), query.filters, query.search)
        stmt = stmt.order_by(*self._ordering(query.newest_first)).offset(query.skip)
        if query.limit is not None:
            stmt = stmt.limit(query.limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(
        self, filters: dict[str, Any] | None = None, search: str | None = None
    ) -> int:
        stmt = self._where(select(func.count()).select_from(self.model), filters, search)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def distinct_values(self, field_name: str) -> list[str]:
        column = getattr(self.model, field_name)
        stmt = select(column).where(column != "").distinct().order_by(column)
        result = await self._session.execute(stmt)
        return [value for value in result.scalars().all() if value]

    async def create(self, entity: EntityT) -> EntityT:
        model = self.model(**self._columns(entity))
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity: EntityT) -> EntityT:
        model = await self._session.get(self.model, entity.id)
        if model is None:
            raise EntityNotFoundError(self.entity_name, entity.id)
        for name, value in self._columns(entity).items():
            if name != "id":
                setattr(model, name, value)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, entity_id: str) -> bool:
        model = await self._session.get(self.model, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def commit(self) -> None:
        await self._session.commit()
