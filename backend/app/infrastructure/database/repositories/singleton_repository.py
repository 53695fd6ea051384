"""SQLAlchemy adapter for fixed-key singleton records."""

from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import SingletonRepository
from app.domain.entities import ContactInfo, ThemeSettings
from app.infrastructure.database.base import Base
from app.infrastructure.database.models import ContactInfoModel, ThemeSettingsModel

EntityT = TypeVar("EntityT")


class SQLAlchemySingletonRepository(SingletonRepository[EntityT], Generic[EntityT]):
    """Upsert-only repository: ``save`` updates the row for ``entity.id`` or inserts it."""

    model: ClassVar[type[Base]]
    entity_cls: ClassVar[type]

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: Any) -> EntityT:
        return self.entity_cls(
            **{column.key: getattr(model, column.key) for column in self.model.__table__.columns}
        )

    def _columns(self, entity: EntityT) -> dict[str, Any]:
        values = {}
        for column in self.model.__table__.columns:
            value = getattr(entity, column.key)
            values[column.key] = value.value if isinstance(value, Enum) else value
        return values

    async def get(self, key: str) -> EntityT | None:
        model = await self._session.get(self.model, key)
        return self._to_entity(model) if model else None

    async def save(self, entity: EntityT) -> EntityT:
        model = await self._session.get(self.model, entity.id)
        if model is None:
            model = self.model(**self._columns(entity))
            self._session.add(model)
        else:
            for name, value in self._columns(entity).items():
                setattr(model, name, value)
        await self._session.flush()
        return self._to_entity(model)

    async def commit(self) -> None:
        await self._session.commit()


class SQLAlchemyThemeSettingsRepository(SQLAlchemySingletonRepository[ThemeSettings]):
    model = ThemeSettingsModel
    entity_cls = ThemeSettings


class SQLAlchemyContactInfoRepository(SQLAlchemySingletonRepository[ContactInfo]):
    model = ContactInfoModel
    entity_cls = ContactInfo
