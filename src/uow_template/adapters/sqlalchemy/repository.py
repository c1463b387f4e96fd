"""SQLAlchemy adapter – SqlAlchemyUowRepository."""
from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from uow_template.adapters.sqlalchemy.model import to_uow_object
from uow_template.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork
from uow_template.kernel.errors import NotFoundError

TModel = TypeVar("TModel")


class SqlAlchemyUowRepository(SqlAlchemyUnitOfWork, Generic[TModel]):
    """Unit of work bound to one mapped model.

    Writes go through the coordinator, so they auto-commit or join the open
    unit of work. Reads use a fresh session and only ever see committed
    state.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession], model_class: type[TModel]) -> None:
        super().__init__(session_factory)
        self._model = model_class

    async def create(self, instance: TModel) -> None:
        await self.mark_create(to_uow_object(instance))

    async def update(self, instance: TModel) -> None:
        await self.mark_update(to_uow_object(instance))

    async def delete(self, instance: TModel) -> None:
        await self.mark_delete(to_uow_object(instance))

    async def get(self, identity: Any) -> TModel | None:
        async with self._factory() as session:
            return await session.get(self._model, identity)

    async def get_or_raise(self, identity: Any) -> TModel:
        obj = await self.get(identity)
        if obj is None:
            raise NotFoundError(self._model.__name__, identity)
        return obj

    async def find_all(self) -> list[TModel]:
        async with self._factory() as session:
            result = await session.execute(select(self._model))
            return list(result.scalars().all())


__all__ = ["SqlAlchemyUowRepository"]
