"""SQLAlchemy adapter – SqlAlchemyUowObject entity adapter.

Wraps a plain mapped ORM instance so it satisfies
:class:`~uow_template.kernel.uow.UowObject` for an ``AsyncSession`` handle.
The wrapped model class is left untouched.
"""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import make_transient

from uow_template.kernel.errors import NotFoundError
from uow_template.kernel.uow import UowObject

TModel = TypeVar("TModel")


class SqlAlchemyUowObject(UowObject[AsyncSession], Generic[TModel]):
    """Persist a mapped instance through the session handed in by the coordinator."""

    def __init__(self, instance: TModel) -> None:
        self._instance = instance
        self._mapper = sa_inspect(type(instance))
        self._pk_keys = frozenset(
            self._mapper.get_property_by_column(col).key for col in self._mapper.primary_key
        )

    @property
    def instance(self) -> TModel:
        return self._instance

    @property
    def identity(self) -> tuple[Any, ...]:
        """Primary-key values of the wrapped instance."""
        return tuple(self._mapper.primary_key_from_instance(self._instance))

    async def persist_create(self, tx: AsyncSession) -> None:
        # a detached instance keeps its identity key and would be re-attached
        # without an INSERT
        if sa_inspect(self._instance).detached:
            make_transient(self._instance)
        tx.add(self._instance)
        await tx.flush()

    async def persist_update(self, tx: AsyncSession) -> None:
        row = await self._load(tx)
        for attr in self._mapper.column_attrs:
            if attr.key in self._pk_keys:
                continue
            setattr(row, attr.key, getattr(self._instance, attr.key))
        await tx.flush()

    async def persist_delete(self, tx: AsyncSession) -> None:
        row = await self._load(tx)
        await tx.delete(row)
        await tx.flush()

    async def _load(self, tx: AsyncSession) -> Any:
        row = await tx.get(self._mapper.class_, self.identity)
        if row is None:
            raise NotFoundError(self._mapper.class_.__name__, _format_identity(self.identity))
        return row

    def __repr__(self) -> str:
        return f"SqlAlchemyUowObject({self._mapper.class_.__name__}, identity={_format_identity(self.identity)!r})"


def _format_identity(identity: tuple[Any, ...]) -> Any:
    return identity[0] if len(identity) == 1 else identity


def to_uow_object(instance: Any) -> UowObject[AsyncSession]:
    """Return *instance* as a ``UowObject``, wrapping mapped instances."""
    if isinstance(instance, UowObject):
        return instance
    return SqlAlchemyUowObject(instance)


__all__ = ["SqlAlchemyUowObject", "to_uow_object"]
