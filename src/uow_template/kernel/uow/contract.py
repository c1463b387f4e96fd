"""Unit of work – entity capability contract."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

TTx = TypeVar("TTx")


class UowObject(abc.ABC, Generic[TTx]):
    """Port: an entity able to persist itself inside a backend transaction.

    ``TTx`` is the backend's transaction handle type; the entity and the
    :class:`~uow_template.kernel.uow.coordinator.Uow` it is marked on must
    agree on it.

    Implementations run strictly inside the handle they are given and must
    never commit or roll it back. Failure is signalled by raising.
    """

    @abc.abstractmethod
    async def persist_create(self, tx: TTx) -> None:
        """Insert the entity's current field values as a new record."""

    @abc.abstractmethod
    async def persist_update(self, tx: TTx) -> None:
        """Overwrite the record matching the entity's identity."""

    @abc.abstractmethod
    async def persist_delete(self, tx: TTx) -> None:
        """Remove the record matching the entity's identity."""


__all__ = ["TTx", "UowObject"]
