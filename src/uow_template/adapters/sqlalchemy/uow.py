"""SQLAlchemy adapter – SqlAlchemyUnitOfWork."""
from __future__ import annotations

from typing import Any, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from uow_template.kernel.uow import Uow


class SqlAlchemyUnitOfWork(Uow[AsyncSession]):
    """Unit of work whose transaction handle is an ``AsyncSession``.

    Each handle is a fresh session with an open transaction; it is closed
    once committed or rolled back.

    Usage::

        uow = SqlAlchemyUnitOfWork(SqlAlchemySessionFactory(url))
        async with uow:
            await uow.mark_create(to_uow_object(ItemModel(id=1, name="first")))
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        super().__init__()
        self._factory = session_factory

    async def begin(self) -> AsyncSession:
        session = self._factory()
        try:
            await session.begin()
            # checks out a connection so an unreachable database fails here
            await session.connection()
        except BaseException:
            await session.close()
            raise
        return session

    async def commit(self, tx: AsyncSession) -> None:
        await tx.commit()
        await tx.close()

    async def rollback(self, tx: AsyncSession) -> None:
        try:
            await tx.rollback()
        finally:
            await tx.close()


__all__ = ["SqlAlchemyUnitOfWork"]
