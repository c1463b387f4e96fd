"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from uow_template.config.settings import UowSettings


class SqlAlchemySessionFactory:
    """Creates async SQLAlchemy sessions from an engine URL.

    Sessions never expire attributes on commit, so entities stay readable
    after the unit of work that persisted them has closed its session.
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        self._engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: UowSettings, **engine_kwargs: Any) -> "SqlAlchemySessionFactory":
        return cls(settings.database_url, echo=settings.echo, **engine_kwargs)

    @property
    def engine(self) -> Any:
        return self._engine

    def __call__(self) -> AsyncSession:
        return self._session_factory()

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
