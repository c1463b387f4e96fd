"""SQLAlchemy adapter – async session factory, unit of work, entity adapter, repository."""
from uow_template.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from uow_template.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork
from uow_template.adapters.sqlalchemy.model import SqlAlchemyUowObject, to_uow_object
from uow_template.adapters.sqlalchemy.repository import SqlAlchemyUowRepository

__all__ = [
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyUowObject",
    "SqlAlchemyUowRepository",
    "to_uow_object",
]
