"""
uow_template – generic unit-of-work transaction coordinator.

Import path convention::

    from uow_template.kernel.uow import Uow, UowObject
    from uow_template.kernel.errors import PersistFailedError
    from uow_template.adapters.sqlalchemy import SqlAlchemyUnitOfWork, to_uow_object

Bootstrap::

    settings = DotenvSettingsLoader().load(UowSettings)
    JsonLoggerFactory.from_settings(settings)
    uow = SqlAlchemyUnitOfWork(SqlAlchemySessionFactory.from_settings(settings))
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
