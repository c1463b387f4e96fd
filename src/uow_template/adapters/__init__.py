"""Adapters – concrete storage backends for the unit-of-work coordinator.

Each adapter is imported explicitly from its own sub-package::

    from uow_template.adapters.sqlalchemy import SqlAlchemyUnitOfWork
"""
