"""Testing support – in-memory backend fakes.

Hypothesis strategies live in :mod:`uow_template.testing.generators` and
need the ``test`` extra.
"""

from uow_template.testing.fakes import (
    InMemoryDatabase,
    InMemoryRecord,
    InMemoryTransaction,
    InMemoryUnitOfWork,
)

__all__ = [
    "InMemoryDatabase",
    "InMemoryRecord",
    "InMemoryTransaction",
    "InMemoryUnitOfWork",
]
