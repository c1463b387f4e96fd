"""Testing fakes – in-memory doubles for the storage backend."""
from uow_template.testing.fakes.uow import (
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
