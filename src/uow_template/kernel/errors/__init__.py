"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError         (application.py)
    │   └── InvalidStateError
    └── InfrastructureError      (infrastructure.py)
        ├── BackendUnavailableError
        ├── PersistFailedError
        └── CommitFailedError
"""

from uow_template.kernel.errors.application import ApplicationError, InvalidStateError
from uow_template.kernel.errors.base import BaseError
from uow_template.kernel.errors.domain import ConflictError, DomainError, NotFoundError
from uow_template.kernel.errors.infrastructure import (
    BackendUnavailableError,
    CommitFailedError,
    InfrastructureError,
    PersistFailedError,
)

__all__ = [
    "ApplicationError",
    "BackendUnavailableError",
    "BaseError",
    "CommitFailedError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvalidStateError",
    "NotFoundError",
    "PersistFailedError",
]
