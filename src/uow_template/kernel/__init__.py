"""Kernel – framework-agnostic building blocks."""

from uow_template.kernel.errors import (
    ApplicationError,
    BackendUnavailableError,
    BaseError,
    CommitFailedError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidStateError,
    NotFoundError,
    PersistFailedError,
)
from uow_template.kernel.uow import OperationKind, PendingOperation, Uow, UowObject, UowState

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
    "OperationKind",
    "PendingOperation",
    "PersistFailedError",
    "Uow",
    "UowObject",
    "UowState",
]
