"""Infrastructure errors — failures reported by the storage backend."""

from __future__ import annotations

from typing import Any

from uow_template.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a usage error."""

    default_code = "infrastructure_error"


class BackendUnavailableError(InfrastructureError):
    """``begin()`` could not obtain a transaction handle.

    Nothing was staged or executed.
    """

    default_code = "backend_unavailable"

    def __init__(
        self,
        backend: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not open a transaction on '{backend}'", **kwargs)
        self.backend = backend


class PersistFailedError(InfrastructureError):
    """A ``persist_*`` operation failed.

    In auto-commit mode this aborts the single call; during a batch replay it
    aborts the whole batch.
    """

    default_code = "persist_failed"

    def __init__(
        self,
        kind: Any,
        entity: Any,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        kind_name = getattr(kind, "value", kind)
        super().__init__(
            message or f"{kind_name} of {type(entity).__name__} failed",
            **kwargs,
        )
        self.detail.setdefault("kind", kind_name)
        self.detail.setdefault("entity", repr(entity))
        self.kind = kind
        self.entity = entity


class CommitFailedError(InfrastructureError):
    """The backend refused to finalise an otherwise successful unit of work."""

    default_code = "commit_failed"

    def __init__(self, message: str = "Commit rejected by backend", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "BackendUnavailableError",
    "CommitFailedError",
    "InfrastructureError",
    "PersistFailedError",
]
