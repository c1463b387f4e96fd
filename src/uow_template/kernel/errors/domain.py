"""Domain errors — entity state that rejects the requested write."""

from __future__ import annotations

from typing import Any

from uow_template.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an entity cannot be persisted as requested."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The record addressed by an update or delete does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The write conflicts with existing state (e.g. duplicate identity)."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
]
