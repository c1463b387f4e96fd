"""Application-layer errors — misuse of the coordinator API."""

from __future__ import annotations

from typing import Any

from uow_template.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidStateError(ApplicationError):
    """A lifecycle call is not valid in the coordinator's current state.

    Raised for ``begin_work()`` while a unit of work is already open, and for
    ``commit_work()`` / ``rollback_work()`` while none is.
    """

    default_code = "invalid_state"

    def __init__(
        self,
        message: str,
        *,
        state: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.state = state


__all__ = [
    "ApplicationError",
    "InvalidStateError",
]
