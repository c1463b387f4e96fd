"""Unit of work – Uow coordinator.

The coordinator has two states. While ``IDLE`` every ``mark_*`` call runs at
once in its own one-operation transaction (auto-commit). Between
:meth:`Uow.begin_work` and :meth:`Uow.commit_work` the calls are only queued,
then replayed in order inside a single transaction that is committed when
every operation succeeds and rolled back as soon as one fails.

A coordinator instance is not safe for concurrent use by several tasks;
create one per request or session.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import Any, Generic

from uow_template.kernel.errors import (
    BackendUnavailableError,
    CommitFailedError,
    InvalidStateError,
    PersistFailedError,
)
from uow_template.kernel.uow.contract import TTx, UowObject
from uow_template.kernel.uow.operation import OperationKind, PendingOperation
from uow_template.kernel.uow.state import UowState
from uow_template.observability.logging import get_logger


class Uow(abc.ABC, Generic[TTx]):
    """Generic unit-of-work coordinator.

    Subclasses supply the three backend hooks :meth:`begin`, :meth:`commit`
    and :meth:`rollback`; they are the only place a concrete storage engine is
    touched.

    Usage::

        await uow.mark_create(entity)        # auto-commit

        await uow.begin_work()
        await uow.mark_create(first)
        await uow.mark_update(second)
        await uow.mark_delete(third)
        await uow.commit_work()              # all or nothing

        async with uow:                      # same as begin_work/commit_work
            await uow.mark_create(entity)
    """

    def __init__(self) -> None:
        self._state = UowState.IDLE
        self._tx: TTx | None = None
        self._queue: list[PendingOperation[TTx]] = []
        self._log = get_logger(__name__, uow=type(self).__name__)

    # ------------------------------------------------------------------
    # Backend hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def begin(self) -> TTx:
        """Open a backend transaction and return its handle."""

    @abc.abstractmethod
    async def commit(self, tx: TTx) -> None:
        """Commit the transaction behind *tx*."""

    @abc.abstractmethod
    async def rollback(self, tx: TTx) -> None:
        """Roll back the transaction behind *tx*."""

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def state(self) -> UowState:
        return self._state

    @property
    def is_working(self) -> bool:
        return self._state is UowState.WORKING

    @property
    def pending(self) -> tuple[PendingOperation[TTx], ...]:
        """Queued operations, oldest first."""
        return tuple(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def begin_work(self) -> None:
        """Open a unit of work; later ``mark_*`` calls are queued.

        Raises:
            InvalidStateError: A unit of work is already open.
            BackendUnavailableError: No transaction handle could be obtained.
        """
        if self._state is UowState.WORKING:
            raise InvalidStateError(
                "Unit of work is already open; call commit_work() or rollback_work() first",
                state=self._state.value,
            )
        tx = await self._open()
        self._tx = tx
        self._queue = []
        self._state = UowState.WORKING
        self._log.debug("uow.work_begun")

    async def commit_work(self) -> None:
        """Replay the queued operations in one transaction and commit it.

        The first failing operation stops the replay and the transaction is
        rolled back. The coordinator is ``IDLE`` with an empty queue
        afterwards, whatever the outcome.

        Raises:
            InvalidStateError: No unit of work is open.
            PersistFailedError: A queued operation failed.
            CommitFailedError: The backend refused the commit.
        """
        tx, operations = self._detach("commit_work")
        await self._execute(tx, operations, mode="batch")

    async def rollback_work(self) -> None:
        """Discard the open unit of work without replaying it.

        Raises:
            InvalidStateError: No unit of work is open.
        """
        tx, operations = self._detach("rollback_work")
        await self._rollback_quietly(tx, reason="abandoned", discarded=len(operations))

    # ------------------------------------------------------------------
    # Marking
    # ------------------------------------------------------------------

    async def mark_create(self, entity: UowObject[TTx]) -> None:
        await self._mark(OperationKind.CREATE, entity)

    async def mark_update(self, entity: UowObject[TTx]) -> None:
        await self._mark(OperationKind.UPDATE, entity)

    async def mark_delete(self, entity: UowObject[TTx]) -> None:
        await self._mark(OperationKind.DELETE, entity)

    # ------------------------------------------------------------------
    # Async context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "Uow[TTx]":
        await self.begin_work()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if not self.is_working:
            # finished explicitly inside the block
            return
        if exc_type is None:
            await self.commit_work()
        else:
            await self.rollback_work()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _mark(self, kind: OperationKind, entity: UowObject[TTx]) -> None:
        operation = PendingOperation(kind, entity)
        if self._state is UowState.WORKING:
            self._queue.append(operation)
            self._log.debug("uow.operation_queued", kind=kind.value, pending=len(self._queue))
            return
        tx = await self._open()
        await self._execute(tx, (operation,), mode="auto")

    def _detach(self, action: str) -> tuple[TTx, list[PendingOperation[TTx]]]:
        if self._state is not UowState.WORKING or self._tx is None:
            raise InvalidStateError(
                f"{action}() called without an open unit of work; call begin_work() first",
                state=self._state.value,
            )
        tx, operations = self._tx, self._queue
        self._tx = None
        self._queue = []
        self._state = UowState.IDLE
        return tx, operations

    async def _open(self) -> TTx:
        try:
            return await self.begin()
        except BackendUnavailableError:
            raise
        except Exception as exc:
            raise BackendUnavailableError(type(self).__name__, cause=exc) from exc

    async def _execute(
        self,
        tx: TTx,
        operations: Sequence[PendingOperation[TTx]],
        *,
        mode: str,
    ) -> None:
        try:
            for operation in operations:
                await self._apply(tx, operation)
            await self._commit(tx)
        except BaseException as exc:
            await self._rollback_quietly(tx, reason=getattr(exc, "code", type(exc).__name__))
            raise
        self._log.info("uow.work_committed", operations=len(operations), mode=mode)

    async def _apply(self, tx: TTx, operation: PendingOperation[TTx]) -> None:
        try:
            await operation.apply(tx)
        except PersistFailedError:
            raise
        except Exception as exc:
            raise PersistFailedError(operation.kind, operation.entity, cause=exc) from exc
        self._log.debug("uow.operation_applied", kind=operation.kind.value)

    async def _commit(self, tx: TTx) -> None:
        try:
            await self.commit(tx)
        except CommitFailedError:
            raise
        except Exception as exc:
            raise CommitFailedError(cause=exc) from exc

    async def _rollback_quietly(self, tx: TTx, **context: Any) -> None:
        try:
            await self.rollback(tx)
        except Exception:  # noqa: BLE001
            self._log.error("uow.rollback_failed", exc_info=True, **context)
            return
        self._log.warning("uow.work_rolled_back", **context)


__all__ = ["Uow"]
