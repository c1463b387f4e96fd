"""Unit of work – OperationKind and PendingOperation."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Generic

from uow_template.kernel.uow.contract import TTx, UowObject


class OperationKind(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclasses.dataclass(frozen=True)
class PendingOperation(Generic[TTx]):
    """A create/update/delete intention captured while a unit of work is open."""

    kind: OperationKind
    entity: UowObject[TTx]

    async def apply(self, tx: TTx) -> None:
        """Run the matching ``persist_*`` of the entity inside *tx*."""
        if self.kind is OperationKind.CREATE:
            await self.entity.persist_create(tx)
        elif self.kind is OperationKind.UPDATE:
            await self.entity.persist_update(tx)
        else:
            await self.entity.persist_delete(tx)


__all__ = ["OperationKind", "PendingOperation"]
