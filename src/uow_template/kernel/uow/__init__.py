"""Unit of work – coordinator, entity contract and operation queue."""

from uow_template.kernel.uow.contract import TTx, UowObject
from uow_template.kernel.uow.coordinator import Uow
from uow_template.kernel.uow.operation import OperationKind, PendingOperation
from uow_template.kernel.uow.state import UowState

__all__ = [
    "OperationKind",
    "PendingOperation",
    "TTx",
    "Uow",
    "UowObject",
    "UowState",
]
