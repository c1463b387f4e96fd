"""Application UoW – re-exports the kernel coordinator + transaction decorator."""
from uow_template.kernel.uow import Uow, UowObject
from uow_template.application.uow.decorators import transactional

__all__ = ["Uow", "UowObject", "transactional"]
