"""Application layer – use-case helpers built on the kernel coordinator."""

from uow_template.application.uow import transactional

__all__ = ["transactional"]
