"""Observability – structured logging helpers."""
from uow_template.observability.logging.factory import JsonLoggerFactory
from uow_template.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
