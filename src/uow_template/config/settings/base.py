"""Config settings – Settings base class and UowSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from uow_template.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class UowSettings(Settings):
    """Backend settings read from ``UOW_*`` environment variables."""

    _prefix: ClassVar[str] = "UOW"

    database_url: str
    echo: bool = False
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.database_url.strip():
            raise InvalidSettingValueError("database_url", self.database_url, "must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["Settings", "UowSettings"]
