"""Unit of work – UowState enum."""
from __future__ import annotations
from enum import Enum


class UowState(str, Enum):
    IDLE = "IDLE"
    WORKING = "WORKING"


__all__ = ["UowState"]
