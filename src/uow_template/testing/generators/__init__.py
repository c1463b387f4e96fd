"""Testing generators – property-based strategies."""
from uow_template.testing.generators.strategies import (
    in_memory_record_strategy,
    operation_kind_strategy,
)

__all__ = [
    "in_memory_record_strategy",
    "operation_kind_strategy",
]
