"""Property-based tests for the coordinator using the Hypothesis strategies."""
from __future__ import annotations

import asyncio
from typing import Any

import hypothesis.strategies as st
from hypothesis import given, settings

from uow_template.kernel.errors import PersistFailedError
from uow_template.kernel.uow import OperationKind
from uow_template.testing.fakes import InMemoryDatabase, InMemoryRecord, InMemoryUnitOfWork
from uow_template.testing.generators import in_memory_record_strategy, operation_kind_strategy

_batches = st.lists(
    st.tuples(operation_kind_strategy(), in_memory_record_strategy(max_key=5)),
    max_size=12,
)
_seeds = st.dictionaries(st.integers(min_value=1, max_value=5), st.text(max_size=4), max_size=5)


def _apply_sequentially(tables: dict[Any, Any], batch: list[tuple[OperationKind, InMemoryRecord]]) -> bool:
    """Reference model: apply *batch* in order; return False on the first failure."""
    rows = tables.setdefault("items", {})
    for kind, record in batch:
        exists = record.key in rows
        if kind is OperationKind.CREATE:
            if exists:
                return False
            rows[record.key] = record.value
        elif kind is OperationKind.UPDATE:
            if not exists:
                return False
            rows[record.key] = record.value
        else:
            if not exists:
                return False
            del rows[record.key]
    return True


async def _run_batch(uow: InMemoryUnitOfWork, batch: list[tuple[OperationKind, InMemoryRecord]]) -> None:
    marks = {
        OperationKind.CREATE: uow.mark_create,
        OperationKind.UPDATE: uow.mark_update,
        OperationKind.DELETE: uow.mark_delete,
    }
    await uow.begin_work()
    for kind, record in batch:
        await marks[kind](record)
    await uow.commit_work()


class TestStrategies:
    @given(operation_kind_strategy())
    def test_kind_is_member(self, kind: OperationKind) -> None:
        assert kind in OperationKind

    @given(in_memory_record_strategy(table="orders", max_key=3))
    def test_record_shape(self, record: InMemoryRecord) -> None:
        assert record.table == "orders"
        assert 1 <= record.key <= 3
        assert record.value


class TestBatchProperties:
    @settings(max_examples=75, deadline=None)
    @given(seed=_seeds, batch=_batches)
    def test_all_or_nothing_in_mark_order(
        self,
        seed: dict[int, str],
        batch: list[tuple[OperationKind, InMemoryRecord]],
    ) -> None:
        db = InMemoryDatabase({"items": dict(seed)})
        before = db.snapshot()
        expected = db.snapshot()
        succeeds = _apply_sequentially(expected, batch)
        uow = InMemoryUnitOfWork(db)

        try:
            asyncio.run(_run_batch(uow, batch))
        except PersistFailedError:
            assert not succeeds
            assert db.snapshot() == before
        else:
            assert succeeds
            assert db.snapshot() == expected

        assert not uow.is_working
        assert len(uow) == 0
