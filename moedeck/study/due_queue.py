"""Selection of learning records that are due for review."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from moedeck.core.clock import utc_now
from moedeck.core.records import LearningRecord


def due_records(
    records: Iterable[LearningRecord],
    now: datetime | None = None,
) -> list[LearningRecord]:
    """
    Records whose next review is at or before `now`, earliest first.

    The sort is stable: records sharing a `next_review` keep their input order.
    There is no cap on queue size.
    """
    now = now or utc_now()
    due = [record for record in records if record.next_review <= now]
    return sorted(due, key=lambda record: record.next_review)


def due_count(records: Iterable[LearningRecord], now: datetime | None = None) -> int:
    """Number of records due at `now`."""
    now = now or utc_now()
    return sum(1 for record in records if record.next_review <= now)
