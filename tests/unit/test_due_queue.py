"""
Unit tests for due review selection.
"""

from datetime import timedelta

from moedeck.study.due_queue import due_count, due_records


class TestDueRecords:
    """Records due at or before now, earliest first."""

    def test_boundary(self, make_record, now):
        past = make_record(id="past", last_reviewed=now - timedelta(days=2),
                           next_review=now - timedelta(days=1))
        exact = make_record(id="exact")
        future = make_record(id="future", next_review=now + timedelta(days=1))

        due = due_records([future, exact, past], now)

        assert [r.id for r in due] == ["past", "exact"]
        assert due_count([future, exact, past], now) == 2

    def test_sorted_earliest_first(self, make_record, now):
        earlier = now - timedelta(days=5)
        records = [
            make_record(id="b", last_reviewed=earlier, next_review=now - timedelta(hours=1)),
            make_record(id="a", last_reviewed=earlier, next_review=now - timedelta(days=3)),
            make_record(id="c", last_reviewed=earlier, next_review=now - timedelta(minutes=1)),
        ]

        assert [r.id for r in due_records(records, now)] == ["a", "b", "c"]

    def test_ties_keep_input_order(self, make_record, now):
        records = [make_record(id=str(i)) for i in range(5)]

        assert [r.id for r in due_records(reversed(records), now)] == ["4", "3", "2", "1", "0"]

    def test_nothing_due(self, make_record, now):
        records = [make_record(next_review=now + timedelta(seconds=1))]

        assert due_records(records, now) == []
        assert due_count(records, now) == 0

    def test_no_cap(self, make_record, now):
        records = [make_record(id=str(i)) for i in range(250)]

        assert len(due_records(records, now)) == 250

    def test_accepts_generators(self, make_record, now):
        records = (make_record(id=str(i)) for i in range(3))

        assert len(due_records(records, now)) == 3
