"""
Unit tests for progress statistics and daily history.
"""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from moedeck.core.familiarity import Familiarity
from moedeck.core.records import StudySession, UserAnswer
from moedeck.study.progress import daily_progress, overall_stats, subject_progress


@pytest.fixture
def records(make_record):
    return [
        make_record(id="r1", question_id="q1", familiarity=Familiarity.MASTERED,
                    correct_count=5, incorrect_count=1, total_time_spent=30),
        make_record(id="r2", question_id="q2", familiarity=Familiarity.FAMILIAR,
                    correct_count=2, incorrect_count=1, total_time_spent=12.5),
        make_record(id="r3", question_id="q3", familiarity=Familiarity.UNANSWERED),
        make_record(id="r4", question_id="q4", subject_id="other",
                    familiarity=Familiarity.MASTERED, correct_count=1),
    ]


class TestSubjectProgress:
    def test_tier_counts(self, records):
        progress = subject_progress("subject-001", "Initials", 5, records)

        assert progress.total_questions == 5
        assert progress.mastered_questions == 1
        assert progress.tier_counts[Familiarity.FAMILIAR] == 1
        # one unanswered record plus two questions never attempted
        assert progress.unanswered_questions == 3

    def test_accuracy_percent(self, records):
        progress = subject_progress("subject-001", "Initials", 5, records)

        assert progress.accuracy == pytest.approx(77.78)
        assert progress.total_time_spent == 42.5

    def test_empty_subject(self):
        progress = subject_progress("empty", "Empty", 4, [])

        assert progress.accuracy == 0.0
        assert progress.unanswered_questions == 4
        assert progress.mastered_questions == 0

    def test_to_dict_lists_every_tier(self, records):
        data = subject_progress("subject-001", "Initials", 5, records).to_dict()

        assert data["subject_name"] == "Initials"
        assert data["tiers"] == {
            "unfamiliar": 0,
            "unanswered": 3,
            "somewhat-familiar": 0,
            "familiar": 1,
            "mastered": 1,
        }


class TestOverallStats:
    def test_totals(self, records):
        stats = overall_stats(records, question_count=8)

        assert stats.total_questions == 8
        assert stats.total_answered == 4
        assert stats.total_correct == 8
        assert stats.total_incorrect == 2
        assert stats.average_accuracy == 80.0
        assert stats.total_time_spent == 42.5

    def test_no_records(self):
        stats = overall_stats([], question_count=0)

        assert stats.total_answered == 0
        assert stats.average_accuracy == 0.0


def _session(started_at, *results):
    session = StudySession(subject_id="subject-001", started_at=started_at)
    for index, is_correct in enumerate(results):
        session = session.with_answer(UserAnswer(
            question_id=f"q{index}",
            answer="ㄕㄢ",
            is_correct=is_correct,
            time_spent=2,
            answered_at=started_at,
        ))
    return session


class TestDailyProgress:
    def test_one_entry_per_day_oldest_first(self, clock):
        history = daily_progress([], days=7, clock=clock)

        assert len(history) == 7
        assert history[0].day == date(2025, 2, 23)
        assert history[-1].day == date(2025, 3, 1)
        assert all(day.questions_answered == 0 and day.accuracy == 0.0 for day in history)

    def test_sessions_grouped_by_start_day(self, clock, now):
        sessions = [
            _session(now - timedelta(hours=2), True, True, False),
            _session(now - timedelta(hours=1), True),
            _session(now - timedelta(days=1), False, True, True),
        ]

        history = daily_progress(sessions, days=3, clock=clock)

        today, yesterday = history[-1], history[-2]
        assert (today.questions_answered, today.correct_answers, today.accuracy) == (4, 3, 75.0)
        assert (yesterday.questions_answered, yesterday.correct_answers) == (3, 2)
        assert yesterday.accuracy == 66.67
        assert history[0].questions_answered == 0

    def test_sessions_outside_range_ignored(self, clock, now):
        sessions = [_session(now - timedelta(days=30), True), _session(now + timedelta(days=1), True)]

        history = daily_progress(sessions, days=7, clock=clock)

        assert sum(day.questions_answered for day in history) == 0

    def test_day_follows_clock_timezone(self):
        taipei = timezone(timedelta(hours=8))
        local_now = datetime(2025, 3, 1, 9, 0, tzinfo=taipei)
        # 20:00 UTC on Feb 28 is already March 1 in Taipei
        sessions = [_session(datetime(2025, 2, 28, 20, 0, tzinfo=UTC), True)]

        history = daily_progress(sessions, days=2, clock=lambda: local_now)

        assert history[-1].day == date(2025, 3, 1)
        assert history[-1].questions_answered == 1

    def test_to_dict(self, clock, now):
        entry = daily_progress([_session(now, True)], days=1, clock=clock)[0]

        assert entry.to_dict() == {
            "date": "2025-03-01",
            "questions_answered": 1,
            "correct_answers": 1,
            "accuracy": 100.0,
        }

    def test_days_must_be_positive(self, clock):
        with pytest.raises(ValueError):
            daily_progress([], days=0, clock=clock)
