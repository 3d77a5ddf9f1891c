"""
Learning progress statistics.

Aggregates learning records per subject and overall: how many questions
sit in each familiarity tier, answer accuracy and time spent. Study
sessions feed a day-by-day history of answers.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta

from moedeck.core.clock import Clock, utc_now
from moedeck.core.familiarity import Familiarity
from moedeck.core.records import LearningRecord, StudySession


def _accuracy_percent(correct: int, attempts: int) -> float:
    """Accuracy in percent rounded to 2 decimals; 0 without attempts."""
    if attempts == 0:
        return 0.0
    return round(correct / attempts * 100, 2)


@dataclass
class SubjectProgress:
    """Progress of one subject."""

    subject_id: str
    subject_name: str
    total_questions: int
    tier_counts: dict[Familiarity, int] = field(default_factory=dict)
    accuracy: float = 0.0  # percent
    total_time_spent: float = 0.0

    @property
    def mastered_questions(self) -> int:
        return self.tier_counts.get(Familiarity.MASTERED, 0)

    @property
    def unanswered_questions(self) -> int:
        return self.tier_counts.get(Familiarity.UNANSWERED, 0)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "total_questions": self.total_questions,
            "tiers": {tier.value: self.tier_counts.get(tier, 0) for tier in Familiarity},
            "accuracy": self.accuracy,
            "total_time_spent": self.total_time_spent,
        }


@dataclass
class OverallStats:
    """Totals across all subjects."""

    total_questions: int = 0
    total_answered: int = 0
    total_correct: int = 0
    total_incorrect: int = 0
    total_time_spent: float = 0.0
    average_accuracy: float = 0.0  # percent


def subject_progress(
    subject_id: str,
    subject_name: str,
    question_count: int,
    records: Iterable[LearningRecord],
) -> SubjectProgress:
    """
    Summarise one subject.

    Questions without a record count as unanswered, on top of records
    whose tier is still `unanswered`.
    """
    subject_records = [r for r in records if r.subject_id == subject_id]

    tiers = Counter(record.familiarity for record in subject_records)
    tiers[Familiarity.UNANSWERED] += max(question_count - len(subject_records), 0)

    correct = sum(r.correct_count for r in subject_records)
    attempts = sum(r.attempts for r in subject_records)

    return SubjectProgress(
        subject_id=subject_id,
        subject_name=subject_name,
        total_questions=question_count,
        tier_counts=dict(tiers),
        accuracy=_accuracy_percent(correct, attempts),
        total_time_spent=sum(r.total_time_spent for r in subject_records),
    )


def overall_stats(records: Iterable[LearningRecord], question_count: int) -> OverallStats:
    """Totals over every learning record."""
    records = list(records)
    correct = sum(r.correct_count for r in records)
    incorrect = sum(r.incorrect_count for r in records)

    return OverallStats(
        total_questions=question_count,
        total_answered=len(records),
        total_correct=correct,
        total_incorrect=incorrect,
        total_time_spent=sum(r.total_time_spent for r in records),
        average_accuracy=_accuracy_percent(correct, correct + incorrect),
    )


@dataclass
class DailyProgress:
    """Answers given on one calendar day."""

    day: date
    questions_answered: int = 0
    correct_answers: int = 0
    accuracy: float = 0.0  # percent

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date": self.day.isoformat(),
            "questions_answered": self.questions_answered,
            "correct_answers": self.correct_answers,
            "accuracy": self.accuracy,
        }


def daily_progress(
    sessions: Iterable[StudySession],
    days: int = 30,
    clock: Clock | None = None,
) -> list[DailyProgress]:
    """
    Per-day answer history for the last `days` days, oldest first.

    A session counts toward the day it started on, in the clock's timezone.
    Days without sessions are included with zero counts.

    Raises:
        ValueError: `days` is not positive
    """
    if days < 1:
        raise ValueError("days must be positive")

    now = (clock or utc_now)()
    today = now.date()
    history = {
        today - timedelta(days=offset): DailyProgress(day=today - timedelta(days=offset))
        for offset in range(days - 1, -1, -1)
    }

    for session in sessions:
        day = history.get(session.started_at.astimezone(now.tzinfo).date())
        if day is None:
            continue
        day.questions_answered += len(session.answers)
        day.correct_answers += session.correct_answers

    for day in history.values():
        day.accuracy = _accuracy_percent(day.correct_answers, day.questions_answered)

    return list(history.values())
