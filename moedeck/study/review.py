"""
Applying one answer to a learning record.

The caller loads the record (or has none yet), grades the answer and hands
the outcome here. The returned record carries the new field values; the
caller persists them.
"""

from __future__ import annotations

from loguru import logger

from moedeck.core.clock import Clock, fixed_clock, utc_now
from moedeck.core.familiarity import Familiarity, next_familiarity
from moedeck.core.records import LearningRecord
from moedeck.study.scheduling import SchedulingAlgorithm, default_algorithm


def apply_review(
    record: LearningRecord | None,
    *,
    question_id: str,
    subject_id: str,
    is_correct: bool,
    time_spent: float,
    familiarity: Familiarity | str | None = None,
    algorithm: SchedulingAlgorithm | None = None,
    clock: Clock | None = None,
) -> LearningRecord:
    """
    Compute the record state after one answer.

    Args:
        record: Existing record, or None for a question answered the first time
        question_id: Question the answer belongs to
        subject_id: Subject of the question
        is_correct: Graded correctness
        time_spent: Seconds spent on the answer
        familiarity: Self-reported tier; derived from the answer when omitted
        algorithm: Scheduler; the configured default when omitted
        clock: Source of "now"

    Returns:
        New LearningRecord (id preserved, unsaved)
    """
    now = (clock or utc_now)()
    algorithm = algorithm or default_algorithm()

    if record is None:
        current = Familiarity.UNANSWERED
        correct_count = incorrect_count = streak = 0
        total_time = 0.0
    else:
        current = record.familiarity
        correct_count = record.correct_count
        incorrect_count = record.incorrect_count
        streak = record.streak
        total_time = record.total_time_spent

    if familiarity is None:
        new_familiarity = next_familiarity(current, is_correct, time_spent)
    else:
        new_familiarity = Familiarity(familiarity)

    if is_correct:
        correct_count += 1
        streak += 1
    else:
        incorrect_count += 1
        streak = 0

    # Same instant for both timestamps keeps next_review >= last_reviewed
    next_review = algorithm.calculate_next_review(
        new_familiarity,
        correct_count,
        incorrect_count,
        streak,
        now,
        clock=fixed_clock(now),
    )

    logger.debug(
        f"Question {question_id}: {current.value} -> {new_familiarity.value}, "
        f"due {next_review.isoformat()}"
    )

    return LearningRecord(
        id=record.id if record else None,
        question_id=question_id,
        subject_id=subject_id,
        familiarity=new_familiarity,
        correct_count=correct_count,
        incorrect_count=incorrect_count,
        streak=streak,
        last_reviewed=now,
        next_review=next_review,
        total_time_spent=total_time + time_spent,
        created_at=record.created_at if record and record.created_at else now,
        updated_at=now,
    )
