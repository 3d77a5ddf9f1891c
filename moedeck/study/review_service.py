"""
Review service.

Ties the pure core to the learning-record repository: grade an answer,
optionally check a bopomofo answer against the dictionary, advance the
record and persist it. Answers given while a study session is open are
recorded in that session.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from loguru import logger

from moedeck.core.clock import Clock, utc_now
from moedeck.core.familiarity import Familiarity
from moedeck.core.records import LearningRecord, StudySession, UserAnswer
from moedeck.core.repository import AppSettings, Repository
from moedeck.phonetics.validator import PhoneticValidator, ValidationResult
from moedeck.questions import (
    BopomofoToCharQuestion,
    CharToBopomofoQuestion,
    Question,
    evaluate,
)
from moedeck.questions.base import AnswerResult
from moedeck.study.due_queue import due_records
from moedeck.study.review import apply_review
from moedeck.study.scheduling import SchedulingAlgorithm, default_algorithm


@dataclass
class ReviewOutcome:
    """Everything produced by one submitted answer."""

    answer: UserAnswer
    result: AnswerResult
    record: LearningRecord
    phonetic: ValidationResult | None = None


class ReviewService:
    """Grades answers and keeps learning records up to date."""

    def __init__(
        self,
        records: Repository[LearningRecord],
        sessions: Repository[StudySession] | None = None,
        algorithm: SchedulingAlgorithm | None = None,
        validator: PhoneticValidator | None = None,
        clock: Clock | None = None,
    ):
        self.records = records
        self.sessions = sessions
        self.session: StudySession | None = None
        self.algorithm = algorithm or default_algorithm()
        self.validator = validator
        self.clock = clock or utc_now

    async def submit(
        self,
        question: Question,
        answer: Any,
        time_spent: float,
        familiarity: Familiarity | str | None = None,
    ) -> ReviewOutcome:
        """
        Grade an answer and persist the updated learning record.

        Args:
            question: The question answered
            answer: Submitted answer, shaped for the question type
            time_spent: Seconds spent answering
            familiarity: Self-reported tier (derived when omitted)

        Raises:
            InvalidAnswerError: The answer shape does not fit the question
        """
        result = evaluate(question, answer)
        phonetic = await self._validate_phonetic(question, answer)

        existing = await self._record_for(question.id)
        updated = apply_review(
            existing,
            question_id=question.id,
            subject_id=question.subject_id,
            is_correct=result.correct,
            time_spent=time_spent,
            familiarity=familiarity,
            algorithm=self.algorithm,
            clock=self.clock,
        )

        if existing is None or existing.id is None:
            saved = await self.records.create(updated)
        else:
            partial = updated.to_document()
            partial.pop("id", None)
            await self.records.update(existing.id, partial)
            saved = updated

        logger.info(
            f"Question {question.id} answered {'correctly' if result.correct else 'incorrectly'}; "
            f"now {saved.familiarity.value}"
        )

        user_answer = UserAnswer(
            question_id=question.id,
            answer=answer,
            is_correct=result.correct,
            time_spent=time_spent,
            answered_at=saved.last_reviewed,
        )
        if self.session is not None:
            await self._record_answer(user_answer)

        return ReviewOutcome(
            answer=user_answer,
            result=result,
            record=saved,
            phonetic=phonetic,
        )

    async def start_session(
        self,
        subject_id: str,
        mode: str = "review",
        questions: Sequence[str] = (),
    ) -> StudySession:
        """
        Open a study session; later answers are recorded in it.

        Raises:
            RuntimeError: A session is already open
        """
        if self.session is not None:
            raise RuntimeError(f"Session {self.session.id} is still open")

        session = StudySession(
            subject_id=subject_id,
            mode=mode,
            questions=list(questions),
            started_at=self.clock(),
        )
        if self.sessions is not None:
            session = await self.sessions.create(session)
        self.session = session
        logger.info(f"Started {mode} session {session.id} on subject {subject_id}")
        return session

    async def finish_session(self) -> StudySession | None:
        """Close the open session and return it with its score."""
        if self.session is None:
            return None

        session = self.session.completed(self.clock())
        await self._save_session(session)
        self.session = None
        logger.info(
            f"Finished session {session.id}: {session.correct_answers}/{len(session.answers)} correct"
        )
        return session

    async def due_queue(self, subject_id: str | None = None) -> list[LearningRecord]:
        """Records due now, earliest first."""
        if subject_id is None:
            records = await self.records.get_all()
        else:
            records = await self.records.get_by_foreign_key("subjectId", subject_id)
        return due_records(records, self.clock())

    async def new_questions(
        self,
        questions: Sequence[Question],
        settings: AppSettings | None = None,
    ) -> list[Question]:
        """Questions never answered yet, up to the per-session limit."""
        settings = settings or AppSettings()
        answered = {record.question_id for record in await self.records.get_all()}
        fresh = [q for q in questions if q.id not in answered]
        return fresh[: settings.new_questions_per_session]

    async def _record_answer(self, answer: UserAnswer) -> None:
        self.session = self.session.with_answer(answer)
        await self._save_session(self.session)

    async def _save_session(self, session: StudySession) -> None:
        if self.sessions is None or session.id is None:
            return
        partial = session.to_document()
        partial.pop("id", None)
        await self.sessions.update(session.id, partial)

    async def _record_for(self, question_id: str) -> LearningRecord | None:
        matches = await self.records.get_by_foreign_key("questionId", question_id)
        return matches[0] if matches else None

    async def _validate_phonetic(
        self, question: Question, answer: Any
    ) -> ValidationResult | None:
        if self.validator is None:
            return None
        if isinstance(question, CharToBopomofoQuestion):
            return await self.validator.validate(question.character, answer.strip())
        if isinstance(question, BopomofoToCharQuestion):
            # Checks the written character against the prompt, not the authored answer
            return await self.validator.validate(answer.strip(), question.bopomofo)
        return None
