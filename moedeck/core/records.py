"""
Learning records and answers.

A LearningRecord holds one learner's history on one question; a
StudySession collects the answers given in one sitting. The record
store keeps camelCase documents, so models accept and emit camelCase keys
while exposing snake_case attributes.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from moedeck.core.familiarity import Familiarity

AnswerValue = str | list[str] | bool | list[int]


class LearningRecord(BaseModel):
    """Review history of one question for one learner."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str | None = None
    question_id: str
    subject_id: str
    familiarity: Familiarity = Familiarity.UNANSWERED
    correct_count: int = Field(default=0, ge=0)
    incorrect_count: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)
    last_reviewed: AwareDatetime
    next_review: AwareDatetime
    total_time_spent: float = Field(default=0, ge=0)
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None

    @model_validator(mode="after")
    def _check_review_order(self) -> LearningRecord:
        if self.next_review < self.last_reviewed:
            raise ValueError("nextReview must not precede lastReviewed")
        return self

    @property
    def attempts(self) -> int:
        return self.correct_count + self.incorrect_count

    @property
    def accuracy(self) -> float | None:
        """Share of correct answers, or None before the first attempt."""
        if self.attempts == 0:
            return None
        return self.correct_count / self.attempts

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase document stored by the repository."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class UserAnswer(BaseModel):
    """A submitted answer, kept in the study session it belongs to."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    question_id: str
    answer: AnswerValue
    is_correct: bool
    time_spent: float = Field(ge=0)  # seconds
    answered_at: AwareDatetime = Field(default_factory=lambda: datetime.now(UTC))


class StudySession(BaseModel):
    """
    One sitting of review, practice or test on a subject.

    A session is open until `completed_at` is set. Answers are appended in
    the order they were given; `questions` lists each answered question once.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str | None = None
    subject_id: str
    mode: Literal["review", "practice", "test"] = "review"
    questions: list[str] = Field(default_factory=list)
    answers: list[UserAnswer] = Field(default_factory=list)
    started_at: AwareDatetime
    completed_at: AwareDatetime | None = None
    total_time: float = Field(default=0, ge=0)  # seconds
    score: float | None = None  # percent correct, set on completion

    @property
    def is_open(self) -> bool:
        return self.completed_at is None

    @property
    def correct_answers(self) -> int:
        return sum(1 for answer in self.answers if answer.is_correct)

    def with_answer(self, answer: UserAnswer) -> StudySession:
        """Copy of the session with `answer` recorded."""
        if not self.is_open:
            raise ValueError("Cannot add answers to a completed session")
        questions = list(self.questions)
        if answer.question_id not in questions:
            questions.append(answer.question_id)
        return self.model_copy(update={
            "questions": questions,
            "answers": [*self.answers, answer],
            "total_time": self.total_time + answer.time_spent,
        })

    def completed(self, at: datetime) -> StudySession:
        """Copy of the session closed at `at`, with its score."""
        score = None
        if self.answers:
            score = round(self.correct_answers / len(self.answers) * 100, 2)
        return self.model_copy(update={"completed_at": at, "score": score})

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase document stored by the repository."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
