"""
Base protocol and types for answer handlers.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    user_answer: str
    correct_answer: str
    feedback: str = ""

    def __post_init__(self):
        if not self.feedback:
            self.feedback = "Correct!" if self.correct else f"Expected: {self.correct_answer}"


class InvalidAnswerError(TypeError):
    """Answer shape does not match the question type."""


def expect(answer: Any, kind: type | tuple[type, ...], question_type: str) -> None:
    """Raise InvalidAnswerError unless `answer` is an instance of `kind`."""
    # bool is an int subclass; keep it out of integer slots
    if isinstance(answer, bool) and kind is not bool:
        raise InvalidAnswerError(f"{question_type} answer must not be a bool")
    if not isinstance(answer, kind):
        raise InvalidAnswerError(
            f"{question_type} answer has unexpected type {type(answer).__name__}"
        )


class AnswerHandler(Protocol):
    """Protocol for question type handlers."""

    def check(self, question: Any, answer: Any) -> AnswerResult:
        """Grade the answer. Raises InvalidAnswerError on a malformed answer."""
        ...

    def correct_answer(self, question: Any) -> str:
        """Display text of the expected answer."""
        ...
