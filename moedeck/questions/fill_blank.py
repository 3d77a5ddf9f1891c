"""
Fill-in-the-blank answer handler.

Exact string match against any accepted answer after trimming the
submission. Case sensitivity is set per question.
"""

from typing import Any

from . import QuestionType, register
from .base import AnswerResult, expect
from .models import FillBlankQuestion


@register(QuestionType.FILL_BLANK)
class FillBlankHandler:
    """Handler for fill-in-the-blank questions."""

    def check(self, question: FillBlankQuestion, answer: Any) -> AnswerResult:
        expect(answer, str, question.type)
        user_answer = answer.strip()
        correct = any(
            self._grade(user_answer, accepted, question.case_sensitive)
            for accepted in question.correct_answers
        )
        return AnswerResult(
            correct=correct,
            user_answer=user_answer,
            correct_answer=self.correct_answer(question),
        )

    def correct_answer(self, question: FillBlankQuestion) -> str:
        return " / ".join(question.correct_answers)

    def _grade(self, user_answer: str, accepted: str, case_sensitive: bool) -> bool:
        if case_sensitive:
            return user_answer == accepted
        return user_answer.lower() == accepted.lower()
