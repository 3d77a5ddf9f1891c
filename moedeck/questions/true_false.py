"""
True/False answer handler.

Binary choice questions. The answer is a bool.
"""

from typing import Any

from . import QuestionType, register
from .base import AnswerResult, expect
from .models import TrueFalseQuestion


@register(QuestionType.TRUE_FALSE)
class TrueFalseHandler:
    """Handler for true/false questions."""

    def check(self, question: TrueFalseQuestion, answer: Any) -> AnswerResult:
        expect(answer, bool, question.type)
        return AnswerResult(
            correct=answer == question.correct_answer,
            user_answer=str(answer),
            correct_answer=self.correct_answer(question),
        )

    def correct_answer(self, question: TrueFalseQuestion) -> str:
        return str(question.correct_answer)
