"""
Bopomofo answer handlers.

Both directions grade by exact equality of the trimmed answer with the
target string. Tone-aware fuzzy matching is the PhoneticValidator's job
and never gates correctness here.
"""

from typing import Any

from . import QuestionType, register
from .base import AnswerResult, expect
from .models import BopomofoToCharQuestion, CharToBopomofoQuestion


def _grade(answer: str, target: str) -> AnswerResult:
    user_answer = answer.strip()
    return AnswerResult(
        correct=user_answer == target,
        user_answer=user_answer,
        correct_answer=target,
    )


@register(QuestionType.BOPOMOFO_TO_CHAR)
class BopomofoToCharHandler:
    """Bopomofo shown, character expected."""

    def check(self, question: BopomofoToCharQuestion, answer: Any) -> AnswerResult:
        expect(answer, str, question.type)
        return _grade(answer, question.correct_char)

    def correct_answer(self, question: BopomofoToCharQuestion) -> str:
        return question.correct_char


@register(QuestionType.CHAR_TO_BOPOMOFO)
class CharToBopomofoHandler:
    """Character shown, bopomofo expected."""

    def check(self, question: CharToBopomofoQuestion, answer: Any) -> AnswerResult:
        expect(answer, str, question.type)
        return _grade(answer, question.correct_bopomofo)

    def correct_answer(self, question: CharToBopomofoQuestion) -> str:
        return question.correct_bopomofo
