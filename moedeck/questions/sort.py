"""
Sort answer handler.

The canonical order is the items sorted ascending by `correct_order`,
expressed as the 0-based index sequence of that sorted list. The learner's
answer is a sequence of indices and must match it element-for-element.
"""

from typing import Any

from . import QuestionType, register
from .base import AnswerResult, expect
from .models import SortItem, SortQuestion


def ordered_items(question: SortQuestion) -> list[SortItem]:
    """Items in their correct order (stable for equal `correct_order`)."""
    return sorted(question.items, key=lambda item: item.correct_order)


def canonical_order(question: SortQuestion) -> list[int]:
    """0-based index sequence of the correctly ordered items."""
    return [index for index, _ in enumerate(ordered_items(question))]


@register(QuestionType.SORT)
class SortHandler:
    """Handler for sort questions."""

    def check(self, question: SortQuestion, answer: Any) -> AnswerResult:
        expect(answer, (list, tuple), question.type)
        for index in answer:
            expect(index, int, question.type)

        expected = canonical_order(question)
        user_order = list(answer)

        return AnswerResult(
            correct=user_order == expected,
            user_answer=" → ".join(str(index) for index in user_order),
            correct_answer=self.correct_answer(question),
        )

    def correct_answer(self, question: SortQuestion) -> str:
        return " → ".join(item.text for item in ordered_items(question))
