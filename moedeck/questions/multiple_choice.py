"""
Multiple choice answer handler.

- Single-select: the answer is the id of the one correct option.
- Multi-select: the answer is a collection of option ids that must equal
  the set of correct ids exactly.
"""

from typing import Any

from . import QuestionType, register
from .base import AnswerResult, expect
from .models import MultipleChoiceQuestion


@register(QuestionType.MULTIPLE_CHOICE)
class MultipleChoiceHandler:
    """Handler for multiple choice questions."""

    def check(self, question: MultipleChoiceQuestion, answer: Any) -> AnswerResult:
        if question.allow_multiple:
            expect(answer, (list, tuple, set, frozenset), question.type)
            selected = list(answer)
            for option_id in selected:
                expect(option_id, str, question.type)
            correct = self._grade_multi(selected, question.correct_option_ids)
            user_answer = ", ".join(self._texts(question, selected))
        else:
            expect(answer, str, question.type)
            correct = self._grade_single(answer, question)
            user_answer = ", ".join(self._texts(question, [answer]))

        return AnswerResult(
            correct=correct,
            user_answer=user_answer,
            correct_answer=self.correct_answer(question),
        )

    def correct_answer(self, question: MultipleChoiceQuestion) -> str:
        return ", ".join(option.text for option in question.options if option.is_correct)

    def _grade_single(self, answer: str, question: MultipleChoiceQuestion) -> bool:
        correct_option = next((o for o in question.options if o.is_correct), None)
        if correct_option is None:
            return False
        return answer == correct_option.id

    def _grade_multi(self, selected: list[str], correct_ids: set[str]) -> bool:
        # Same cardinality rules out duplicated ids
        return len(selected) == len(correct_ids) and set(selected) == correct_ids

    def _texts(self, question: MultipleChoiceQuestion, option_ids: list[str]) -> list[str]:
        by_id = {option.id: option.text for option in question.options}
        return [by_id.get(option_id, option_id) for option_id in option_ids]
