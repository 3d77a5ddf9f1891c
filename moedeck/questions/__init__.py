"""
Question models and answer handlers.

Each question type has its own handler module with:
- check(): Grade a submitted answer
- correct_answer(): Display the expected answer
"""

from typing import TYPE_CHECKING, Any

from .models import (
    PHONETIC_TYPES,
    BopomofoToCharQuestion,
    CharToBopomofoQuestion,
    FillBlankQuestion,
    MultipleChoiceQuestion,
    Question,
    QuestionOption,
    QuestionType,
    SortItem,
    SortQuestion,
    TrueFalseQuestion,
    parse_question,
)

if TYPE_CHECKING:
    from .base import AnswerHandler, AnswerResult


# Handler registry - populated by @register decorator
HANDLERS: dict[QuestionType, "AnswerHandler"] = {}


def register(question_type: QuestionType):
    """Decorator to register an answer handler."""
    def decorator(cls):
        HANDLERS[question_type] = cls()
        return cls
    return decorator


def get_handler(question_type: str | QuestionType) -> "AnswerHandler | None":
    """Get the handler for a question type."""
    if isinstance(question_type, str):
        try:
            question_type = QuestionType(question_type.lower())
        except ValueError:
            return None
    return HANDLERS.get(question_type)


def evaluate(question: Question, answer: Any) -> "AnswerResult":
    """
    Grade an answer against its question.

    Raises:
        LookupError: No handler is registered for the question type
        InvalidAnswerError: The answer shape does not fit the question type
    """
    handler = get_handler(question.type)
    if handler is None:
        raise LookupError(f"No answer handler registered for {question.type!r}")
    return handler.check(question, answer)


def is_correct(question: Question, answer: Any) -> bool:
    """Correctness predicate over every question type."""
    return evaluate(question, answer).correct


# Import handlers to trigger registration
from . import multiple_choice
from . import true_false
from . import fill_blank
from . import sort
from . import phonetic

__all__ = [
    "HANDLERS",
    "PHONETIC_TYPES",
    "BopomofoToCharQuestion",
    "CharToBopomofoQuestion",
    "FillBlankQuestion",
    "MultipleChoiceQuestion",
    "Question",
    "QuestionOption",
    "QuestionType",
    "SortItem",
    "SortQuestion",
    "TrueFalseQuestion",
    "evaluate",
    "get_handler",
    "is_correct",
    "parse_question",
    "register",
]
