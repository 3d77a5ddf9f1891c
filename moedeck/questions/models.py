"""
Question models.

Six question shapes form a closed tagged union discriminated on `type`.
Documents from the question store use camelCase keys; models accept both
camelCase and snake_case and are frozen once authored.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    """Supported question types."""

    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"
    FILL_BLANK = "fill-blank"
    SORT = "sort"
    BOPOMOFO_TO_CHAR = "bopomofo-to-char"
    CHAR_TO_BOPOMOFO = "char-to-bopomofo"


class _Document(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class QuestionOption(_Document):
    id: str
    text: str
    is_correct: bool = False


class SortItem(_Document):
    id: str
    text: str
    correct_order: int


class BaseQuestion(_Document):
    """Fields shared by every question shape."""

    id: str
    subject_id: str = ""
    question: str = ""
    explanation: str | None = None
    difficulty: Literal["easy", "medium", "hard"] = "medium"
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None


class MultipleChoiceQuestion(BaseQuestion):
    type: Literal["multiple-choice"] = "multiple-choice"
    options: list[QuestionOption] = Field(min_length=1)
    allow_multiple: bool = False

    @property
    def correct_option_ids(self) -> set[str]:
        return {option.id for option in self.options if option.is_correct}


class TrueFalseQuestion(BaseQuestion):
    type: Literal["true-false"] = "true-false"
    correct_answer: bool


class FillBlankQuestion(BaseQuestion):
    type: Literal["fill-blank"] = "fill-blank"
    correct_answers: list[str] = Field(min_length=1)
    case_sensitive: bool = False


class SortQuestion(BaseQuestion):
    type: Literal["sort"] = "sort"
    items: list[SortItem] = Field(min_length=1)


class BopomofoToCharQuestion(BaseQuestion):
    type: Literal["bopomofo-to-char"] = "bopomofo-to-char"
    bopomofo: str
    correct_char: str
    verified_bopomofo: str | None = None  # reading confirmed by the lookup service


class CharToBopomofoQuestion(BaseQuestion):
    type: Literal["char-to-bopomofo"] = "char-to-bopomofo"
    character: str
    correct_bopomofo: str
    verified_bopomofo: str | None = None


Question = Annotated[
    Union[
        MultipleChoiceQuestion,
        TrueFalseQuestion,
        FillBlankQuestion,
        SortQuestion,
        BopomofoToCharQuestion,
        CharToBopomofoQuestion,
    ],
    Field(discriminator="type"),
]

PHONETIC_TYPES = frozenset({QuestionType.BOPOMOFO_TO_CHAR, QuestionType.CHAR_TO_BOPOMOFO})

_question_adapter: TypeAdapter[Question] = TypeAdapter(Question)


def parse_question(data: dict[str, Any]) -> Question:
    """
    Validate a raw question document into its concrete model.

    Raises:
        pydantic.ValidationError: Unknown type or fields not matching it
    """
    return _question_adapter.validate_python(data)
