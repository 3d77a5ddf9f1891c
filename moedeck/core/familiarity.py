"""
Familiarity tiers and their transition function.

A learner's grip on a single question is summarised by one of five
qualitative tiers. The tiers branch the scheduling formulas and drive
progress display.

Design:
- Familiarity: ordered enum of the five tiers
- next_familiarity(): pure, total transition over (tier, correct, time)
"""

from __future__ import annotations

from enum import Enum

# Seconds under which a correct answer counts as fluent enough to promote.
FAMILIAR_PROMOTION_SECONDS = 10
MASTERED_PROMOTION_SECONDS = 5


class Familiarity(str, Enum):
    """
    Familiarity tier for one question.

    UNANSWERED is the initial state of a question that has never been
    scored. It is "low" like UNFAMILIAR but is only ever entered at creation.
    """

    UNFAMILIAR = "unfamiliar"
    UNANSWERED = "unanswered"
    SOMEWHAT_FAMILIAR = "somewhat-familiar"
    FAMILIAR = "familiar"
    MASTERED = "mastered"

    @property
    def rank(self) -> int:
        """Position in the listed order, 0 (unfamiliar) to 4 (mastered)."""
        return _ORDER.index(self)

    @property
    def promoted(self) -> Familiarity:
        """Immediate successor along the progress path."""
        return _PROMOTIONS[self]

    @property
    def demoted(self) -> Familiarity:
        """Tier reached after a wrong answer."""
        return _DEMOTIONS[self]

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.replace("-", " ").title()

    @property
    def color(self) -> str:
        """Rich color for CLI display."""
        return {
            Familiarity.UNFAMILIAR: "red",
            Familiarity.UNANSWERED: "dim",
            Familiarity.SOMEWHAT_FAMILIAR: "yellow",
            Familiarity.FAMILIAR: "blue",
            Familiarity.MASTERED: "green",
        }[self]


_ORDER = list(Familiarity)

_PROMOTIONS = {
    Familiarity.UNFAMILIAR: Familiarity.SOMEWHAT_FAMILIAR,
    Familiarity.UNANSWERED: Familiarity.SOMEWHAT_FAMILIAR,
    Familiarity.SOMEWHAT_FAMILIAR: Familiarity.FAMILIAR,
    Familiarity.FAMILIAR: Familiarity.MASTERED,
    Familiarity.MASTERED: Familiarity.MASTERED,
}

_DEMOTIONS = {
    Familiarity.UNFAMILIAR: Familiarity.UNFAMILIAR,
    Familiarity.UNANSWERED: Familiarity.UNFAMILIAR,
    Familiarity.SOMEWHAT_FAMILIAR: Familiarity.UNFAMILIAR,
    Familiarity.FAMILIAR: Familiarity.SOMEWHAT_FAMILIAR,
    Familiarity.MASTERED: Familiarity.FAMILIAR,
}

# Promotions that only happen when the answer came quickly enough.
_TIMED_PROMOTIONS = {
    Familiarity.SOMEWHAT_FAMILIAR: FAMILIAR_PROMOTION_SECONDS,
    Familiarity.FAMILIAR: MASTERED_PROMOTION_SECONDS,
}


def next_familiarity(
    current: Familiarity | str,
    is_correct: bool,
    time_spent_seconds: float,
) -> Familiarity:
    """
    Advance a familiarity tier after one answer.

    Args:
        current: Tier before the answer
        is_correct: Whether the answer was graded correct
        time_spent_seconds: Time the learner took to answer

    Returns:
        The new tier. Wrong answers demote, correct answers promote,
        except that somewhat-familiar needs < 10s and familiar needs < 5s.
    """
    current = Familiarity(current)

    if not is_correct:
        return current.demoted

    threshold = _TIMED_PROMOTIONS.get(current)
    if threshold is not None and time_spent_seconds >= threshold:
        return current

    return current.promoted
