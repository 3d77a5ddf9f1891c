"""
Spaced repetition schedulers.

Three interchangeable algorithms turn a learner's standing on a question
(familiarity tier, correct/incorrect counts, streak) into the moment the
question is due again:

1. Simple - fractional-day intervals scaled by accuracy and streak (default)
2. SM2    - Anki-style ease factor, whole-day intervals, minute relearning steps
3. FSRS   - stability/difficulty model, whole-day intervals

Every interval is a timedelta, so sub-day steps (Simple's 0.1 day, SM2's
minutes) and whole-day steps share one unit. Algorithms keep no state; the
current time comes from an injected clock.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from enum import Enum
from typing import Protocol

from loguru import logger

from config import get_settings
from moedeck.core.clock import Clock, utc_now
from moedeck.core.familiarity import Familiarity


class SchedulingAlgorithmName(str, Enum):
    """Selectable scheduling algorithms."""

    SIMPLE = "simple"
    SM2 = "sm2"
    FSRS = "fsrs"


# =============================================================================
# CONSTANTS
# =============================================================================

SIMPLE_BASE_DAYS = {
    Familiarity.UNFAMILIAR: 0.1,  # ~2.4 hours
    Familiarity.UNANSWERED: 0.5,  # ~12 hours
    Familiarity.SOMEWHAT_FAMILIAR: 1.0,
    Familiarity.FAMILIAR: 3.0,
    Familiarity.MASTERED: 7.0,
}

SM2_RELEARN_STEPS = {
    Familiarity.UNFAMILIAR: timedelta(minutes=1),
    Familiarity.UNANSWERED: timedelta(minutes=5),
}
SM2_BASE_DAYS = {
    Familiarity.SOMEWHAT_FAMILIAR: 1,
    Familiarity.FAMILIAR: 3,
    Familiarity.MASTERED: 7,
}
SM2_INITIAL_EASE = 2.5
SM2_MAX_EASE = 3.0
SM2_MIN_EASE = 1.3

FSRS_PARAMS = {
    "initialDifficulty": 5.0,
    "minDifficulty": 1.0,
    "maxDifficulty": 10.0,
    "maximumInterval": 36500,  # days
    "stabilityGrowth": 1.3,
    "maxStreakBoost": 10,
    "decay": -0.8,
}
FSRS_INITIAL_STABILITY = {
    Familiarity.UNFAMILIAR: 0.1,
    Familiarity.UNANSWERED: 0.5,
    Familiarity.SOMEWHAT_FAMILIAR: 2.0,
    Familiarity.FAMILIAR: 5.0,
    Familiarity.MASTERED: 10.0,
}


def _accuracy(correct_count: int, incorrect_count: int) -> float | None:
    attempts = correct_count + incorrect_count
    if attempts <= 0:
        return None
    return correct_count / attempts


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives (2.5 -> 3)."""
    return math.floor(value + 0.5)


# =============================================================================
# ALGORITHMS
# =============================================================================


class SchedulingAlgorithm(Protocol):
    """Interface shared by all schedulers."""

    name: SchedulingAlgorithmName

    def next_interval(
        self,
        familiarity: Familiarity,
        correct_count: int,
        incorrect_count: int,
        streak: int,
    ) -> timedelta:
        """Time until the next review."""
        ...

    def calculate_next_review(
        self,
        familiarity: Familiarity,
        correct_count: int,
        incorrect_count: int,
        streak: int,
        last_reviewed: datetime,
        *,
        clock: Clock | None = None,
    ) -> datetime:
        """Timestamp at which the question becomes due."""
        ...


# Algorithm registry - populated by @register decorator
ALGORITHMS: dict[SchedulingAlgorithmName, SchedulingAlgorithm] = {}


def register(name: SchedulingAlgorithmName):
    """Decorator to register a scheduling algorithm."""
    def decorator(cls):
        cls.name = name
        ALGORITHMS[name] = cls()
        return cls
    return decorator


class _Scheduler:
    """Shared clock handling; subclasses provide next_interval()."""

    name: SchedulingAlgorithmName

    def next_interval(
        self,
        familiarity: Familiarity,
        correct_count: int,
        incorrect_count: int,
        streak: int,
    ) -> timedelta:
        raise NotImplementedError

    def calculate_next_review(
        self,
        familiarity: Familiarity,
        correct_count: int,
        incorrect_count: int,
        streak: int,
        last_reviewed: datetime,
        *,
        clock: Clock | None = None,
    ) -> datetime:
        """
        Calculate when a question is due again.

        Args:
            familiarity: Tier after the latest answer
            correct_count: Correct answers so far (including the latest)
            incorrect_count: Incorrect answers so far (including the latest)
            streak: Consecutive correct answers
            last_reviewed: Time of the latest review (kept for interface
                compatibility; intervals are measured from the clock)
            clock: Source of "now"; defaults to the real UTC clock

        Returns:
            now + interval
        """
        now = (clock or utc_now)()
        interval = self.next_interval(
            Familiarity(familiarity), correct_count, incorrect_count, streak
        )
        logger.debug(
            f"{self.name.value}: {Familiarity(familiarity).value} "
            f"({correct_count}/{incorrect_count}, streak {streak}) -> {interval}"
        )
        return now + interval


@register(SchedulingAlgorithmName.SIMPLE)
class SimpleAlgorithm(_Scheduler):
    """
    Simplified spaced repetition (recommended for learners).

    Base interval by tier, x1.5 for accuracy >= 90%, x0.5 for accuracy
    below 60%, and up to x3 for a running streak (+20% per answer).
    """

    def next_interval(
        self,
        familiarity: Familiarity,
        correct_count: int,
        incorrect_count: int,
        streak: int,
    ) -> timedelta:
        interval_days = SIMPLE_BASE_DAYS[Familiarity(familiarity)]

        accuracy = _accuracy(correct_count, incorrect_count)
        if accuracy is not None:
            if accuracy >= 0.9:
                interval_days *= 1.5
            elif accuracy < 0.6:
                interval_days *= 0.5

        if streak > 0:
            interval_days *= min(1 + streak * 0.2, 3)

        return timedelta(days=interval_days)


@register(SchedulingAlgorithmName.SM2)
class SM2Algorithm(_Scheduler):
    """
    Improved SM-2 (Anki-style) scheduler.

    Low tiers relearn within minutes. Higher tiers get a whole-day interval
    of base * ease * streak multiplier.
    """

    def next_interval(
        self,
        familiarity: Familiarity,
        correct_count: int,
        incorrect_count: int,
        streak: int,
    ) -> timedelta:
        familiarity = Familiarity(familiarity)
        if familiarity in SM2_RELEARN_STEPS:
            return SM2_RELEARN_STEPS[familiarity]

        base_days = SM2_BASE_DAYS[familiarity]
        ease = self._ease_factor(correct_count, incorrect_count)
        streak_multiplier = min(1 + streak * 0.1, 2.0)

        return timedelta(days=round_half_up(base_days * ease * streak_multiplier))

    def _ease_factor(self, correct_count: int, incorrect_count: int) -> float:
        ease = SM2_INITIAL_EASE
        accuracy = _accuracy(correct_count, incorrect_count)
        if accuracy is None:
            return ease
        if accuracy >= 0.9:
            return min(ease + 0.1, SM2_MAX_EASE)
        elif accuracy >= 0.7:
            return max(ease - 0.1, SM2_MIN_EASE)
        else:
            return max(ease - 0.2, SM2_MIN_EASE)


@register(SchedulingAlgorithmName.FSRS)
class FSRSAlgorithm(_Scheduler):
    """
    FSRS-style scheduler.

    Stability is seeded by tier and grows 1.3x per streak answer (capped at
    ten). Difficulty starts at 5 and moves with accuracy. The interval is
    stability * difficulty^-0.8 days, capped at 100 years.
    """

    def __init__(self, params: dict | None = None):
        self.params = params or FSRS_PARAMS

    def next_interval(
        self,
        familiarity: Familiarity,
        correct_count: int,
        incorrect_count: int,
        streak: int,
    ) -> timedelta:
        difficulty = self.difficulty(correct_count, incorrect_count)
        stability = self.stability(Familiarity(familiarity), streak)

        interval_days = min(
            round_half_up(stability * math.pow(difficulty, self.params["decay"])),
            self.params["maximumInterval"],
        )
        return timedelta(days=interval_days)

    def difficulty(self, correct_count: int, incorrect_count: int) -> float:
        """Difficulty in [1, 10] from overall accuracy."""
        difficulty = self.params["initialDifficulty"]
        accuracy = _accuracy(correct_count, incorrect_count)
        if accuracy is None:
            return difficulty
        if accuracy >= 0.9:
            return max(difficulty - 0.2, self.params["minDifficulty"])
        elif accuracy >= 0.7:
            return min(difficulty + 0.1, self.params["maxDifficulty"])
        else:
            return min(difficulty + 0.3, self.params["maxDifficulty"])

    def stability(self, familiarity: Familiarity, streak: int) -> float:
        """Stability in days from tier and streak."""
        boost = min(streak, self.params["maxStreakBoost"])
        return FSRS_INITIAL_STABILITY[familiarity] * math.pow(
            self.params["stabilityGrowth"], boost
        )


def get_algorithm(name: str | SchedulingAlgorithmName) -> SchedulingAlgorithm:
    """
    Look up a registered algorithm.

    Raises:
        LookupError: Unknown algorithm name
    """
    try:
        key = SchedulingAlgorithmName(name.lower() if isinstance(name, str) else name)
    except ValueError:
        raise LookupError(f"Unknown scheduling algorithm: {name!r}") from None
    return ALGORITHMS[key]


def default_algorithm() -> SchedulingAlgorithm:
    """The algorithm selected in settings (Simple unless configured)."""
    return get_algorithm(get_settings().default_algorithm)
