"""
Phonetic answer validation.

Judges a submitted bopomofo reading against every reading the dictionary
knows for a character (heteronyms included):

1. exact match                      -> correct, confidence 1.0
2. match once tone marks are gone   -> correct, confidence 0.8
3. otherwise best fuzzy similarity  -> correct when above 0.7

The verdict is advisory. It never gates AnswerEvaluator correctness.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from moedeck.phonetics.cache import ReadingCache
from moedeck.phonetics.lookup import CharacterEntry, ReadingLookup
from moedeck.phonetics.normalizer import normalize, similarity

EXACT_CONFIDENCE = 1.0
TONELESS_CONFIDENCE = 0.8
SIMILARITY_THRESHOLD = 0.7


class MatchStatus(str, Enum):
    """How a validation verdict was reached."""

    EXACT = "exact"
    TONELESS = "toneless"  # matched after stripping tone marks
    SIMILAR = "similar"  # fuzzy match above threshold
    MISMATCH = "mismatch"  # candidates found, none close enough
    UNVERIFIED = "unverified"  # no candidates (unknown character or lookup failure)


@dataclass(frozen=True)
class ValidationResult:
    """Verdict on one phonetic answer."""

    is_correct: bool
    confidence: float
    matched_reading: str | None = None
    status: MatchStatus = MatchStatus.UNVERIFIED


class PhoneticValidator:
    """Validates bopomofo answers through a reading lookup."""

    def __init__(self, lookup: ReadingLookup, cache: ReadingCache | None = None):
        """
        Args:
            lookup: Collaborator returning dictionary entries
            cache: Entry cache owned by the caller; a private unbounded
                cache is created when omitted
        """
        self.lookup = lookup
        self.cache = cache if cache is not None else ReadingCache()

    async def entry(self, character: str) -> CharacterEntry | None:
        """Dictionary entry for `character`, served from cache when possible."""
        cached = self.cache.get(character)
        if cached is not None:
            logger.debug(f"Reading cache hit for {character!r}")
            return cached

        logger.debug(f"Reading cache miss for {character!r}, fetching")
        try:
            entry = await self.lookup.fetch_readings(character)
        except Exception as e:
            logger.warning(f"Reading lookup for {character!r} raised: {e}")
            return None

        if entry is not None:
            self.cache.put(character, entry)
        return entry

    async def readings(self, character: str) -> list[str]:
        """Candidate bopomofo readings of `character`, empty ones dropped."""
        entry = await self.entry(character)
        if entry is None:
            return []
        return [reading.phonetic for reading in entry.readings if reading.phonetic]

    async def standard_reading(self, character: str) -> str | None:
        """The first listed reading of `character`."""
        candidates = await self.readings(character)
        return candidates[0] if candidates else None

    async def validate(self, character: str, input_phonetic: str) -> ValidationResult:
        """
        Judge `input_phonetic` as a reading of `character`.

        Never raises: lookup failures yield an UNVERIFIED verdict with
        confidence 0.
        """
        candidates = await self.readings(character)
        if not candidates:
            return ValidationResult(is_correct=False, confidence=0.0)

        if input_phonetic in candidates:
            return ValidationResult(
                is_correct=True,
                confidence=EXACT_CONFIDENCE,
                matched_reading=input_phonetic,
                status=MatchStatus.EXACT,
            )

        normalized_input = normalize(input_phonetic)
        for candidate in candidates:
            if normalize(candidate) == normalized_input:
                return ValidationResult(
                    is_correct=True,
                    confidence=TONELESS_CONFIDENCE,
                    matched_reading=candidate,
                    status=MatchStatus.TONELESS,
                )

        # max() keeps the first candidate among equal scores
        best_score, best_candidate = max(
            ((similarity(input_phonetic, c), c) for c in candidates),
            key=lambda scored: scored[0],
        )
        matched = best_score > SIMILARITY_THRESHOLD

        return ValidationResult(
            is_correct=matched,
            confidence=best_score,
            matched_reading=best_candidate,
            status=MatchStatus.SIMILAR if matched else MatchStatus.MISMATCH,
        )

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_size(self) -> int:
        return self.cache.size()
