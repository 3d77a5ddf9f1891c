"""
Phonetic (bopomofo) support.

Components:
- normalizer: tone stripping, edit distance, similarity
- lookup: Moedict client returning a character's heteronym readings
- cache: reading cache owned by whoever composes the validator
- validator: tone-aware and fuzzy validation of bopomofo answers
"""

from moedeck.phonetics.cache import ReadingCache
from moedeck.phonetics.lookup import (
    CharacterEntry,
    Definition,
    MoedictClient,
    Reading,
    ReadingLookup,
)
from moedeck.phonetics.normalizer import (
    edit_distance,
    format_bopomofo,
    is_valid_bopomofo,
    normalize,
    similarity,
    tone_of,
)
from moedeck.phonetics.validator import MatchStatus, PhoneticValidator, ValidationResult

__all__ = [
    "CharacterEntry",
    "Definition",
    "MatchStatus",
    "MoedictClient",
    "PhoneticValidator",
    "Reading",
    "ReadingCache",
    "ReadingLookup",
    "ValidationResult",
    "edit_distance",
    "format_bopomofo",
    "is_valid_bopomofo",
    "normalize",
    "similarity",
    "tone_of",
]
