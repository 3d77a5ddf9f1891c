"""
Bopomofo normalization and similarity.

A bopomofo reading is a run of syllable glyphs optionally followed by one
tone mark. No mark means first tone; the four marks are second, third,
fourth and neutral tone.
"""

from __future__ import annotations

import re

from rapidfuzz.distance import Levenshtein

TONE_MARKS = {
    "ˊ": 2,
    "ˇ": 3,
    "ˋ": 4,
    "˙": 5,
}

_TONE_PATTERN = re.compile("[ˊˇˋ˙]")
_BOPOMOFO_PATTERN = re.compile("^[ㄅ-ㄩˊˇˋ˙]+$")


def normalize(bopomofo: str) -> str:
    """Strip all tone marks."""
    return _TONE_PATTERN.sub("", bopomofo)


def edit_distance(s1: str, s2: str) -> int:
    """Levenshtein distance (unit cost insert, delete, substitute)."""
    return Levenshtein.distance(s1, s2)


def similarity(a: str, b: str) -> float:
    """
    Tone-insensitive similarity in [0, 1].

    1 - edit_distance / longest length over the tone-stripped strings.
    Two strings that are empty after stripping score 0.
    """
    normalized_a = normalize(a)
    normalized_b = normalize(b)

    max_length = max(len(normalized_a), len(normalized_b))
    if max_length == 0:
        return 0.0

    if normalized_a == normalized_b:
        return 1.0

    return 1 - edit_distance(normalized_a, normalized_b) / max_length


def tone_of(bopomofo: str) -> int:
    """Tone number 1-5 (5 = neutral). Unmarked readings are first tone."""
    for mark, tone in TONE_MARKS.items():
        if mark in bopomofo:
            return tone
    return 1


def is_valid_bopomofo(text: str) -> bool:
    """True when `text` only holds bopomofo glyphs and tone marks."""
    return bool(_BOPOMOFO_PATTERN.match(text))


def format_bopomofo(bopomofo: str) -> str:
    """Put a space before each tone mark for readability."""
    return _TONE_PATTERN.sub(lambda m: f" {m.group(0)}", bopomofo).strip()
