"""
Unit tests for bopomofo normalization helpers.
"""

import pytest

from moedeck.phonetics.normalizer import (
    edit_distance,
    format_bopomofo,
    is_valid_bopomofo,
    normalize,
    similarity,
    tone_of,
)


class TestNormalize:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("ㄒㄧㄥˊ", "ㄒㄧㄥ"),
            ("ㄇㄚˇ", "ㄇㄚ"),
            ("ㄉㄚˋ", "ㄉㄚ"),
            ("˙ㄇㄜ", "ㄇㄜ"),
            ("ㄕㄢ", "ㄕㄢ"),
            ("", ""),
        ],
    )
    def test_strips_tone_marks(self, raw, expected):
        assert normalize(raw) == expected

    def test_keeps_other_characters(self):
        assert normalize("ㄇㄥˊ ㄉㄧㄢˇ") == "ㄇㄥ ㄉㄧㄢ"


class TestEditDistance:
    @pytest.mark.parametrize(
        "a,b,distance",
        [
            ("", "", 0),
            ("ㄕㄢ", "", 2),
            ("", "ㄕㄢ", 2),
            ("ㄒㄧㄥ", "ㄒㄧㄥ", 0),
            ("ㄒㄧㄥ", "ㄒㄧㄣ", 1),
            ("ㄒㄧㄥ", "ㄏㄤ", 3),
            ("kitten", "sitting", 3),
        ],
    )
    def test_distance(self, a, b, distance):
        assert edit_distance(a, b) == distance

    def test_symmetric(self):
        assert edit_distance("ㄓㄨㄤ", "ㄔㄨ") == edit_distance("ㄔㄨ", "ㄓㄨㄤ")


class TestSimilarity:
    def test_ignores_tone(self):
        assert similarity("ㄒㄧㄥˊ", "ㄒㄧㄥˋ") == 1.0

    def test_one_edit_in_three(self):
        assert similarity("ㄒㄧㄥˊ", "ㄒㄧㄣˊ") == pytest.approx(2 / 3)

    def test_disjoint(self):
        assert similarity("ㄅ", "ㄆ") == 0.0

    def test_both_empty(self):
        """Nothing left to compare after stripping tones."""
        assert similarity("", "") == 0.0
        assert similarity("ˊ", "ˇ") == 0.0

    @pytest.mark.parametrize("reading", ["ㄅ", "ㄕㄢ", "ㄒㄧㄥˊ", "˙ㄇㄜ", "ㄇㄥˊ ㄉㄧㄢˇ"])
    def test_identical_readings_score_one(self, reading):
        assert similarity(reading, reading) == 1.0

    @pytest.mark.parametrize(
        "a,b",
        [
            ("ㄕㄢ", "ㄕ"),
            ("ㄒㄧㄥˊ", "ㄏㄤ"),
            ("ㄒㄧㄥˊ", "ㄒㄧㄣˋ"),
            ("ㄅ", "ㄅㄚㄅㄚ"),
            ("ㄓㄨㄤˋ", "ㄔㄨ"),
            ("", "ㄕㄢ"),
        ],
    )
    def test_symmetric(self, a, b):
        assert similarity(a, b) == similarity(b, a)

    @pytest.mark.parametrize(
        "a,b",
        [("ㄒㄧㄥ", "ㄏㄤˊ"), ("ㄕㄢ", "ㄕ"), ("ㄅ", "ㄅㄚㄅㄚ")],
    )
    def test_bounded(self, a, b):
        assert 0.0 <= similarity(a, b) <= 1.0


class TestToneOf:
    @pytest.mark.parametrize(
        "reading,tone",
        [
            ("ㄇㄚ", 1),
            ("ㄇㄚˊ", 2),
            ("ㄇㄚˇ", 3),
            ("ㄇㄚˋ", 4),
            ("˙ㄇㄚ", 5),
        ],
    )
    def test_tone(self, reading, tone):
        assert tone_of(reading) == tone


class TestValidityAndFormat:
    def test_valid(self):
        assert is_valid_bopomofo("ㄒㄧㄥˊ") is True
        assert is_valid_bopomofo("ㄅ") is True

    @pytest.mark.parametrize("text", ["", "xing", "行", "ㄒㄧㄥ 2", "ㄒㄧㄥ ˊ"])
    def test_invalid(self, text):
        assert is_valid_bopomofo(text) is False

    def test_format_spaces_tone_marks(self):
        assert format_bopomofo("ㄒㄧㄥˊ") == "ㄒㄧㄥ ˊ"
        assert format_bopomofo("˙ㄇㄜ") == "˙ㄇㄜ"
        assert format_bopomofo("ㄕㄢ") == "ㄕㄢ"
