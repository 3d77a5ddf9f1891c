"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from moedeck.core.clock import fixed_clock
from moedeck.core.familiarity import Familiarity
from moedeck.core.records import LearningRecord
from moedeck.phonetics.lookup import CharacterEntry
from moedeck.questions import parse_question


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def now():
    """A fixed moment used as "now" in scheduling tests."""
    return datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def clock(now):
    """Clock frozen at `now`."""
    return fixed_clock(now)


@pytest.fixture
def make_record(now):
    """Factory for learning records with sensible defaults."""
    def _make(**overrides):
        fields = {
            "id": "record-001",
            "question_id": "q-001",
            "subject_id": "subject-001",
            "familiarity": Familiarity.UNANSWERED,
            "last_reviewed": now,
            "next_review": now,
        }
        fields.update(overrides)
        return LearningRecord(**fields)
    return _make


@pytest.fixture
def mcq_document():
    """Multiple choice document as stored (camelCase keys)."""
    return {
        "id": "q-mcq",
        "subjectId": "subject-001",
        "type": "multiple-choice",
        "question": "Which characters are read ㄒㄧㄥˊ?",
        "options": [
            {"id": "a", "text": "行", "isCorrect": True},
            {"id": "b", "text": "形", "isCorrect": True},
            {"id": "c", "text": "星", "isCorrect": False},
        ],
        "allowMultiple": True,
        "difficulty": "easy",
    }


@pytest.fixture
def char_to_bopomofo():
    """Character-to-bopomofo question."""
    return parse_question({
        "id": "q-ctb",
        "subjectId": "subject-001",
        "type": "char-to-bopomofo",
        "question": "How is 行 read?",
        "character": "行",
        "correctBopomofo": "ㄒㄧㄥˊ",
    })


@pytest.fixture
def xing_entry():
    """Moedict entry for 行 with two heteronyms."""
    return CharacterEntry.model_validate({
        "t": "行",
        "h": [
            {
                "b": "ㄒㄧㄥˊ",
                "p": "xíng",
                "d": [{"f": "走。", "type": "動"}],
            },
            {
                "b": "ㄏㄤˊ",
                "p": "háng",
                "d": [{"f": "行列。", "type": "名"}],
            },
        ],
    })


class FakeLookup:
    """Reading lookup returning canned entries and counting calls."""

    def __init__(self, entries=None, error=None):
        self.entries = entries or {}
        self.error = error
        self.calls = []

    async def fetch_readings(self, character):
        self.calls.append(character)
        if self.error is not None:
            raise self.error
        return self.entries.get(character)


class InMemoryRepository:
    """Document repository backed by a dict, for records or sessions."""

    def __init__(self, records=None):
        self.items = {record.id: record for record in records or []}
        self.updates = []
        self._next_id = 1

    async def create(self, entity):
        entity_id = f"generated-{self._next_id}"
        self._next_id += 1
        stored = entity.model_copy(update={"id": entity_id})
        self.items[entity_id] = stored
        return stored

    async def get_by_id(self, entity_id):
        return self.items.get(entity_id)

    async def get_all(self):
        return list(self.items.values())

    async def get_by_foreign_key(self, key, value):
        attribute = {"questionId": "question_id", "subjectId": "subject_id"}[key]
        return [r for r in self.items.values() if getattr(r, attribute) == value]

    async def update(self, entity_id, partial):
        self.updates.append((entity_id, partial))
        current = self.items[entity_id].to_document()
        current.update(partial)
        self.items[entity_id] = type(self.items[entity_id]).model_validate(current)

    async def delete(self, entity_id):
        self.items.pop(entity_id, None)


@pytest.fixture
def fake_lookup(xing_entry):
    return FakeLookup({"行": xing_entry})


@pytest.fixture
def record_repository():
    return InMemoryRepository()


@pytest.fixture
def session_repository():
    return InMemoryRepository()


@pytest.fixture
def lookup_factory():
    """Build a FakeLookup with custom entries or a raised error."""
    return FakeLookup
