"""
Interfaces of the collaborators surrounding the core.

The study application stores its entities in a hosted document store,
authenticates through an external provider and keeps user preferences in
a key-value settings document. The core only depends on these protocols;
implementations live outside this package.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class Repository(Protocol[T]):
    """CRUD over one entity collection (Subject, Question, LearningRecord, StudySession)."""

    async def create(self, entity: T) -> T:
        """Store a new entity and return it with its assigned id."""
        ...

    async def get_by_id(self, entity_id: str) -> T | None:
        ...

    async def get_all(self) -> list[T]:
        ...

    async def get_by_foreign_key(self, key: str, value: str) -> list[T]:
        """Entities whose `key` (subjectId or questionId) equals `value`."""
        ...

    async def update(self, entity_id: str, partial: dict[str, Any]) -> None:
        """Merge `partial` (camelCase document fields) into the stored entity."""
        ...

    async def delete(self, entity_id: str) -> None:
        ...


class AuthProvider(Protocol):
    """Authentication provider yielding an opaque user identity."""

    def current_user_id(self) -> str | None:
        ...


class AppSettings(BaseModel):
    """User preferences kept in the settings document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    theme: Literal["light", "dark", "system"] = "system"
    show_hints: bool = True
    auto_advance: bool = False
    sound_enabled: bool = True
    keyboard_shortcuts: bool = True
    review_interval: int = Field(default=1, ge=1)  # days
    new_questions_per_session: int = Field(default=20, ge=1)


class SettingsStore(Protocol):
    """Key-value store holding the AppSettings document."""

    async def get(self) -> AppSettings:
        """Stored settings, or defaults when none were saved."""
        ...

    async def update(self, partial: dict[str, Any]) -> None:
        ...
