"""
Moedict API client for character readings.

Fetches the heteronym readings of a single character from the Moedict
dictionary. Any failure (network error, missing entry, malformed payload)
resolves to None so callers always get a definite answer.
"""

from __future__ import annotations

from typing import Protocol
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Definition(BaseModel):
    """One sense of a reading."""

    model_config = ConfigDict(populate_by_name=True)

    gloss: str = Field(default="", alias="f")
    part_of_speech: str = Field(default="", alias="type")


class Reading(BaseModel):
    """One heteronym reading of a character."""

    model_config = ConfigDict(populate_by_name=True)

    phonetic: str = Field(default="", alias="b")  # bopomofo
    pronunciation_latin: str = Field(default="", alias="p")  # pinyin
    definitions: list[Definition] = Field(default_factory=list, alias="d")


class CharacterEntry(BaseModel):
    """Dictionary entry for a character."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="", alias="t")
    readings: list[Reading] = Field(default_factory=list, alias="h")


class ReadingLookup(Protocol):
    """Phonetic lookup collaborator."""

    async def fetch_readings(self, character: str) -> CharacterEntry | None:
        """Entry for `character`, or None when unavailable."""
        ...


class MoedictClient:
    """HTTP client for the Moedict dictionary API."""

    def __init__(
        self,
        api_url: str = "https://www.moedict.tw",
        timeout_seconds: float = 10.0,
    ):
        """
        Initialize Moedict client.

        Args:
            api_url: Base URL for the Moedict API
            timeout_seconds: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout_seconds),
            follow_redirects=True,
        )

    @classmethod
    def from_settings(cls, settings) -> MoedictClient:
        """Build a client from application Settings."""
        return cls(
            api_url=settings.moedict_base_url,
            timeout_seconds=settings.moedict_timeout_seconds,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> MoedictClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def fetch_readings(self, character: str) -> CharacterEntry | None:
        """
        Fetch the dictionary entry of a character.

        Args:
            character: A single character, e.g. "萌"

        Returns:
            Parsed entry, or None on any failure
        """
        url = f"{self.api_url}/a/{quote(character)}.json"
        try:
            response = await self.client.get(url)
            response.raise_for_status()
            return CharacterEntry.model_validate(response.json())

        except httpx.HTTPStatusError as e:
            logger.warning(f"Moedict lookup for {character!r} returned {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.warning(f"Moedict lookup for {character!r} failed: {e}")
        except (ValueError, ValidationError) as e:
            # ValueError covers undecodable JSON bodies
            logger.warning(f"Moedict returned a malformed entry for {character!r}: {e}")

        return None
