"""Reading cache keyed by the literal character string."""

from __future__ import annotations

from collections import OrderedDict

from moedeck.phonetics.lookup import CharacterEntry


class ReadingCache:
    """
    In-memory cache of dictionary entries.

    Unbounded unless `max_size` is given, in which case the least recently
    used entry is evicted. Entries never expire.
    """

    def __init__(self, max_size: int | None = None):
        if max_size is not None and max_size < 1:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._entries: OrderedDict[str, CharacterEntry] = OrderedDict()

    def get(self, character: str) -> CharacterEntry | None:
        entry = self._entries.get(character)
        if entry is not None:
            self._entries.move_to_end(character)
        return entry

    def put(self, character: str, entry: CharacterEntry) -> None:
        self._entries[character] = entry
        self._entries.move_to_end(character)
        if self.max_size is not None and len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character: object) -> bool:
        return character in self._entries
