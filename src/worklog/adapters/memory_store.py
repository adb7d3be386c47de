"""In-memory entry storage adapter."""

from ..core.entries import Entry
from ..core.tags import unique_tags
from .sample_data import SAMPLE_ENTRIES


class InMemoryEntryStore:
    """
    Session-scoped entry storage.

    Implements EntryStore protocol. Entries are copied on the way in and on
    the way out so callers only ever hold transient copies.
    """

    def __init__(self, entries: list[Entry] | None = None):
        self._entries: dict[str, Entry] = {}
        for entry in entries or []:
            self.upsert(entry)

    @classmethod
    def with_sample_entries(cls) -> "InMemoryEntryStore":
        """Store preloaded with the seed entries."""
        return cls(SAMPLE_ENTRIES)

    def get(self, entry_date: str) -> Entry | None:
        """Look up the entry for a date. Returns None if not found."""
        entry = self._entries.get(entry_date)
        return entry.copy() if entry else None

    def upsert(self, entry: Entry) -> None:
        """Insert or fully replace the entry at entry.date. Duplicate tags are dropped."""
        self._entries[entry.date] = Entry(entry.date, entry.content, unique_tags(entry.tags))

    def list_dates(self) -> set[str]:
        """Dates that have an entry."""
        return set(self._entries)

    def list_all(self) -> list[Entry]:
        """All entries, in no particular order."""
        return [entry.copy() for entry in self._entries.values()]

    def __len__(self) -> int:
        return len(self._entries)
