"""Entry storage interface."""

from typing import Protocol

from ..core.entries import Entry


class EntryStore(Protocol):
    """Interface for the date -> entry mapping."""

    def get(self, entry_date: str) -> Entry | None:
        """Look up the entry for a date. Returns None if not found."""
        ...

    def upsert(self, entry: Entry) -> None:
        """Insert or fully replace the entry at entry.date."""
        ...

    def list_dates(self) -> set[str]:
        """Dates that have an entry."""
        ...

    def list_all(self) -> list[Entry]:
        """All entries, in no particular order."""
        ...
