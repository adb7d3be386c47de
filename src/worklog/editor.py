"""Entry editor - draft state for the selected day."""

import asyncio
import logging

from .clients import SuggestionClient
from .core.entries import Entry
from .core.tags import add_tag, merge_suggested, remove_tag
from .ports.entry_store import EntryStore

logger = logging.getLogger(__name__)


class EntryEditor:
    """
    Unsaved content and tags for one date.

    Edits stay local until save(); switching dates means building a new
    editor, which reloads from the store.
    """

    def __init__(self, store: EntryStore, entry_date: str, suggestions: SuggestionClient | None = None):
        self.store = store
        self.date = entry_date
        self.suggestions = suggestions
        self.suggesting = False

        entry = store.get(entry_date)
        self.content = entry.content if entry else ""
        self.tags: list[str] = list(entry.tags) if entry else []

    @property
    def is_dirty(self) -> bool:
        """True if the draft differs from what is stored."""
        saved = self.store.get(self.date)
        if saved is None:
            return bool(self.content or self.tags)
        return saved.content != self.content or saved.tags != self.tags

    def add_tag(self, text: str) -> None:
        self.tags = add_tag(self.tags, text)

    def remove_tag(self, tag: str) -> None:
        self.tags = remove_tag(self.tags, tag)

    async def suggest_tags(self) -> list[str]:
        """Ask for suggestions and merge them in. Returns what was suggested."""
        if self.suggestions is None or not self.content.strip():
            return []

        self.suggesting = True
        try:
            suggested = await asyncio.to_thread(self.suggestions.suggest, self.content)
        finally:
            self.suggesting = False

        if suggested:
            self.tags = merge_suggested(self.tags, suggested)
        return suggested

    def save(self) -> Entry:
        """Write the draft to the store, replacing any existing entry."""
        entry = Entry(date=self.date, content=self.content, tags=list(self.tags))
        self.store.upsert(entry)
        logger.debug(f"Saved entry for {self.date} ({len(entry.tags)} tags)")
        return entry
