"""Tests for the entry editor draft."""

import asyncio
from unittest.mock import MagicMock

import pytest

from worklog.adapters.memory_store import InMemoryEntryStore
from worklog.core.entries import Entry
from worklog.editor import EntryEditor


@pytest.fixture
def suggestions():
    client = MagicMock()
    client.suggest.return_value = ["ai", "llm", "prompting"]
    return client


class TestEntryEditor:
    def test_loads_existing_entry(self, store):
        editor = EntryEditor(store, "2024-07-22")
        assert editor.content.startswith("Integrated Gemini API")
        assert editor.tags == ["ai", "gemini-api", "nlp"]
        assert not editor.is_dirty

    def test_new_date_starts_empty(self, store):
        editor = EntryEditor(store, "2024-08-01")
        assert editor.content == ""
        assert editor.tags == []
        assert not editor.is_dirty

    def test_edits_stay_local_until_save(self, store):
        editor = EntryEditor(store, "2024-07-22")
        editor.add_tag("gemini")
        editor.remove_tag("nlp")

        assert editor.is_dirty
        assert store.get("2024-07-22").tags == ["ai", "gemini-api", "nlp"]

        editor.save()
        assert store.get("2024-07-22").tags == ["ai", "gemini-api", "gemini"]
        assert not editor.is_dirty

    def test_save_creates_entry(self):
        store = InMemoryEntryStore()
        editor = EntryEditor(store, "2024-08-01")
        editor.content = "First day"
        editor.add_tag("  start ")

        saved = editor.save()

        assert saved == Entry("2024-08-01", "First day", ["start"])
        assert store.get("2024-08-01") == saved

    def test_save_empty_draft_is_valid(self):
        store = InMemoryEntryStore()
        EntryEditor(store, "2024-08-01").save()
        assert store.get("2024-08-01") == Entry("2024-08-01", "", [])

    def test_suggest_merges_tags(self, store, suggestions):
        editor = EntryEditor(store, "2024-07-22", suggestions)

        suggested = asyncio.run(editor.suggest_tags())

        assert suggested == ["ai", "llm", "prompting"]
        assert editor.tags == ["ai", "gemini-api", "nlp", "llm", "prompting"]
        assert not editor.suggesting
        suggestions.suggest.assert_called_once_with(editor.content)

    def test_suggest_skips_blank_content(self, store, suggestions):
        editor = EntryEditor(store, "2024-08-01", suggestions)
        editor.content = "   "

        assert asyncio.run(editor.suggest_tags()) == []
        suggestions.suggest.assert_not_called()

    def test_empty_suggestion_leaves_tags(self, store, suggestions):
        suggestions.suggest.return_value = []
        editor = EntryEditor(store, "2024-07-22", suggestions)

        asyncio.run(editor.suggest_tags())

        assert editor.tags == ["ai", "gemini-api", "nlp"]

    def test_suggest_without_client(self, store):
        editor = EntryEditor(store, "2024-07-22")
        assert asyncio.run(editor.suggest_tags()) == []
