"""Shared fixtures."""

import pytest

from worklog.adapters.memory_store import InMemoryEntryStore
from worklog.adapters.sample_data import SAMPLE_ENTRIES
from worklog.core.entries import Entry


@pytest.fixture
def sample_entries():
    return [e.copy() for e in SAMPLE_ENTRIES]


@pytest.fixture
def store():
    return InMemoryEntryStore.with_sample_entries()


@pytest.fixture
def entry():
    return Entry(date="2024-08-01", content="Shipped the release.", tags=["release", "ops"])
