"""Shared test fixtures."""

import pytest

from gifnar.models.entry import Entry
from gifnar.storage import EntryStore, MemoryKeyValueStore


@pytest.fixture
def food_bank_entry() -> Entry:
    """An entry logged at a food bank."""
    return Entry(
        id="a1",
        date="2025-01-10",
        org="Food Bank",
        hours=2.5,
        tasks="sorting",
        reflection="",
        tags="service",
        created_at="2025-01-10 09:00:00.000000",
    )


@pytest.fixture
def shelter_entry() -> Entry:
    """A later entry with multi-line free text."""
    return Entry(
        id="b2",
        date="2025-01-12",
        org="Animal Shelter",
        hours=1.0,
        tasks='walk, feed "the big one"',
        reflection="Dogs were happy.\nSo was I.",
        tags="animals, outdoors",
        created_at="2025-01-12 15:30:00.000000",
    )


@pytest.fixture
def backend() -> MemoryKeyValueStore:
    """Empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture
def entry_store(backend) -> EntryStore:
    """EntryStore over the in-memory backend."""
    return EntryStore(backend)
