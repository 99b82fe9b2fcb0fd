"""Shared test fixtures for clientdb."""

import pytest
from clientdb.core.config import ClientDBConfig
from clientdb.store.memory import InMemoryStore


@pytest.fixture
def config():
    """Create a default config without loading from disk."""
    return ClientDBConfig()


@pytest.fixture
def store():
    """Create a fresh in-memory store."""
    return InMemoryStore()
