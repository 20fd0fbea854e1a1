"""Pytest configuration and fixtures for neo-paging tests."""

import pytest
from unittest.mock import AsyncMock

from neo_paging.config import get_settings


class ReiterableAsyncItems:
    """Async iterable handing out a fresh async generator per iteration."""

    def __init__(self, items):
        self._items = list(items)
        self.iterations = 0

    def __aiter__(self):
        self.iterations += 1
        return self._iterate()

    async def _iterate(self):
        for item in self._items:
            yield item


class RecordingQueryable:
    """Synchronous queryable source recording the calls made to it."""

    def __init__(self, items):
        self._items = list(items)
        self.calls = []

    def count(self):
        self.calls.append(("count",))
        return len(self._items)

    def slice(self, offset, limit):
        self.calls.append(("slice", offset, limit))
        return self._items[offset:offset + limit]


class RecordingAsyncQueryable:
    """Asynchronous queryable source recording the calls made to it."""

    def __init__(self, items):
        self._items = list(items)
        self.calls = []

    async def count(self):
        self.calls.append(("count",))
        return len(self._items)

    async def _slice(self, offset, limit):
        for item in self._items[offset:offset + limit]:
            yield item

    def slice(self, offset, limit):
        self.calls.append(("slice", offset, limit))
        return self._slice(offset, limit)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def twenty_five_items():
    """Ordered source of 25 items, 1..25."""
    return list(range(1, 26))


@pytest.fixture
def recording_queryable(twenty_five_items):
    return RecordingQueryable(twenty_five_items)


@pytest.fixture
def recording_async_queryable(twenty_five_items):
    return RecordingAsyncQueryable(twenty_five_items)


@pytest.fixture
def reiterable_async_items(twenty_five_items):
    return ReiterableAsyncItems(twenty_five_items)


@pytest.fixture
def async_items_factory(twenty_five_items):
    """Async generator function producing the 25 items."""
    async def factory():
        for item in twenty_five_items:
            yield item
    return factory


@pytest.fixture
def mock_database_repository():
    """Mock asyncpg connection for testing."""
    mock_db = AsyncMock()
    mock_db.fetch = AsyncMock()
    mock_db.fetchval = AsyncMock()
    return mock_db
