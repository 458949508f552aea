"""Pytest configuration and fixtures for neo-adi tests."""

import pytest
from unittest.mock import AsyncMock

from neo_adi.features.cache.adapters.local_store import LocalStore
from neo_adi.features.cache.adapters.memory_backend import MemoryBackend
from neo_adi.features.cache.entities.config import ADISettings
from neo_adi.features.cache.entities.protocols import ClearableStoreBackend, StoreBackend
from neo_adi.features.cache.services.adi_service import ApplicationDataInterface


class ListenerRecorder:
    """Listener that records every notification it receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, key, value, store_name=None):
        self.calls.append((key, value, store_name))

    @property
    def count(self):
        return len(self.calls)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


@pytest.fixture
def recorder():
    """Recording listener."""
    return ListenerRecorder()


@pytest.fixture
def make_recorder():
    """Factory for additional recording listeners."""
    return ListenerRecorder


@pytest.fixture
def settings():
    """ADI settings independent of the environment."""
    return ADISettings(isolate_listener_errors=False, default_store_max_entries=100)


@pytest.fixture
def local_store():
    """Default store for testing."""
    return LocalStore(max_entries=100)


@pytest.fixture
def users_backend():
    """In-memory named backend."""
    return MemoryBackend()


@pytest.fixture
def mock_backend():
    """Mock backend exposing only the required capabilities."""
    backend = AsyncMock(spec=StoreBackend)
    backend.get_item.return_value = None
    backend.put_item.return_value = None
    backend.remove_item.return_value = None
    backend.list_items.return_value = None
    return backend


@pytest.fixture
def mock_clearable_backend():
    """Mock backend that also supports clear_items."""
    backend = AsyncMock(spec=ClearableStoreBackend)
    backend.get_item.return_value = None
    backend.list_items.return_value = None
    return backend


@pytest.fixture
def backends(users_backend, mock_backend):
    """Backend map with one real and one mocked store."""
    return {"users": users_backend, "items": mock_backend}


@pytest.fixture
def adi(backends, settings, local_store):
    """Started ADI over the test backend map."""
    instance = ApplicationDataInterface(backends, settings=settings, default_store=local_store)
    instance.start()
    yield instance
    instance.end()
