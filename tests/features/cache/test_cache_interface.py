"""Tests for store resolution in the cache interface."""

import pytest

from neo_adi.features.cache.adapters.memory_backend import MemoryBackend
from neo_adi.features.cache.entities.models import ListQueryOpts, PaginatedResult
from neo_adi.features.cache.services.cache_interface import CacheInterface


@pytest.fixture
def cache(backends, local_store):
    return CacheInterface(backends, local_store)


class TestResolution:
    """Test routing of operations to stores."""

    @pytest.mark.asyncio
    async def test_no_store_name_uses_default_store(self, cache, local_store):
        await cache.set_item("k", "v")

        assert local_store.get_item("k") == "v"
        assert await cache.get_item("k") == "v"

        await cache.remove_item("k")
        assert "k" not in local_store

    @pytest.mark.asyncio
    async def test_named_store_uses_backend(self, cache, users_backend, local_store):
        await cache.set_item("u1", {"name": "Ada"}, "users")

        assert await users_backend.get_item("u1") == {"name": "Ada"}
        assert len(local_store) == 0
        assert await cache.get_item("u1", "users") == {"name": "Ada"}

    @pytest.mark.asyncio
    async def test_mock_backend_receives_calls(self, cache, mock_backend):
        mock_backend.get_item.return_value = "value"

        assert await cache.get_item("i1", "items") == "value"
        await cache.set_item("i1", "new", "items")
        await cache.remove_item("i1", "items")

        mock_backend.get_item.assert_awaited_once_with("i1")
        mock_backend.put_item.assert_awaited_once_with("i1", "new")
        mock_backend.remove_item.assert_awaited_once_with("i1")

    @pytest.mark.asyncio
    async def test_unknown_store_reads_none_and_ignores_writes(self, cache, local_store):
        assert await cache.get_item("k", "missing") is None
        assert await cache.set_item("k", "v", "missing") is None
        assert await cache.remove_item("k", "missing") is None
        assert await cache.list_items(ListQueryOpts(store_name="missing")) is None
        assert len(local_store) == 0

    @pytest.mark.asyncio
    async def test_reading_all_lists_named_store(self, cache, users_backend):
        await users_backend.put_item("u1", 1)
        await users_backend.put_item("u2", 2)

        result = await cache.get_item("all", "users")

        assert isinstance(result, PaginatedResult)
        assert result.data == [1, 2]

    @pytest.mark.asyncio
    async def test_all_key_in_default_store_is_plain_key(self, cache, local_store):
        local_store.set_item("all", "plain")

        assert await cache.get_item("all") == "plain"

    def test_store_names(self, cache):
        assert cache.store_names == ["users", "items"]
        assert cache.get_backend(None) is None
        assert cache.get_backend("nope") is None


class TestBackendShapes:
    """Test mapping-of-callables and synchronous backends."""

    @pytest.mark.asyncio
    async def test_sync_mapping_backend(self, local_store):
        data = {}
        backend = {
            "get_item": data.get,
            "put_item": data.__setitem__,
            "remove_item": lambda key: data.pop(key, None),
            "list_items": lambda opts: list(data.values()),
        }
        cache = CacheInterface({"sync": backend}, local_store)

        await cache.set_item("a", 1, "sync")

        assert data == {"a": 1}
        assert await cache.get_item("a", "sync") == 1
        listed = await cache.list_items(ListQueryOpts(store_name="sync"))
        assert listed.data == [1]

    @pytest.mark.asyncio
    async def test_dict_list_result_is_coerced(self, local_store):
        async def list_items(opts):
            return {"data": ["x"], "total_results": 1, "cursor": "abc"}

        backend = {
            "get_item": lambda key: None,
            "put_item": lambda key, value: value,
            "remove_item": lambda key: None,
            "list_items": list_items,
        }
        cache = CacheInterface({"remote": backend}, local_store)

        result = await cache.list_items(ListQueryOpts(store_name="remote"))

        assert result.data == ["x"]
        assert result.total_results == 1
        assert result.model_extra == {"cursor": "abc"}

    @pytest.mark.asyncio
    async def test_list_options_passed_through(self, cache, mock_backend):
        opts = ListQueryOpts(store_name="items", page=2, results_per_page=5, filter="active")

        await cache.list_items(opts)

        mock_backend.list_items.assert_awaited_once_with(opts)


class TestClear:
    """Test clear semantics."""

    @pytest.fixture
    def clear_setup(self, local_store, mock_backend, mock_clearable_backend):
        memory = MemoryBackend({"m": 1})
        backends = {
            "memory": memory,
            "plain": mock_backend,
            "clearable": mock_clearable_backend,
        }
        local_store.set_item("d", "default")
        return CacheInterface(backends, local_store), memory

    @pytest.mark.asyncio
    async def test_no_store_clears_only_default(self, clear_setup, local_store, mock_clearable_backend):
        cache, memory = clear_setup

        cleared = await cache.clear_items()

        assert cleared == []
        assert len(local_store) == 0
        assert len(memory) == 1
        mock_clearable_backend.clear_items.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_all_clears_default_and_capable_backends(
        self, clear_setup, local_store, mock_clearable_backend
    ):
        cache, memory = clear_setup

        cleared = await cache.clear_items("all")

        assert cleared == ["memory", "clearable"]
        assert len(local_store) == 0
        assert len(memory) == 0
        mock_clearable_backend.clear_items.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_named_store_clears_only_that_backend(
        self, clear_setup, local_store, mock_clearable_backend
    ):
        cache, memory = clear_setup

        cleared = await cache.clear_items("memory")

        assert cleared == ["memory"]
        assert len(memory) == 0
        assert len(local_store) == 1
        mock_clearable_backend.clear_items.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_without_clear_is_noop(self, clear_setup, local_store):
        cache, memory = clear_setup

        assert await cache.clear_items("plain") == []
        assert await cache.clear_items("unknown") == []
        assert len(local_store) == 1
        assert len(memory) == 1
