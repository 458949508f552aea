"""Application Data Interface service.

Sequences reads and writes across the configured stores and tells
subscribers about every write and publish.

Protocol for reads with a fallback:

1. read the resolved store;
2. on a hit, return the value without notifying;
3. on a miss, call the fallback, write its result back (which notifies once)
   and return it.
"""

import inspect
import logging
from typing import Any, Iterable, List, Optional, Tuple, Union

from ..adapters.local_store import LocalStore
from ..entities.config import ADISettings
from ..entities.models import CacheItemArgs, ListQueryOpts, PaginatedResult
from ..entities.protocols import (
    ALL_ITEMS_KEY,
    BackendMap,
    DefaultStore,
    Fallback,
    Listener,
    Predicate,
    Unsubscriber,
)
from .cache_interface import CacheInterface
from .subscriber_registry import SubscriberRegistry
from .validation import validate_backend_map
from ....core.exceptions import MissingKeyError, NotInitializedError

logger = logging.getLogger(__name__)


async def _resolve(fallback: Optional[Fallback], default: Any = None) -> Any:
    """Call a fallback producer, awaiting it when it is asynchronous."""
    if fallback is None:
        return default
    value = fallback()
    if inspect.isawaitable(value):
        value = await value
    return value


class ApplicationDataInterface:
    """Unified access to a set of named stores plus a default store.

    Each instance owns its initialization state, its cache interface and its
    subscribers. Subscribers survive ``end()`` so the interface can be
    restarted without re-registering them.
    """

    def __init__(
        self,
        backends: BackendMap,
        settings: Optional[ADISettings] = None,
        default_store: Optional[DefaultStore] = None
    ):
        validate_backend_map(backends)

        self.settings = settings or ADISettings()
        self._backends = backends
        if default_store is None:
            default_store = LocalStore(self.settings.default_store_max_entries)
        self._default_store = default_store
        self._registry = SubscriberRegistry(isolate_errors=self.settings.isolate_listener_errors)
        self._cache: Optional[CacheInterface] = None
        self._initialized = False

    # Lifecycle

    @property
    def initialized(self) -> bool:
        """Check that the ADI is initialized."""
        return self._initialized

    @property
    def store_names(self) -> List[str]:
        """Names of the configured backends."""
        return list(self._backends)

    @property
    def subscriber_count(self) -> int:
        """Number of registered listeners, scoped ones included."""
        return len(self._registry)

    @property
    def default_store(self) -> DefaultStore:
        """The store used when an operation names no store."""
        return self._default_store

    def is_initialized(self) -> bool:
        """Check if the cache layer is initialized."""
        return self._initialized

    def start(self) -> None:
        """Initialize the ADI.

        No-op when already initialized. The backend map is validated again on
        every start.

        Raises:
            ConfigurationError: If a backend misses a required capability
        """
        if self._initialized:
            return

        validate_backend_map(self._backends)
        self._cache = CacheInterface(self._backends, self._default_store)
        self._initialized = True
        logger.info(f"ADI started with stores: {', '.join(self.store_names)}")

    def end(self) -> None:
        """Stop cache interaction. Subscribers are kept; backends are not closed."""
        self._cache = None
        self._initialized = False
        logger.info("ADI ended")

    on_application_start = start
    on_application_end = end

    def _require_cache(self) -> CacheInterface:
        if not self._initialized or self._cache is None:
            raise NotInitializedError()
        return self._cache

    # Writes

    async def cache_item(self, key: str, value: Any, store_name: Optional[str] = None) -> Any:
        """Write (or, for a None value, remove) an item and notify subscribers.

        Args:
            key: Item key
            value: Item value; None removes the key
            store_name: Target store, None for the default store

        Returns:
            The value that was written or removed

        Raises:
            NotInitializedError: If the ADI is not started
            MissingKeyError: If no key is supplied
        """
        cache = self._require_cache()
        if not key:
            raise MissingKeyError(details={"store_name": store_name})

        if value is None:
            await cache.remove_item(key, store_name)
        else:
            await cache.set_item(key, value, store_name)

        self._registry.notify_all(key, value, store_name)
        return value

    async def cache_multiple(
        self,
        items: Iterable[Union[CacheItemArgs, dict, tuple]]
    ) -> None:
        """Write several items in order, notifying once per item.

        The batch is not atomic: a failure leaves earlier items written.
        """
        self._require_cache()
        batch = [CacheItemArgs.coerce(item) for item in items]
        if not batch:
            return

        for item in batch:
            await self.cache_item(item.key, item.value, item.store_name)

    async def remove_item(self, key: str, store_name: Optional[str] = None) -> None:
        """Remove an item and notify subscribers with a None value."""
        cache = self._require_cache()
        await cache.remove_item(key, store_name)
        self._registry.notify_all(key, None, store_name)

    async def clear_items(self, store_name: Optional[str] = None) -> None:
        """Clear stores without per-key notifications.

        Args:
            store_name: None clears the default store, ``"all"`` clears the
                default store and every backend able to clear, any other
                name clears that backend if it can
        """
        cache = self._require_cache()
        cleared = await cache.clear_items(store_name)
        logger.info(f"Cleared stores for {store_name or 'default'}: {cleared}")

    # Reads

    async def _fetch(
        self,
        key: str,
        store_name: Optional[str],
        fallback: Optional[Fallback]
    ) -> Tuple[Any, bool]:
        """Read an item, writing the fallback result on a miss.

        Returns:
            The value and whether it came from the fallback (and so has
            already been notified)
        """
        cache = self._require_cache()
        value = await cache.get_item(key, store_name)
        if value is not None:
            return value, False

        value = await _resolve(fallback)
        return await self.cache_item(key, value, store_name), True

    async def get_item(
        self,
        key: str,
        store_name: Optional[str] = None,
        fallback: Optional[Fallback] = None
    ) -> Any:
        """Read an item; a miss is filled from ``fallback`` and cached.

        A hit never notifies. A miss notifies exactly once, through the write.
        """
        value, _ = await self._fetch(key, store_name, fallback)
        return value

    async def publish_item(
        self,
        key: str,
        store_name: Optional[str] = None,
        fallback: Optional[Fallback] = None
    ) -> Any:
        """Read an item and notify subscribers exactly once, hit or miss."""
        value, notified = await self._fetch(key, store_name, fallback)
        if not notified:
            self._registry.notify_all(key, value, store_name)
        return value

    async def list_items(
        self,
        opts: Union[ListQueryOpts, dict, str, None],
        fallback: Optional[Fallback] = None
    ) -> Any:
        """List a named store without notifying.

        With no store name the backend is not called and an empty result is
        returned. When the store yields nothing, ``fallback`` provides the
        result (default: empty).
        """
        self._require_cache()
        return await self._list(ListQueryOpts.coerce(opts), fallback)

    async def _list(self, opts: ListQueryOpts, fallback: Optional[Fallback]) -> Any:
        cache = self._require_cache()
        if not opts.store_name:
            return PaginatedResult.empty()

        result = await cache.list_items(opts)
        if result is None:
            result = PaginatedResult.coerce(await _resolve(fallback, PaginatedResult.empty()))
        return result

    async def publish_items(
        self,
        opts: Union[ListQueryOpts, dict, str, None],
        fallback: Optional[Fallback] = None
    ) -> Any:
        """List a named store and notify once with key ``"all"``.

        Nothing is notified for the default store.
        """
        self._require_cache()
        opts = ListQueryOpts.coerce(opts)
        result = await self._list(opts, fallback)
        if opts.store_name:
            self._registry.notify_all(ALL_ITEMS_KEY, result, opts.store_name)
        return result

    # Subscriptions

    def subscribe(self, listener: Listener) -> Unsubscriber:
        """Register a listener for every notification."""
        return self._registry.subscribe(listener)

    def subscribe_to_caches(
        self,
        listener: Listener,
        store_names: Iterable[str],
        predicate: Optional[Predicate] = None
    ) -> Unsubscriber:
        """Register a listener for notifications from specific stores."""
        return self._registry.subscribe_to_caches(listener, store_names, predicate)
