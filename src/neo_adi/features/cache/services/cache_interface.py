"""Cache interface - resolves store names to backends.

Gives the ADI one uniform get/set/remove/list/clear surface over the named
backends and the default store. Unknown store names read as empty and
swallow writes; nothing here raises for them.
"""

import inspect
import logging
from typing import Any, Dict, List, Optional

from ..entities.models import ListQueryOpts, PaginatedResult
from ..entities.protocols import ALL_ITEMS_KEY, Backend, BackendMap, DefaultStore
from .validation import get_capability

logger = logging.getLogger(__name__)


async def _call(backend: Backend, capability: str, *args: Any) -> Any:
    """Invoke a backend capability, awaiting the result if it is awaitable."""
    result = get_capability(backend, capability)(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class CacheInterface:
    """Reads from and writes to the configured stores."""
    
    def __init__(self, backends: BackendMap, default_store: DefaultStore):
        self._backends: Dict[str, Backend] = dict(backends)
        self.default_store = default_store
    
    @property
    def store_names(self) -> List[str]:
        """Names of the configured backends."""
        return list(self._backends)
    
    def get_backend(self, store_name: Optional[str]) -> Optional[Backend]:
        """Backend registered under ``store_name``, or None."""
        if not store_name:
            return None
        return self._backends.get(store_name)
    
    async def get_item(self, key: str, store_name: Optional[str] = None) -> Any:
        """Get an item from a store.
        
        Reading ``"all"`` from a named store lists the whole store.
        """
        if not store_name:
            return self.default_store.get_item(key)
        
        backend = self.get_backend(store_name)
        if backend is None:
            logger.debug(f"Read of {key} from unknown store {store_name}")
            return None
        
        if key == ALL_ITEMS_KEY:
            return await self.list_items(ListQueryOpts(store_name=store_name))
        
        logger.debug(f"Read {key} from {store_name}")
        return await _call(backend, "get_item", key)
    
    async def set_item(self, key: str, value: Any, store_name: Optional[str] = None) -> Any:
        """Add or update an item in a store."""
        if not store_name:
            self.default_store.set_item(key, value)
            return value
        
        backend = self.get_backend(store_name)
        if backend is None:
            logger.debug(f"Write of {key} to unknown store {store_name} ignored")
            return None
        
        logger.debug(f"Write {key} to {store_name}")
        return await _call(backend, "put_item", key, value)
    
    async def remove_item(self, key: str, store_name: Optional[str] = None) -> Any:
        """Remove an item from a store."""
        if not store_name:
            return self.default_store.remove_item(key)
        
        backend = self.get_backend(store_name)
        if backend is None:
            return None
        
        logger.debug(f"Remove {key} from {store_name}")
        return await _call(backend, "remove_item", key)
    
    async def list_items(self, opts: ListQueryOpts) -> Optional[Any]:
        """List items in a named store.
        
        Returns None when the store is unknown or the backend produced nothing.
        """
        backend = self.get_backend(opts.store_name)
        if backend is None:
            return None
        
        logger.debug(f"List {opts.store_name}")
        return PaginatedResult.coerce(await _call(backend, "list_items", opts))
    
    async def clear_items(self, store_name: Optional[str] = None) -> List[str]:
        """Clear one store, the default store, or everything with ``"all"``.
        
        Backends without a ``clear_items`` capability are skipped.
        
        Returns:
            Names of the backends that were cleared
        """
        cleared: List[str] = []
        
        if not store_name or store_name == ALL_ITEMS_KEY:
            self.default_store.clear()
        
        if store_name == ALL_ITEMS_KEY:
            targets = list(self._backends.items())
        elif store_name and store_name in self._backends:
            targets = [(store_name, self._backends[store_name])]
        else:
            targets = []
        
        for name, backend in targets:
            if get_capability(backend, "clear_items") is None:
                logger.debug(f"Store {name} does not support clear_items, skipped")
                continue
            await _call(backend, "clear_items")
            cleared.append(name)
        
        return cleared
