"""Default (unnamed) store for neo-adi.

A synchronous, string-keyed, in-process store with the same surface as a
browser's localStorage. Used whenever an operation gives no store name.
"""

import logging
from collections import OrderedDict
from typing import Any, Iterator, List, Optional

logger = logging.getLogger(__name__)


class LocalStore:
    """In-memory key-value store with insertion-order eviction."""
    
    def __init__(self, max_entries: int = 10000):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self._store: "OrderedDict[str, Any]" = OrderedDict()
    
    def get_item(self, key: str) -> Optional[Any]:
        """Get value by key, None when absent."""
        return self._store.get(key)
    
    def set_item(self, key: str, value: Any) -> None:
        """Set key-value pair, evicting the oldest entries past capacity."""
        if key in self._store:
            del self._store[key]
        self._store[key] = value
        
        while len(self._store) > self.max_entries:
            evicted, _ = self._store.popitem(last=False)
            logger.debug(f"Default store full, evicted key {evicted}")
    
    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        self._store.pop(key, None)
    
    def clear(self) -> None:
        """Clear all entries."""
        self._store.clear()
    
    def keys(self) -> List[str]:
        """Keys in insertion order."""
        return list(self._store.keys())
    
    def __len__(self) -> int:
        return len(self._store)
    
    def __contains__(self, key: object) -> bool:
        return key in self._store
    
    def __iter__(self) -> Iterator[str]:
        return iter(list(self._store))
