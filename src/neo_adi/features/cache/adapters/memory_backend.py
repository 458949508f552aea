"""Memory store backend for neo-adi."""

import asyncio
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from ..entities.models import ListQueryOpts, PaginatedResult

logger = logging.getLogger(__name__)

V = TypeVar('V')


def _sort_group(value: Any) -> str:
    """Values of different types sort by group first; ints and floats share one."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return "number"
    return type(value).__name__


def _field_value(key: str, value: Any, field: str) -> Any:
    if field == "key":
        return key
    if isinstance(value, dict):
        return value.get(field)
    return getattr(value, field, None)


def order_items(items: List[Tuple[str, Any]], order_by: Optional[str]) -> List[Tuple[str, Any]]:
    """Sort ``(key, value)`` pairs by ``order_by``, a leading ``-`` meaning descending.

    Items lacking the field keep their relative order and come after the rest
    in either direction. Values of different types are grouped by type, and
    values that cannot be compared at all are ordered by their string form.
    """
    if not order_by:
        return items
    descending = order_by.startswith("-")
    field = order_by.lstrip("-") or "key"

    present: List[Tuple[Any, Tuple[str, Any]]] = []
    missing: List[Tuple[str, Any]] = []
    for item in items:
        candidate = _field_value(item[0], item[1], field)
        if candidate is None:
            missing.append(item)
        else:
            present.append((candidate, item))

    try:
        ordered = sorted(present, key=lambda p: (_sort_group(p[0]), p[0]), reverse=descending)
    except TypeError:
        ordered = sorted(present, key=lambda p: (_sort_group(p[0]), str(p[0])), reverse=descending)
    return [item for _, item in ordered] + missing


def paginate_items(
    items: List[Tuple[str, Any]],
    opts: ListQueryOpts,
    default_page_size: int = 20
) -> PaginatedResult[Any]:
    """Order and slice ``(key, value)`` pairs according to the query options."""
    items = order_items(items, opts.order_by)
    total = len(items)
    if opts.page is None and opts.results_per_page is None:
        return PaginatedResult(data=[v for _, v in items], total_results=total)
    
    page = opts.page or 1
    per_page = opts.results_per_page or default_page_size
    start = (page - 1) * per_page
    page_items = [v for _, v in items[start:start + per_page]]
    return PaginatedResult.create(page_items, page, per_page, total)


class MemoryBackend(Generic[V]):
    """In-memory named store implementing the full backend contract.
    
    ``list_items`` supports ``page``/``results_per_page`` pagination and
    ``order_by`` on the key or on a field of the stored values. Prefix the
    field with ``-`` for descending order.
    """
    
    def __init__(self, initial: Optional[Dict[str, V]] = None, default_page_size: int = 20):
        self.default_page_size = default_page_size
        self._store: Dict[str, V] = dict(initial or {})
        self._lock = asyncio.Lock()
    
    async def get_item(self, key: str) -> Optional[V]:
        """Get value by key."""
        async with self._lock:
            return self._store.get(key)
    
    async def put_item(self, key: str, value: V) -> V:
        """Add or update an item."""
        async with self._lock:
            self._store[key] = value
            return value
    
    async def remove_item(self, key: str) -> bool:
        """Remove key and return whether it existed."""
        async with self._lock:
            return self._store.pop(key, None) is not None
    
    async def clear_items(self) -> None:
        """Clear all entries."""
        async with self._lock:
            self._store.clear()
        logger.debug("Memory backend cleared")
    
    async def list_items(self, opts: ListQueryOpts) -> PaginatedResult[V]:
        """List a page of values."""
        async with self._lock:
            items: List[Tuple[str, V]] = list(self._store.items())
        
        return paginate_items(items, opts, self.default_page_size)
    
    def __len__(self) -> int:
        return len(self._store)
