"""Backend and listener protocols for neo-adi.

This module defines the capability contract every named store must satisfy
and the callable shapes used by the subscriber registry.
"""

from typing import (
    Any,
    Awaitable,
    Callable,
    Mapping,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable,
)

from .models import ListQueryOpts, PaginatedResult

V = TypeVar('V')

# Names every backend must expose as callables
REQUIRED_CAPABILITIES = ("list_items", "get_item", "put_item", "remove_item")

# Names a backend may expose; missing ones are skipped, never an error
OPTIONAL_CAPABILITIES = ("clear_items",)

Listener = Callable[[str, Any, Optional[str]], Any]
Predicate = Callable[[str, Any, Optional[str]], bool]
Unsubscriber = Callable[[], None]
Fallback = Callable[[], Union[Any, Awaitable[Any]]]

# Key used for notifications and reads that cover a whole store
ALL_ITEMS_KEY = "all"


@runtime_checkable
class StoreBackend(Protocol[V]):
    """Protocol for named store implementations.
    
    Methods may be coroutines or plain functions; the cache interface awaits
    results only when they are awaitable.
    """
    
    async def list_items(self, opts: ListQueryOpts) -> Optional[PaginatedResult[V]]:
        """List items for the query."""
        ...
    
    async def get_item(self, key: Any) -> Optional[V]:
        """Get an item by key, None when absent."""
        ...
    
    async def put_item(self, key: Any, value: V) -> Any:
        """Add or update an item."""
        ...
    
    async def remove_item(self, key: Any) -> Any:
        """Remove an item."""
        ...


@runtime_checkable
class ClearableStoreBackend(StoreBackend[V], Protocol[V]):
    """Backend that also supports removing every item."""
    
    async def clear_items(self) -> Any:
        """Remove all items."""
        ...


@runtime_checkable
class DefaultStore(Protocol):
    """Protocol for the unnamed fallback store (localStorage-like, synchronous)."""
    
    def get_item(self, key: str) -> Optional[Any]:
        ...
    
    def set_item(self, key: str, value: Any) -> None:
        ...
    
    def remove_item(self, key: str) -> None:
        ...
    
    def clear(self) -> None:
        ...


# A backend is either an object with the capability methods or a mapping of
# capability names to callables.
Backend = Union[StoreBackend[Any], Mapping[str, Callable[..., Any]]]
BackendMap = Mapping[str, Backend]
