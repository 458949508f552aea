"""Value objects passed between callers, the ADI and its backends."""

from typing import Any, Generic, List, Optional, TypeVar, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar('T')


class ListQueryOpts(BaseModel):
    """Query options for listing a store.
    
    Only ``store_name`` is interpreted by the ADI. Everything else, including
    unknown extra fields, is handed to the backend untouched.
    """
    
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    
    store_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("store_name", "cache_key"),
        description="Name of the store to list",
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number")
    results_per_page: Optional[int] = Field(default=None, ge=1, description="Items per page")
    order_by: Optional[str] = Field(default=None, description="Field to order results by")
    
    @classmethod
    def coerce(cls, opts: Union["ListQueryOpts", dict, str, None]) -> "ListQueryOpts":
        """Build query options from a model, a mapping or a bare store name."""
        if isinstance(opts, cls):
            return opts
        if opts is None:
            return cls()
        if isinstance(opts, str):
            return cls(store_name=opts)
        return cls.model_validate(opts)


class PaginatedResult(BaseModel, Generic[T]):
    """A page of results returned by a backend.
    
    Opaque to the ADI beyond ``data``.
    """
    
    model_config = ConfigDict(extra="allow")
    
    data: List[T] = Field(default_factory=list, description="Items for the current page")
    total_results: Optional[int] = Field(default=None, description="Total number of items")
    total_pages: Optional[int] = Field(default=None, description="Total number of pages")
    results_per_page: Optional[int] = Field(default=None, description="Items per page")
    page: Optional[int] = Field(default=None, description="Current page number")
    
    @classmethod
    def empty(cls) -> "PaginatedResult[Any]":
        """Result with no items."""
        return cls(data=[])
    
    @classmethod
    def create(
        cls,
        items: List[T],
        page: int,
        results_per_page: int,
        total_results: int
    ) -> "PaginatedResult[T]":
        """Create a paginated result with items and page metadata."""
        total_pages = (
            (total_results + results_per_page - 1) // results_per_page
            if results_per_page > 0 else 0
        )
        return cls(
            data=items,
            page=page,
            results_per_page=results_per_page,
            total_results=total_results,
            total_pages=total_pages,
        )
    
    @classmethod
    def coerce(cls, result: Any) -> Any:
        """Normalize a backend list result.
        
        Mappings and plain sequences become ``PaginatedResult``; ``None`` stays
        ``None`` so callers can detect an unusable result; anything else is
        returned unchanged.
        """
        if result is None or isinstance(result, PaginatedResult):
            return result
        if isinstance(result, dict):
            return cls.model_validate(result)
        if isinstance(result, (list, tuple)):
            return cls(data=list(result))
        return result


class CacheItemArgs(BaseModel):
    """A single pending write used by ``cache_multiple``."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    key: Optional[str] = Field(default=None, description="Item key")
    value: Any = Field(default=None, description="Item value, None removes the key")
    store_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("store_name", "cache_key"),
        description="Target store, None for the default store",
    )
    
    @classmethod
    def coerce(cls, item: Union["CacheItemArgs", dict, tuple, list]) -> "CacheItemArgs":
        """Build write arguments from a model, a mapping or a ``(key, value[, store])`` tuple."""
        if isinstance(item, cls):
            return item
        if isinstance(item, (tuple, list)):
            return cls(**dict(zip(("key", "value", "store_name"), item)))
        return cls.model_validate(item)
