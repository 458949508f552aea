"""Redis store backend for neo-adi."""

import json
import logging
from typing import Any, List, Optional, Tuple

import redis.asyncio as redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from ..entities.config import ADISettings
from ..entities.models import ListQueryOpts, PaginatedResult
from .memory_backend import paginate_items
from ....core.exceptions.infrastructure import (
    BackendConnectionError,
    BackendError,
    BackendSerializationError,
)

logger = logging.getLogger(__name__)

SEPARATOR = ":"
GLOB_CHARS = "*?[]\\"


class RedisBackend:
    """Named store kept in Redis.

    Values are stored as JSON under ``<key_prefix>:<namespace>:<key>``. Listing
    scans the namespace, so it is meant for modest store sizes.
    """

    def __init__(
        self,
        client: "redis.Redis",
        namespace: str,
        key_prefix: str = "adi",
        scan_count: int = 500,
        default_page_size: int = 20
    ):
        if not namespace:
            raise ValueError("RedisBackend requires a namespace")
        # SCAN matches on "<prefix>:<namespace>:*", so neither part may widen the pattern
        if any(c in namespace for c in SEPARATOR + GLOB_CHARS):
            raise ValueError(f"Invalid Redis namespace: {namespace}")
        if any(c in key_prefix for c in GLOB_CHARS):
            raise ValueError(f"Invalid Redis key prefix: {key_prefix}")
        self.client = client
        self.namespace = namespace
        self.key_prefix = key_prefix
        self.scan_count = scan_count
        self.default_page_size = default_page_size

    @classmethod
    def from_settings(cls, namespace: str, settings: Optional[ADISettings] = None) -> "RedisBackend":
        """Create a backend with a client built from ``ADISettings.redis_url``."""
        settings = settings or ADISettings()
        client = redis.Redis.from_url(settings.redis_url, decode_responses=True)
        return cls(client, namespace, key_prefix=settings.redis_key_prefix)

    def _full_key(self, key: str) -> str:
        return SEPARATOR.join((self.key_prefix, self.namespace, key))

    def _short_key(self, full_key: str) -> str:
        return full_key[len(self._full_key("")):]

    def _serialize(self, key: str, value: Any) -> str:
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise BackendSerializationError(
                f"Cannot serialize value for key {key}: {e}",
                details={"store_name": self.namespace, "key": key}
            )

    def _deserialize(self, key: str, raw: Any) -> Any:
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise BackendSerializationError(
                f"Cannot deserialize value for key {key}: {e}",
                details={"store_name": self.namespace, "key": key}
            )

    def _wrap_error(self, operation: str, key: Optional[str], error: RedisError) -> BackendError:
        details = {"store_name": self.namespace, "operation": operation}
        if key is not None:
            details["key"] = key
        if isinstance(error, RedisConnectionError):
            return BackendConnectionError(f"Redis connection failed during {operation}: {error}", details=details)
        return BackendError(f"Redis {operation} error for key {key}: {error}", details=details)

    async def _scan_keys(self) -> List[str]:
        keys = []
        async for full_key in self.client.scan_iter(match=self._full_key("*"), count=self.scan_count):
            if isinstance(full_key, bytes):
                full_key = full_key.decode()
            keys.append(full_key)
        return sorted(keys)

    async def get_item(self, key: str) -> Any:
        """Get value by key."""
        try:
            raw = await self.client.get(self._full_key(key))
        except RedisError as e:
            raise self._wrap_error("get", key, e)
        return self._deserialize(key, raw)

    async def put_item(self, key: str, value: Any) -> Any:
        """Add or update an item."""
        payload = self._serialize(key, value)
        try:
            await self.client.set(self._full_key(key), payload)
        except RedisError as e:
            raise self._wrap_error("set", key, e)
        return value

    async def remove_item(self, key: str) -> bool:
        """Delete key and return whether it existed."""
        try:
            return bool(await self.client.delete(self._full_key(key)))
        except RedisError as e:
            raise self._wrap_error("delete", key, e)

    async def list_items(self, opts: ListQueryOpts) -> PaginatedResult[Any]:
        """List a page of values in this namespace."""
        try:
            full_keys = await self._scan_keys()
            raw_values = await self.client.mget(full_keys) if full_keys else []
        except RedisError as e:
            raise self._wrap_error("list", None, e)

        items: List[Tuple[str, Any]] = []
        for full_key, raw in zip(full_keys, raw_values):
            # Keys deleted between SCAN and MGET come back as None
            if raw is None:
                continue
            short_key = self._short_key(full_key)
            items.append((short_key, self._deserialize(short_key, raw)))

        return paginate_items(items, opts, self.default_page_size)

    async def clear_items(self) -> int:
        """Delete every key in this namespace and return how many were removed."""
        try:
            full_keys = await self._scan_keys()
            if not full_keys:
                return 0
            deleted = await self.client.delete(*full_keys)
        except RedisError as e:
            raise self._wrap_error("clear", None, e)

        logger.info(f"Cleared {deleted} keys from Redis store {self.namespace}")
        return deleted

    async def close(self) -> None:
        """Close the underlying Redis client."""
        await self.client.aclose()
