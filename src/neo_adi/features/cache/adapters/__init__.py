"""Store adapters - default local store plus memory and Redis backends."""

from .local_store import LocalStore
from .memory_backend import MemoryBackend
from .redis_backend import RedisBackend

__all__ = [
    "LocalStore",
    "MemoryBackend",
    "RedisBackend",
]
