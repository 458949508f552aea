"""Backend map validation.

Checks that every named store exposes the required capabilities before the
ADI starts talking to it.
"""

from typing import Any, Callable, Mapping, Optional

from ..entities.protocols import REQUIRED_CAPABILITIES, Backend, BackendMap
from ....core.exceptions import ConfigurationError


def get_capability(backend: Backend, name: str) -> Optional[Callable[..., Any]]:
    """Return the named capability of a backend if it is callable.
    
    Backends are either objects with methods or mappings of names to callables.
    """
    if isinstance(backend, Mapping):
        capability = backend.get(name)
    else:
        capability = getattr(backend, name, None)
    return capability if callable(capability) else None


def has_capability(backend: Backend, name: str) -> bool:
    """Check whether a backend exposes a callable capability."""
    return get_capability(backend, name) is not None


def _is_empty(backend: Backend) -> bool:
    if backend is None:
        return True
    if isinstance(backend, Mapping):
        return len(backend) == 0
    return False


def validate_backend(backend: Backend, store_name: str) -> bool:
    """Validate a single backend.
    
    Args:
        backend: Backend object or capability mapping
        store_name: Name the backend is registered under, used in errors
        
    Returns:
        True when valid
        
    Raises:
        ConfigurationError: If the backend is empty or misses a required capability
    """
    if _is_empty(backend):
        raise ConfigurationError(
            f'Invalid ADI interface: DB "{store_name}" has no methods',
            details={"store_name": store_name},
        )
    
    missing = [name for name in REQUIRED_CAPABILITIES if not has_capability(backend, name)]
    if missing:
        raise ConfigurationError(
            f'Invalid ADI interface for CacheMap DB "{store_name}"',
            details={"store_name": store_name, "missing": missing},
        )
    return True


def validate_backend_map(backends: BackendMap) -> bool:
    """Validate every backend in the map.
    
    Args:
        backends: Mapping of store name to backend
        
    Returns:
        True when every backend is valid
        
    Raises:
        ConfigurationError: If the map is empty or any backend is invalid
    """
    if not isinstance(backends, Mapping) or not backends:
        raise ConfigurationError(
            "Invalid ADI interface: the backend map must name at least one store",
            details={"store_name": None},
        )
    
    for store_name, backend in backends.items():
        validate_backend(backend, store_name)
    return True
