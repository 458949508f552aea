"""Factory for Application Data Interface instances."""

import logging
from typing import Optional

from ..entities.config import ADISettings
from ..entities.protocols import BackendMap, DefaultStore
from .adi_service import ApplicationDataInterface

logger = logging.getLogger(__name__)


def create_data_cache_api(
    backends: BackendMap,
    settings: Optional[ADISettings] = None,
    default_store: Optional[DefaultStore] = None,
    start: bool = False
) -> ApplicationDataInterface:
    """Create an ADI over a map of store name to backend.
    
    The map is validated here and again on every ``start()``.
    
    Args:
        backends: Mapping of store name to backend
        settings: ADI settings, read from the environment when omitted
        default_store: Store used when no store name is given
        start: Start the ADI before returning it
        
    Returns:
        A new, independent ApplicationDataInterface
        
    Raises:
        ConfigurationError: If a backend misses a required capability
    """
    adi = ApplicationDataInterface(backends, settings=settings, default_store=default_store)
    logger.debug(f"Created ADI for stores: {adi.store_names}")
    
    if start:
        adi.start()
    return adi
