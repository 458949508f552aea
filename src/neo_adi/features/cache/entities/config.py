"""ADI configuration for neo-adi."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ADISettings(BaseSettings):
    """Global Application Data Interface settings."""
    
    model_config = SettingsConfigDict(
        env_prefix="NEO_ADI_",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Notification behaviour
    isolate_listener_errors: bool = Field(
        default=False,
        description="Log listener exceptions and keep notifying instead of propagating",
    )
    
    # Default (unnamed) store
    default_store_max_entries: int = Field(default=10000, ge=1, description="Max default store entries")
    
    # Redis backend configuration
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    redis_key_prefix: str = Field(default="adi", description="Prefix for every Redis key")
    
    @field_validator("redis_key_prefix")
    @classmethod
    def validate_key_prefix(cls, v: str) -> str:
        """Key prefixes may not contain glob characters used when scanning."""
        if any(c in v for c in "*?[]\\"):
            raise ValueError(f"Invalid Redis key prefix: {v}")
        return v
