"""
Client settings for memu-client.

Environment-driven configuration using Pydantic settings. Every value can be
overridden with a ``MEMU_``-prefixed environment variable or a ``.env`` file,
and explicit client constructor arguments always win over settings.
"""
from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr, field_validator

from .constants import DEFAULT_BASE_URL, Defaults


class MemUSettings(BaseSettings):
    """Settings for the MemU API client."""

    model_config = SettingsConfigDict(
        env_prefix="MEMU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials and endpoint
    api_key: Optional[SecretStr] = Field(default=None, description="API key used as bearer token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")

    # Transport
    timeout: float = Field(default=Defaults.TIMEOUT, gt=0, description="Request timeout in seconds")
    max_connections: int = Field(default=Defaults.MAX_CONNECTIONS, ge=1)

    # Retry behaviour
    max_retries: int = Field(default=Defaults.MAX_RETRIES, ge=0)
    retry_base_delay: float = Field(default=Defaults.RETRY_BASE_DELAY, ge=0)
    retry_max_delay: float = Field(default=Defaults.RETRY_MAX_DELAY, ge=0)

    # Task polling
    poll_interval: float = Field(default=Defaults.POLL_INTERVAL, gt=0)
    wait_timeout: float = Field(default=Defaults.WAIT_TIMEOUT, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def get_api_key(self) -> Optional[str]:
        """Return the plain API key, if one is configured."""
        if self.api_key is None:
            return None
        return self.api_key.get_secret_value()


@lru_cache()
def get_settings() -> MemUSettings:
    """Get cached settings instance."""
    return MemUSettings()
