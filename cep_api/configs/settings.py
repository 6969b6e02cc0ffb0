"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from cep_api.configs.base import BaseSettings
from cep_api.configs.database import DatabaseSettings
from cep_api.configs.storage import StorageSettings
from cep_api.configs.viacep import ViaCepSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    viacep: ViaCepSettings = Field(default_factory=ViaCepSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from cep_api.configs import get_settings
        settings = get_settings()
    """
    return Settings()
