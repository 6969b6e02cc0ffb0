"""
Storage backend configuration.

Selects the address storage adapter: 'sql' (SQLAlchemy, default) or
'memory' (process-local dict, for local demos).

Dependencies: pydantic_settings
System role: Storage adapter selection
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Address storage selection."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(
        default="sql",
        description="Storage backend: 'sql' for the relational store, 'memory' for local dev",
    )
