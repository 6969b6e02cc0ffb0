"""API-specific dependencies."""

from .dependencies import (
    get_address_service,
    get_address_store,
    get_origin_client,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_address_service",
    "get_address_store",
    "get_origin_client",
    "get_service_cache",
    "get_settings_dependency",
]
