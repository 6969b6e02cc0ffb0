"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators (the
ViaCEP client and its connection pool, the in-memory store) live in a
ServiceCache owned by the application lifespan; per-request collaborators
(database session, SQL store, service) are built per request.

Dependencies: cep_api.configs, cep_api.application, cep_api.boundary
System role: DI container for service injection
"""

import logging
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import Depends

from cep_api.application.services import AddressService
from cep_api.boundary.db import SqlAddressStore, get_async_session_factory
from cep_api.boundary.memory import InMemoryAddressStore
from cep_api.boundary.viacep import ViaCepClient
from cep_api.configs import Settings, get_settings
from cep_api.core.storage_port import AddressStoragePort

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("sql", "memory")


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._origin_client: ViaCepClient | None = None
        self._memory_store: InMemoryAddressStore | None = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def origin_client(self) -> ViaCepClient:
        """Get cached ViaCEP client."""
        if self._origin_client is None:
            viacep = self.settings.viacep
            self._origin_client = ViaCepClient(
                base_url=viacep.base_url,
                timeout_seconds=viacep.timeout_seconds,
            )
            logger.info(
                "ViaCEP client created",
                extra={"base_url": viacep.base_url, "timeout_seconds": viacep.timeout_seconds},
            )
        return self._origin_client

    @property
    def memory_store(self) -> InMemoryAddressStore:
        """Get the process-wide in-memory store."""
        if self._memory_store is None:
            self._memory_store = InMemoryAddressStore()
        return self._memory_store

    async def aclose(self) -> None:
        """Release cached instances (closes the ViaCEP connection pool)."""
        if self._origin_client is not None:
            await self._origin_client.aclose()
        self._origin_client = None
        self._memory_store = None


@lru_cache
def get_service_cache() -> ServiceCache:
    """Global service cache."""
    return ServiceCache()


def get_settings_dependency() -> Settings:
    """Get application settings."""
    return get_settings()


def get_origin_client() -> ViaCepClient:
    """Get the shared ViaCEP client."""
    return get_service_cache().origin_client


async def get_address_store(
    settings: Settings = Depends(get_settings_dependency),
) -> AsyncGenerator[AddressStoragePort, None]:
    """
    Yield the configured address store.

    'sql' opens one database session for the request and closes it
    afterwards; 'memory' yields the shared in-memory store.

    Raises:
        ValueError: If STORAGE_BACKEND is not a known backend
    """
    backend = settings.storage.backend.lower()

    if backend == "memory":
        yield get_service_cache().memory_store
    elif backend == "sql":
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            yield SqlAddressStore(session)
    else:
        raise ValueError(
            f"Invalid STORAGE_BACKEND: {backend}. Must be one of {', '.join(STORAGE_BACKENDS)}."
        )


def get_address_service(
    store: AddressStoragePort = Depends(get_address_store),
    origin: ViaCepClient = Depends(get_origin_client),
) -> AddressService:
    """
    Get address service instance.

    Args:
        store: Address store (injected via Depends)
        origin: ViaCEP client (injected via Depends)

    Returns:
        AddressService: Address service instance
    """
    return AddressService(store=store, origin=origin)
