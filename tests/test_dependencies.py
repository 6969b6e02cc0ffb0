"""
Test suite for dependency injection container.

Tests factory functions for store/service creation and the service cache.

System role: Verification of DI container
"""

import pytest

from cep_api.api.deps.dependencies import (
    ServiceCache,
    get_address_service,
    get_address_store,
)
from cep_api.application.services import AddressService
from cep_api.boundary.memory import InMemoryAddressStore
from cep_api.boundary.viacep import ViaCepClient
from cep_api.configs import Settings
from cep_api.configs.storage import StorageSettings


class TestServiceCache:
    """Test suite for ServiceCache lazy collaborators."""

    @pytest.mark.asyncio
    async def test_origin_client_is_built_once_from_settings(self) -> None:
        # Arrange
        cache = ServiceCache(Settings(_env_file=None))

        # Act
        first = cache.origin_client
        second = cache.origin_client

        # Assert
        assert isinstance(first, ViaCepClient)
        assert first is second
        assert first.base_url == "https://viacep.com.br/ws"
        await cache.aclose()

    def test_memory_store_is_shared(self) -> None:
        cache = ServiceCache(Settings(_env_file=None))

        assert cache.memory_store is cache.memory_store


class TestGetAddressStore:
    """Test suite for get_address_store backend selection."""

    @pytest.mark.asyncio
    async def test_memory_backend_yields_memory_store(self) -> None:
        settings = Settings(storage=StorageSettings(backend="memory"))

        gen = get_address_store(settings=settings)
        store = await gen.__anext__()
        await gen.aclose()

        assert isinstance(store, InMemoryAddressStore)

    @pytest.mark.asyncio
    async def test_unknown_backend_raises(self) -> None:
        settings = Settings(storage=StorageSettings(backend="mongo"))

        with pytest.raises(ValueError, match="Invalid STORAGE_BACKEND"):
            await get_address_store(settings=settings).__anext__()


def test_get_address_service_wires_collaborators(memory_store, fake_origin) -> None:
    service = get_address_service(store=memory_store, origin=fake_origin)

    assert isinstance(service, AddressService)
    assert service.store is memory_store
    assert service.origin is fake_origin
