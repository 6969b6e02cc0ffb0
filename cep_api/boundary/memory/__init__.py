"""Process-local address storage."""

from cep_api.boundary.memory.address_store import InMemoryAddressStore

__all__ = ["InMemoryAddressStore"]
