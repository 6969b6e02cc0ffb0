"""Service orchestrators."""

from .address_service import AddressService

__all__ = ["AddressService"]
