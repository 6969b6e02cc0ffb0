"""
Address storage port.

Abstract contract every address store implements. Reads never mutate.
save() owns the timestamp contract: created_at is assigned once on insert
and never touched again; updated_at is assigned on every later save.

Dependencies: abc, cep_api.core
System role: Persistence boundary for the address service
"""

from abc import ABC, abstractmethod

from cep_api.core.address import AddressRecord
from cep_api.core.pagination import Page, PageRequest


class AddressStoragePort(ABC):
    """Persistence operations for address records keyed by CEP."""

    @abstractmethod
    async def find_by_code(self, code: str) -> AddressRecord | None:
        """Exact CEP match; None when absent."""

    @abstractmethod
    async def exists_by_code(self, code: str) -> bool:
        """True when a record with this CEP exists."""

    @abstractmethod
    async def exists_by_code_excluding_id(self, code: str, exclude_id: int) -> bool:
        """True when a record other than ``exclude_id`` holds this CEP."""

    @abstractmethod
    async def search_by_street_fragment(
        self, fragment: str, page: PageRequest
    ) -> Page[AddressRecord]:
        """Case-insensitive substring match on street."""

    @abstractmethod
    async def search_by_city(self, city: str, page: PageRequest) -> Page[AddressRecord]:
        """Case-insensitive exact match on city."""

    @abstractmethod
    async def search_by_state(
        self, state_code: str, page: PageRequest
    ) -> Page[AddressRecord]:
        """Case-insensitive exact match on UF."""

    @abstractmethod
    async def search_by_neighborhood_and_city(
        self, neighborhood: str, city: str, page: PageRequest
    ) -> Page[AddressRecord]:
        """Case-insensitive exact match on both neighborhood and city."""

    @abstractmethod
    async def count_by_city(self, city: str) -> int:
        """Number of records in a city (case-insensitive)."""

    @abstractmethod
    async def list_all(self, page: PageRequest) -> Page[AddressRecord]:
        """Every record, ordered and paginated."""

    @abstractmethod
    async def save(self, record: AddressRecord) -> AddressRecord:
        """
        Insert when record.id is None, update otherwise.

        Returns:
            AddressRecord: The stored state, with id and timestamps assigned

        Raises:
            DuplicatePostalCodeError: If the write violates CEP uniqueness
        """

    @abstractmethod
    async def delete(self, record: AddressRecord) -> None:
        """Permanently remove the record."""
