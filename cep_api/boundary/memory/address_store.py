"""
In-memory address store.

AddressStoragePort over a dict, used for local development
(STORAGE_BACKEND=memory) and for exercising the service without a
database. Follows the same timestamp and uniqueness rules as the SQL store.

Dependencies: asyncio, cep_api.core
System role: Non-persistent storage adapter
"""

import asyncio
import itertools
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Iterable

from cep_api.core.address import AddressRecord
from cep_api.core.exceptions import AddressNotFoundError, DuplicatePostalCodeError
from cep_api.core.pagination import Page, PageRequest
from cep_api.core.storage_port import AddressStoragePort


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryAddressStore(AddressStoragePort):
    """Dict-backed store; records are copied in and out so callers never share state."""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self.clock = clock
        self._rows: dict[int, AddressRecord] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    def _find(self, code: str) -> AddressRecord | None:
        return next((r for r in self._rows.values() if r.postal_code == code), None)

    def _page(self, rows: Iterable[AddressRecord], page: PageRequest) -> Page[AddressRecord]:
        # None sorts before any value; ties stay in ascending id order
        def key(record: AddressRecord):
            value = getattr(record, page.sort)
            return (value is not None, value if value is not None else "")

        ordered = sorted(rows, key=lambda r: r.id)
        ordered.sort(key=key, reverse=page.descending)
        window = ordered[page.offset: page.offset + page.size]
        return Page(
            items=[replace(r) for r in window],
            request=page,
            total_elements=len(ordered),
        )

    async def find_by_code(self, code: str) -> AddressRecord | None:
        record = self._find(code)
        return replace(record) if record else None

    async def exists_by_code(self, code: str) -> bool:
        return self._find(code) is not None

    async def exists_by_code_excluding_id(self, code: str, exclude_id: int) -> bool:
        return any(
            r.postal_code == code and r.id != exclude_id for r in self._rows.values()
        )

    async def search_by_street_fragment(
        self, fragment: str, page: PageRequest
    ) -> Page[AddressRecord]:
        needle = fragment.lower()
        return self._page(
            (r for r in self._rows.values() if needle in (r.street or "").lower()), page
        )

    async def search_by_city(self, city: str, page: PageRequest) -> Page[AddressRecord]:
        return self._page(
            (r for r in self._rows.values() if r.city.lower() == city.lower()), page
        )

    async def search_by_state(
        self, state_code: str, page: PageRequest
    ) -> Page[AddressRecord]:
        return self._page(
            (r for r in self._rows.values() if r.state_code.upper() == state_code.upper()),
            page,
        )

    async def search_by_neighborhood_and_city(
        self, neighborhood: str, city: str, page: PageRequest
    ) -> Page[AddressRecord]:
        return self._page(
            (
                r
                for r in self._rows.values()
                if r.neighborhood.lower() == neighborhood.lower()
                and r.city.lower() == city.lower()
            ),
            page,
        )

    async def count_by_city(self, city: str) -> int:
        return sum(1 for r in self._rows.values() if r.city.lower() == city.lower())

    async def list_all(self, page: PageRequest) -> Page[AddressRecord]:
        return self._page(self._rows.values(), page)

    async def save(self, record: AddressRecord) -> AddressRecord:
        async with self._lock:
            conflict = self._find(record.postal_code)
            if conflict is not None and conflict.id != record.id:
                raise DuplicatePostalCodeError(record.postal_code)

            if record.id is None:
                stored = replace(
                    record, id=next(self._ids), created_at=self.clock(), updated_at=None
                )
            else:
                current = self._rows.get(record.id)
                if current is None:
                    raise AddressNotFoundError(record.postal_code, details={"id": record.id})
                stored = current.apply(record.writable_fields())
                stored.updated_at = self.clock()

            self._rows[stored.id] = stored
            return replace(stored)

    async def delete(self, record: AddressRecord) -> None:
        async with self._lock:
            self._rows.pop(record.id, None)
