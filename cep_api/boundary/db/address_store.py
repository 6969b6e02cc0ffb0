"""
Relational address store.

AddressStoragePort implementation over SQLAlchemy's async session. Each
mutating call is its own transaction (commit on success, rollback on
failure). Timestamps are assigned here, explicitly, never by ORM hooks.

Dependencies: sqlalchemy, cep_api.boundary.db.CRUD, cep_api.core
System role: Production storage adapter for address records
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cep_api.boundary.db.CRUD.address_crud import AddressCRUD, address_crud
from cep_api.boundary.db.models.address_model import AddressModel
from cep_api.core.address import AddressRecord
from cep_api.core.exceptions import AddressNotFoundError, DuplicatePostalCodeError
from cep_api.core.pagination import Page, PageRequest
from cep_api.core.storage_port import AddressStoragePort

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SqlAddressStore(AddressStoragePort):
    """Address storage backed by the tb_enderecos table."""

    def __init__(
        self,
        db: AsyncSession,
        crud: AddressCRUD = address_crud,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Args:
            db: Async SQLAlchemy session (one per request)
            crud: Address query helper
            clock: Timestamp source for created_at/updated_at
        """
        self.db = db
        self.crud = crud
        self.clock = clock

    @staticmethod
    def _page(rows_and_total, page: PageRequest) -> Page[AddressRecord]:
        rows, total = rows_and_total
        return Page(items=[row.to_record() for row in rows], request=page, total_elements=total)

    async def find_by_code(self, code: str) -> AddressRecord | None:
        model = await self.crud.get_by_cep(self.db, code)
        return model.to_record() if model else None

    async def exists_by_code(self, code: str) -> bool:
        return await self.crud.exists_by_cep(self.db, code)

    async def exists_by_code_excluding_id(self, code: str, exclude_id: int) -> bool:
        return await self.crud.exists_by_cep_excluding_id(self.db, code, exclude_id)

    async def search_by_street_fragment(
        self, fragment: str, page: PageRequest
    ) -> Page[AddressRecord]:
        return self._page(await self.crud.search_by_street(self.db, fragment, page), page)

    async def search_by_city(self, city: str, page: PageRequest) -> Page[AddressRecord]:
        return self._page(await self.crud.search_by_city(self.db, city, page), page)

    async def search_by_state(
        self, state_code: str, page: PageRequest
    ) -> Page[AddressRecord]:
        return self._page(await self.crud.search_by_state(self.db, state_code, page), page)

    async def search_by_neighborhood_and_city(
        self, neighborhood: str, city: str, page: PageRequest
    ) -> Page[AddressRecord]:
        rows_and_total = await self.crud.search_by_neighborhood_and_city(
            self.db, neighborhood, city, page
        )
        return self._page(rows_and_total, page)

    async def count_by_city(self, city: str) -> int:
        return await self.crud.count_by_city(self.db, city)

    async def list_all(self, page: PageRequest) -> Page[AddressRecord]:
        return self._page(await self.crud.list_all(self.db, page), page)

    async def save(self, record: AddressRecord) -> AddressRecord:
        """
        Insert or update a record and commit.

        Insert: created_at = now, updated_at = NULL.
        Update: every writable column replaced, updated_at = now,
        created_at untouched.

        Raises:
            DuplicatePostalCodeError: Unique index on cep rejected the write
            AddressNotFoundError: record.id does not exist anymore
        """
        if record.id is None:
            model = AddressModel(
                **record.writable_fields(),
                created_at=self.clock(),
                updated_at=None,
            )
        else:
            model = await self.crud.get_by_id(self.db, record.id)
            if model is None:
                raise AddressNotFoundError(record.postal_code, details={"id": record.id})
            for name, value in record.writable_fields().items():
                setattr(model, name, value)
            model.updated_at = self.clock()

        try:
            await self.crud.add(self.db, model)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                "Address write rejected by unique constraint",
                extra={"postal_code": record.postal_code, "error": str(e.orig)},
            )
            raise DuplicatePostalCodeError(record.postal_code) from e

        return model.to_record()

    async def delete(self, record: AddressRecord) -> None:
        if record.id is None:
            return
        await self.crud.delete_by_id(self.db, record.id)
        await self.db.commit()
