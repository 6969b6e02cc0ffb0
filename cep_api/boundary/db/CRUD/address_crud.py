"""
Address CRUD operations.

Address-specific queries over AddressModel: exact CEP lookup, uniqueness
checks, case-insensitive searches and paginated listings.

Dependencies: sqlalchemy, cep_api.boundary.db.models
System role: Address persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cep_api.boundary.db.CRUD.base_crud import BaseCRUD
from cep_api.boundary.db.models.address_model import AddressModel
from cep_api.core.pagination import PageRequest


class AddressCRUD(BaseCRUD[AddressModel]):
    """
    CRUD operations for AddressModel.

    Every search takes a PageRequest whose sort field is one of the model's
    attribute names; ties are broken by id so pages are stable.
    """

    def __init__(self) -> None:
        """Initialize AddressCRUD with AddressModel."""
        super().__init__(AddressModel)

    def _ordering(self, page: PageRequest) -> tuple:
        column = getattr(AddressModel, page.sort)
        primary = column.desc() if page.descending else column.asc()
        return (primary, AddressModel.id.asc())

    async def _paged(
        self, session: AsyncSession, stmt, page: PageRequest
    ) -> tuple[Sequence[AddressModel], int]:
        return await self.get_page(
            session,
            stmt,
            order_by=self._ordering(page),
            limit=page.size,
            offset=page.offset,
        )

    async def get_by_cep(self, session: AsyncSession, cep: str) -> AddressModel | None:
        """
        Retrieve the address with this exact CEP.

        SQL: SELECT * FROM tb_enderecos WHERE cep = :cep
        """
        stmt = select(AddressModel).where(AddressModel.postal_code == cep)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_by_cep(self, session: AsyncSession, cep: str) -> bool:
        """SQL: SELECT 1 FROM tb_enderecos WHERE cep = :cep LIMIT 1"""
        return await self.exists(session, AddressModel.postal_code == cep)

    async def exists_by_cep_excluding_id(
        self, session: AsyncSession, cep: str, exclude_id: int
    ) -> bool:
        """SQL: SELECT 1 FROM tb_enderecos WHERE cep = :cep AND id != :id LIMIT 1"""
        return await self.exists(
            session,
            AddressModel.postal_code == cep,
            AddressModel.id != exclude_id,
        )

    async def search_by_street(
        self, session: AsyncSession, fragment: str, page: PageRequest
    ) -> tuple[Sequence[AddressModel], int]:
        """
        SQL: WHERE LOWER(logradouro) LIKE LOWER('%' || :fragment || '%')

        LIKE wildcards in the fragment are escaped so they match literally.
        """
        escaped = (
            fragment.lower()
            .replace("\\", "\\\\")
            .replace("%", "\\%")
            .replace("_", "\\_")
        )
        stmt = select(AddressModel).where(
            func.lower(AddressModel.street).like(f"%{escaped}%", escape="\\")
        )
        return await self._paged(session, stmt, page)

    async def search_by_city(
        self, session: AsyncSession, city: str, page: PageRequest
    ) -> tuple[Sequence[AddressModel], int]:
        """SQL: WHERE LOWER(cidade) = LOWER(:city)"""
        stmt = select(AddressModel).where(
            func.lower(AddressModel.city) == city.lower()
        )
        return await self._paged(session, stmt, page)

    async def search_by_state(
        self, session: AsyncSession, uf: str, page: PageRequest
    ) -> tuple[Sequence[AddressModel], int]:
        """SQL: WHERE UPPER(uf) = UPPER(:uf)"""
        stmt = select(AddressModel).where(
            func.upper(AddressModel.state_code) == uf.upper()
        )
        return await self._paged(session, stmt, page)

    async def search_by_neighborhood_and_city(
        self,
        session: AsyncSession,
        neighborhood: str,
        city: str,
        page: PageRequest,
    ) -> tuple[Sequence[AddressModel], int]:
        """SQL: WHERE LOWER(bairro) = LOWER(:bairro) AND LOWER(cidade) = LOWER(:cidade)"""
        stmt = select(AddressModel).where(
            func.lower(AddressModel.neighborhood) == neighborhood.lower(),
            func.lower(AddressModel.city) == city.lower(),
        )
        return await self._paged(session, stmt, page)

    async def count_by_city(self, session: AsyncSession, city: str) -> int:
        """SQL: SELECT COUNT(*) FROM tb_enderecos WHERE LOWER(cidade) = LOWER(:city)"""
        stmt = select(func.count(AddressModel.id)).where(
            func.lower(AddressModel.city) == city.lower()
        )
        return (await session.execute(stmt)).scalar_one()

    async def list_all(
        self, session: AsyncSession, page: PageRequest
    ) -> tuple[Sequence[AddressModel], int]:
        """SQL: SELECT * FROM tb_enderecos ORDER BY :sort LIMIT :size OFFSET :offset"""
        return await self._paged(session, select(AddressModel), page)


address_crud = AddressCRUD()
