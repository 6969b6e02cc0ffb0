"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Delete and paginated query operations that
can be inherited and extended by model-specific CRUD classes.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cep_api.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and can override or extend
    these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def add(self, session: AsyncSession, instance: ModelT) -> ModelT:
        """
        Stage an instance and flush so generated columns are populated.

        Args:
            session: Async database session
            instance: Model instance (new or already persistent)

        Returns:
            The same instance with its primary key assigned
        """
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_page(
        self,
        session: AsyncSession,
        stmt: Select,
        order_by,
        limit: int,
        offset: int = 0,
    ) -> tuple[Sequence[ModelT], int]:
        """
        Run a filtered select as one page plus a total count.

        Args:
            session: Async database session
            stmt: Base select (filters only, no ordering/limit)
            order_by: Column expression(s) to order by
            limit: Page size
            offset: Rows to skip

        Returns:
            (rows on this page, total rows matching the filters)
        """
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        total = (await session.execute(count_stmt)).scalar_one()

        page_stmt = stmt.order_by(*order_by).offset(offset).limit(limit)
        result = await session.execute(page_stmt)
        return result.scalars().all(), total

    async def delete_by_id(self, session: AsyncSession, id: int) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, *criteria) -> bool:
        """
        Check whether any record matches the given WHERE criteria.

        Args:
            session: Async database session
            *criteria: SQLAlchemy boolean expressions

        Returns:
            True if at least one record matches
        """
        stmt = select(self.model.id).where(*criteria).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
