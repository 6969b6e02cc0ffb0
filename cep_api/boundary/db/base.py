"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and reusable mixins for the
surrogate key and timestamp columns.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class IdMixin:
    """
    Mixin providing an autoincrement integer primary key.

    BIGINT on PostgreSQL, INTEGER on SQLite so rowid autoincrement applies.

    Attributes:
        id: Surrogate key assigned by the database on insert
    """

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )


class TimestampMixin:
    """
    Mixin providing creation/modification timestamp columns.

    No defaults or onupdate hooks: the storage adapter assigns both values
    explicitly in save(). created_at is written once on insert;
    updated_at stays NULL until the first update.

    Attributes:
        created_at: Row creation timestamp (UTC, immutable)
        updated_at: Last modification timestamp (UTC, NULL until updated)
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
