"""
Database connection management.

Provides the cached async SQLAlchemy engine and the session factory.

Dependencies: sqlalchemy, cep_api.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cep_api.configs import get_settings


def _fold(func):
    def apply(value):
        return func(value) if isinstance(value, str) else value

    return apply


def register_sqlite_functions(engine: AsyncEngine) -> None:
    """
    Replace SQLite's ASCII-only LOWER/UPPER with Unicode-aware versions.

    Searches compare LOWER(column) with a term lowered by Python, so both
    sides must fold non-ASCII letters the same way ("SÃO PAULO" -> "são paulo").
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:
        dbapi_connection.create_function("lower", 1, _fold(str.lower))
        dbapi_connection.create_function("upper", 1, _fold(str.upper))


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the process-wide async engine.

    PostgreSQL gets pool sizing and pool_pre_ping so stale connections are
    detected before use. SQLite URLs skip pool tuning.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    db_config = get_settings().database

    if db_config.is_sqlite:
        engine = create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
        )
        register_sqlite_functions(engine)
        return engine

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(
    engine: AsyncEngine | None = None,
) -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    autoflush=False for explicit transaction control; expire_on_commit=False
    so rows stay readable after the adapter commits.

    Args:
        engine: Engine to bind (defaults to get_async_engine())

    Returns:
        async_sessionmaker: Async session factory
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def dispose_engine() -> None:
    """Close pooled connections and drop the cached engine."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
        get_async_engine.cache_clear()
