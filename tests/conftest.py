"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite sessions, a scripted origin client, stores,
the address service and sample payloads.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from cep_api.boundary.viacep.schemas import OriginLookupResult, ViaCepResponse


PAULISTA_PAYLOAD = {
    "cep": "01310-100",
    "logradouro": "Avenida Paulista",
    "complemento": "de 612 a 1510 - lado par",
    "bairro": "Bela Vista",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
    "erro": False,
}


class FakeOrigin:
    """
    Scripted origin client that records every lookup.

    Codes found in ``payloads`` resolve; anything else is reported as not
    found, or as a transport error when ``fail`` is set.
    """

    def __init__(self, payloads: dict[str, dict] | None = None, fail: bool = False) -> None:
        self.payloads = payloads or {}
        self.fail = fail
        self.calls: list[str] = []

    async def lookup(self, code: str) -> OriginLookupResult:
        self.calls.append(code)
        if self.fail:
            return OriginLookupResult.error(code, reason="ConnectTimeout: timed out")
        payload = self.payloads.get(code)
        if payload is None or payload.get("erro"):
            return OriginLookupResult.not_found(code, reason="erro")
        return OriginLookupResult.found(code, ViaCepResponse.model_validate(payload))


class TickingClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None) -> None:
        start = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self._ticks = (start + timedelta(seconds=n) for n in itertools.count())

    def __call__(self) -> datetime:
        return next(self._ticks)


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from cep_api.boundary.db.base import Base
    from cep_api.boundary.db.connection import register_sqlite_functions
    from cep_api.boundary.db.models import AddressModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def paulista_payload() -> dict:
    return dict(PAULISTA_PAYLOAD)


@pytest.fixture
def fake_origin(paulista_payload: dict) -> FakeOrigin:
    """Origin that knows only 01310100 (Avenida Paulista)."""
    return FakeOrigin({"01310100": paulista_payload, "00000000": {"erro": True}})


@pytest.fixture
def memory_store(clock: TickingClock):
    from cep_api.boundary.memory import InMemoryAddressStore

    return InMemoryAddressStore(clock=clock)


@pytest.fixture
def address_service(memory_store, fake_origin):
    from cep_api.application.services import AddressService

    return AddressService(store=memory_store, origin=fake_origin)


@pytest.fixture
def sample_address_data() -> dict:
    """Valid create/update payload for CEP 20040002 (Rio de Janeiro)."""
    return {
        "postal_code": "20040002",
        "street": "Rua da Assembleia",
        "complement": None,
        "neighborhood": "Centro",
        "city": "Rio de Janeiro",
        "state_code": "RJ",
        "region_code": "3304557",
        "tax_region_code": None,
        "area_code": "21",
        "finance_region_code": "6001",
    }


@pytest.fixture
def origin_factory():
    """Build FakeOrigin instances with custom payloads or failure mode."""
    return FakeOrigin
