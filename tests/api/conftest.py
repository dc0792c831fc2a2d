"""Route test fixtures — in-memory SQLite datastore + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the three external tables
    - get_db dependency overridden, so routes never touch app.state
    - RecordingProvider counts queries: validation failures must issue none

Design Decisions:
    - StaticPool: one shared connection, otherwise every checkout sees an empty :memory: DB
    - FailingProvider raises the same DatabaseError the real provider raises when
      the server refuses connections
"""

from contextlib import asynccontextmanager
from datetime import date
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

from gateway.core.errors import DatabaseError
from gateway.db.base import Base
from gateway.infrastructure.database import ConnectionProvider, get_db
from gateway.main import app
from gateway.models import ExternalCustomer, ExternalWarranty, PartPricing


class RecordingProvider:
    """Wraps a provider and records every query it is asked to run."""

    def __init__(self, inner):
        self._inner = inner
        self.calls = []

    async def fetch_all(self, sql, params=None):
        self.calls.append((sql, dict(params or {})))
        return await self._inner.fetch_all(sql, params)


class FailingProvider:
    """Behaves like a datastore that refuses every connection."""

    def __init__(self):
        self.calls = 0

    async def fetch_all(self, sql, params=None):
        self.calls += 1
        try:
            raise ConnectionRefusedError(111, "Connect call failed ('10.0.0.5', 5432)")
        except ConnectionRefusedError as e:
            raise DatabaseError("Network error", "connect") from e


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool, echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
async def seeded(test_db):
    """Insert one warranty, two customers and two parts."""
    test_db.add_all([
        ExternalWarranty(
            serial_number="QL-2024-0001",
            product_name="QuantumLink Router X1",
            customer_external_id="CUST-1001",
            purchase_date=date(2024, 6, 15),
            warranty_expiration=date(2026, 6, 15),
            coverage_status="active",
            coverage_notes="Parts and labor",
        ),
        ExternalWarranty(
            serial_number="QL-2021-0042",
            product_name="QuantumLink Modem M2",
            customer_external_id="CUST-1002",
            purchase_date=date(2021, 1, 10),
            warranty_expiration=date(2023, 1, 10),
            coverage_status="expired",
        ),
        ExternalCustomer(
            customer_external_id="CUST-1001",
            full_name="Jordan Rivera",
            email="jordan.rivera@example.com",
            account_status="active",
        ),
        ExternalCustomer(
            customer_external_id="CUST-1002",
            full_name="Sam Okafor",
            email="sam.okafor@example.com",
            account_status="suspended",
        ),
        PartPricing(
            part_id="PRT-ANT-01",
            part_name="External Antenna",
            base_price=Decimal("19.99"),
            stock_quantity=42,
            compatibility_notes="Router X1, Router X2",
        ),
        PartPricing(
            part_id="PRT-PSU-12",
            part_name="12V Power Supply",
            base_price=Decimal("34.50"),
            stock_quantity=0,
        ),
    ])
    await test_db.commit()


@pytest.fixture
def provider(test_engine):
    return ConnectionProvider(test_engine)


@pytest.fixture
def recording_provider(provider):
    return RecordingProvider(provider)


@pytest.fixture
def client_for():
    """Build a test client whose get_db dependency returns the given backend."""

    @asynccontextmanager
    async def _client(backend):
        app.dependency_overrides[get_db] = lambda: backend
        try:
            async with AsyncClient(
                transport=ASGITransport(app=app), base_url="http://test",
            ) as c:
                yield c
        finally:
            app.dependency_overrides.clear()

    return _client


@pytest.fixture
async def client(client_for, recording_provider, seeded):
    """FastAPI test client over the seeded SQLite datastore."""
    async with client_for(recording_provider) as c:
        yield c


@pytest.fixture
async def failing_client(client_for):
    async with client_for(FailingProvider()) as c:
        yield c
