"""
HeartMap Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Overview:
    ├── memory_store:    In-memory HeartStore (no database needed)
    ├── stub_geocoder:   Geocoder returning a configurable CountryLookup
    ├── sqlite_session:  Real AsyncSession on a fresh in-memory SQLite database
    ├── app:             Fresh FastAPI app with store and geocoder overridden
    └── test_client:     HTTPX AsyncClient bound to `app` via ASGITransport
"""

import os

# Must be set before any heartmap import: settings and the engine are
# created at module import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["GEOCODER_BASE_URL"] = "https://nominatim.test"

import uuid
from datetime import datetime, timezone
from typing import List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from heartmap.database import Base
from heartmap.models.heart import Heart
from heartmap.services.geocoder_base import CountryLookup, Geocoder, ResolvedCountry
from heartmap.services.heart_store import HeartStore


# ══════════════════════════════════════════════════════════════════════════
# Fakes
# ══════════════════════════════════════════════════════════════════════════

class InMemoryHeartStore(HeartStore):
    """
    HeartStore keeping hearts in a list.

    Set `fail_with` to an exception instance to make every operation raise it,
    simulating an unavailable store.
    """

    def __init__(self):
        self.hearts: List[Heart] = []
        self.fail_with: Optional[Exception] = None

    async def add(self, heart: Heart) -> Heart:
        if self.fail_with is not None:
            raise self.fail_with
        if heart.id is None:
            heart.id = uuid.uuid4()
        self.hearts.append(heart)
        return heart

    async def list_newest_first(self) -> List[Heart]:
        if self.fail_with is not None:
            raise self.fail_with
        return sorted(self.hearts, key=lambda h: h.timestamp, reverse=True)


class StubGeocoder(Geocoder):
    """Geocoder returning `result`, or raising `error` when set. Records calls."""

    def __init__(self, result: Optional[CountryLookup] = None):
        self.result = result or ResolvedCountry(country_name="France", country_code="FR")
        self.error: Optional[Exception] = None
        self.calls: List[tuple] = []

    async def resolve_country(self, latitude: float, longitude: float) -> CountryLookup:
        self.calls.append((latitude, longitude))
        if self.error is not None:
            raise self.error
        return self.result


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def memory_store():
    return InMemoryHeartStore()


@pytest.fixture
def stub_geocoder():
    return StubGeocoder()


@pytest.fixture
def make_heart():
    """
    Factory for ORM Heart rows with sensible defaults.

    Usage:
        heart = make_heart(type="silverHeart", timestamp=some_datetime)
    """
    from heartmap.models.heart import HeartType

    def _make(**overrides) -> Heart:
        fields = {
            "type": HeartType.RED,
            "latitude": 48.8566,
            "longitude": 2.3522,
            "message": "Hello from Paris",
            "country_name": "France",
            "country_code": "FR",
            "timestamp": datetime.now(timezone.utc),
        }
        fields.update(overrides)
        return Heart(**fields)

    return _make


@pytest_asyncio.fixture
async def sqlite_session():
    """
    AsyncSession on a private in-memory SQLite database with all tables created.

    Why a private engine: each test starts from an empty hearts table.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def app(memory_store, stub_geocoder):
    """
    Fresh application with the store and geocoder dependencies overridden.

    Tests that need a different wiring can change app.dependency_overrides.
    """
    from heartmap.main import create_app
    from heartmap.services.heart_store import get_heart_store
    from heartmap.services.nominatim_service import get_geocoder

    application = create_app()
    application.dependency_overrides[get_heart_store] = lambda: memory_store
    application.dependency_overrides[get_geocoder] = lambda: stub_geocoder
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server, no lifespan).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/hearts")
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
