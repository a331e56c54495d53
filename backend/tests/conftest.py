"""
Commerce Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (unit tests, no database)
    ├── test_settings:   Settings pointing at a throwaway SQLite file
    ├── database:        Database with every table created
    ├── db_session:      One unit-of-work session on that database
    ├── test_client:     HTTPX AsyncClient bound to a fresh app
    └── make_user / make_product: factories for common rows
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from decimal import Decimal
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.database import Database
from app.schemas.product import ProductCreate
from app.schemas.user import UserCreate
from app.services.product_service import ProductService
from app.services.user_service import UserService


# ══════════════════════════════════════════════════════════════════════════
# Unit-Test Fixtures (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_missing(mock_db_session):
            mock_db_session.execute.return_value = result_with(None)
            ...
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures (SQLite file per test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'commerce_test.db'}",
        environment="test",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings) -> AsyncGenerator[Database, None]:
    db = Database(test_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """
    One unit of work; committed when the test finishes cleanly.

    Tests that expect an IntegrityError open their own database.session()
    blocks instead, since a failed flush leaves this session unusable.
    """
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(test_settings):
    """
    HTTPX AsyncClient talking to a fresh app over ASGITransport.

    ASGITransport does not run the lifespan, so tables are created here
    and the engine disposed afterwards.
    """
    from app.main import create_app

    app = create_app(test_settings)
    await app.state.database.create_all()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    await app.state.database.dispose()


# ══════════════════════════════════════════════════════════════════════════
# Row Factories
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_user(db_session):
    async def _make(email: str = "shopper@example.com", **overrides):
        data = {"email": email, "password": "secret123", "name": "Shopper"}
        data.update(overrides)
        return await UserService(db_session).create(UserCreate(**data))

    return _make


@pytest.fixture
def make_product(db_session):
    async def _make(name: str = "Wireless Mouse", stock: int = 5, **overrides):
        data = {
            "name": name,
            "description": "Ergonomic wireless mouse",
            "price": Decimal("29.99"),
            "stock": stock,
        }
        data.update(overrides)
        return await ProductService(db_session).create(ProductCreate(**data))

    return _make
