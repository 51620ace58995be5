"""
Pytest fixtures and configuration for Commerce API tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from commerce_api import models  # noqa: F401
from commerce_api.core.config import Settings
from commerce_api.core.database import Base, build_session_factory
from commerce_api.main import create_app
from commerce_api.models import Customer, Product
from commerce_api.repositories.unit_of_work import UnitOfWork


@pytest.fixture
def settings(tmp_path):
    """
    Settings pointing at a throw-away SQLite file

    Scope: function (fresh database per test)
    """
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        SEED_DATA=False,
        API_DEBUG=False,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    """
    TestClient running the full app (lifespan included) on an empty database
    """
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def engine():
    """
    In-memory SQLite engine with the schema created

    StaticPool keeps one connection so every session sees the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
def uow(session):
    return UnitOfWork(session)


@pytest.fixture
def make_product():
    """
    Factory for unsaved Product rows with sensible defaults
    """
    def _make(**overrides):
        data = {
            "name": "Wireless Mouse",
            "description": "Ergonomic wireless mouse",
            "price": Decimal("49.99"),
            "category": "Electronics",
            "stock_quantity": 10,
            "is_active": True,
            "created_at": datetime.now(timezone.utc),
        }
        data.update(overrides)
        return Product(**data)

    return _make


@pytest.fixture
def make_customer():
    """
    Factory for unsaved Customer rows with sensible defaults
    """
    def _make(**overrides):
        data = {
            "first_name": "Jane",
            "last_name": "Smith",
            "email": "jane.smith@example.com",
            "phone": "+1-555-0102",
            "address": "456 Oak Ave",
            "city": "Los Angeles",
            "country": "USA",
            "is_active": True,
            "created_at": datetime.now(timezone.utc),
        }
        data.update(overrides)
        return Customer(**data)

    return _make


@pytest.fixture
def sample_product_data():
    """
    Provides a valid product request body
    """
    return {
        "name": "Laptop Pro 15",
        "description": "High-performance laptop",
        "price": 1299.99,
        "category": "Electronics",
        "stockQuantity": 50,
    }


@pytest.fixture
def sample_customer_data():
    """
    Provides a valid customer request body
    """
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "phone": "+1-555-0101",
        "address": "123 Main St",
        "city": "New York",
        "country": "USA",
    }
