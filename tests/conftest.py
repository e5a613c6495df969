"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides product stores for both backends, the catalog service and an
HTTP test client wired to them.

==============================================================================
"""

import pytest
from typing import Callable, Generator
from fastapi.testclient import TestClient

from catalog_service.catalog.service import CatalogService
from catalog_service.config import Settings
from catalog_service.db.database import DatabaseManager
from catalog_service.main import Application
from catalog_service.schemas.product import ProductCreate
from catalog_service.store import InMemoryProductStore, ProductStore, SqlProductStore


# ============================================================================
# STORE FIXTURES
# ============================================================================

# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def memory_store() -> Generator[InMemoryProductStore, None, None]:
    """Fresh in-memory store."""
    store = InMemoryProductStore()
    yield store
    store.close()


@pytest.fixture
def sql_store() -> Generator[SqlProductStore, None, None]:
    """Fresh SQL store on an in-memory SQLite database."""
    store = SqlProductStore(DatabaseManager(SQLALCHEMY_TEST_DATABASE_URL))
    yield store
    store.close()


@pytest.fixture(params=["memory", "sql"])
def store(request) -> ProductStore:
    """Each test using this fixture runs once per store backend."""
    return request.getfixturevalue(f"{request.param}_store")


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def service(store: ProductStore) -> CatalogService:
    """Catalog service over the parametrized store."""
    return CatalogService(store)


@pytest.fixture
def make_product() -> Callable[..., ProductCreate]:
    """Factory for submitted products with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides) -> ProductCreate:
        counter["n"] += 1
        fields = {
            "part_number": f"P{counter['n']}",
            "part_name": f"Part {counter['n']}",
            "category": "Hardware",
            "price": 1.0,
            "stock": 1,
        }
        fields.update(overrides)
        return ProductCreate(**fields)

    return _make


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def client(store: ProductStore) -> Generator[TestClient, None, None]:
    """Test client serving the parametrized store."""
    settings = Settings(listen="127.0.0.1:8000", store=store.backend)
    app = Application(settings=settings, store=store).app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def product_payload() -> Callable[..., dict]:
    """Factory for wire-format product bodies."""

    def _payload(**overrides) -> dict:
        payload = {
            "partNumber": "A1",
            "partName": "Bolt",
            "category": "Hardware",
            "price": 1.5,
            "stock": 10,
        }
        payload.update(overrides)
        return payload

    return _payload
