"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints, run against both store backends.

==============================================================================
"""

import pytest
from fastapi.testclient import TestClient

from catalog_service.config import Settings
from catalog_service.main import Application
from catalog_service.schemas.product import MAX_STOCK, ProductCreate
from catalog_service.store import ProductStore, StoreError


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient, store: ProductStore):
        """Test health check reports the store backend."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["store_backend"] == store.backend
        assert data["details"]["products"] == 0

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestCreateProduct:
    """Tests for POST /products."""

    def test_insert_then_list(self, client: TestClient, product_payload):
        """Test created product gets id 1 and a lowercased name."""
        response = client.post("/products", json=product_payload())
        assert response.status_code == 200
        data = response.json()
        assert data == {
            "id": 1,
            "partNumber": "A1",
            "partName": "bolt",
            "category": "Hardware",
            "price": 1.5,
            "stock": 10,
        }

        response = client.get("/products")
        assert response.status_code == 200
        assert response.json() == [data]

    def test_duplicate_rejected(self, client: TestClient, product_payload):
        """Test second product with the same part number is rejected."""
        assert client.post("/products", json=product_payload()).status_code == 200

        response = client.post(
            "/products", json=product_payload(partName="Other bolt")
        )
        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "DUPLICATE_PART_NUMBER"
        assert "duplicate" in error["message"].lower()

        assert len(client.get("/products").json()) == 1

    @pytest.mark.parametrize("overrides", [{"price": -1}, {"stock": -5}])
    def test_negative_values_rejected(self, client: TestClient, product_payload, overrides):
        """Test negative price or stock is a 400 and nothing is stored."""
        response = client.post("/products", json=product_payload(**overrides))
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert client.get("/products").json() == []

    def test_blank_part_number_rejected(self, client: TestClient, product_payload):
        """Test blank part number is a validation error."""
        response = client.post("/products", json=product_payload(partNumber="  "))
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_malformed_json(self, client: TestClient):
        """Test body that is not JSON is a 400."""
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MALFORMED_REQUEST"

    def test_missing_field(self, client: TestClient, product_payload):
        """Test body missing a required field is a 400."""
        payload = product_payload()
        del payload["category"]
        response = client.post("/products", json=payload)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MALFORMED_REQUEST"

    def test_wrong_type(self, client: TestClient, product_payload):
        """Test non-numeric stock is a 400."""
        response = client.post("/products", json=product_payload(stock="many"))
        assert response.status_code == 400

    @pytest.mark.parametrize("stock", [MAX_STOCK + 1, 10**400])
    def test_oversized_stock_rejected(self, client: TestClient, product_payload, stock):
        """Test stock beyond the integer limit is a 400 and nothing is stored."""
        response = client.post("/products", json=product_payload(stock=stock))
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MALFORMED_REQUEST"

        assert client.get("/products").json() == []
        assert client.get("/products/inventory/value").json() == 0

    def test_largest_stock_accepted(self, client: TestClient, product_payload):
        """Test stock at the integer limit is stored."""
        response = client.post("/products", json=product_payload(stock=MAX_STOCK))
        assert response.status_code == 200
        assert response.json()["stock"] == MAX_STOCK

    def test_unrepresentable_product_value_rejected(self, client: TestClient, product_payload):
        """Test a product whose price times stock overflows is a 400."""
        response = client.post("/products", json=product_payload(price=1e308, stock=10))
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

        response = client.get("/products/inventory/value")
        assert response.status_code == 200
        assert response.json() == 0

    def test_client_id_ignored(self, client: TestClient, product_payload):
        """Test an id in the request body does not pick the stored id."""
        response = client.post("/products", json=product_payload(id=42))
        assert response.status_code == 200
        assert response.json()["id"] == 1


class TestQueryEndpoints:
    """Tests for search, filter, sort and inventory value."""

    def test_search_case_insensitive_substring(self, client: TestClient, product_payload):
        """Test search matches name substrings ignoring case."""
        client.post("/products", json=product_payload(partNumber="A1", partName="Bolt"))
        client.post("/products", json=product_payload(partNumber="A2", partName="Nut"))

        response = client.get("/products/search", params={"name": "BO"})
        assert response.status_code == 200
        assert [p["partName"] for p in response.json()] == ["bolt"]

    def test_search_empty_name_matches_all(self, client: TestClient, product_payload):
        """Test empty name returns every product."""
        client.post("/products", json=product_payload(partNumber="A1", partName="Bolt"))
        client.post("/products", json=product_payload(partNumber="A2", partName="Nut"))

        response = client.get("/products/search?name=")
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_search_missing_name(self, client: TestClient):
        """Test search without name parameter is a 400."""
        response = client.get("/products/search")
        assert response.status_code == 400

    def test_filter_exact_category(self, client: TestClient, product_payload):
        """Test filter matches the full category ignoring case."""
        client.post("/products", json=product_payload(partNumber="A1", category="Hardware"))
        client.post("/products", json=product_payload(partNumber="A2", category="Tools"))

        response = client.get("/products/filter", params={"category": "hardware"})
        assert response.status_code == 200
        assert [p["partNumber"] for p in response.json()] == ["A1"]

        response = client.get("/products/filter", params={"category": "hard"})
        assert response.status_code == 200
        assert response.json() == []

    def test_filter_missing_category(self, client: TestClient):
        """Test filter without category parameter is a 400."""
        assert client.get("/products/filter").status_code == 400

    def test_sort_and_inventory_value(self, client: TestClient, product_payload):
        """Test sort by price and the inventory value aggregate."""
        for number, price, stock in (("A1", 3.0, 2), ("A2", 1.0, 10), ("A3", 2.0, 5)):
            client.post(
                "/products",
                json=product_payload(partNumber=number, price=price, stock=stock)
            )

        response = client.get("/products/sort")
        assert response.status_code == 200
        assert [p["price"] for p in response.json()] == [1.0, 2.0, 3.0]

        response = client.get("/products/inventory/value")
        assert response.status_code == 200
        assert response.json() == pytest.approx(26.0)

    def test_inventory_value_total_overflow(self, client: TestClient, product_payload):
        """Test a catalog total beyond float range is an explicit error."""
        client.post("/products", json=product_payload(partNumber="A1", price=1e308, stock=1))
        client.post("/products", json=product_payload(partNumber="A2", price=1e308, stock=1))

        response = client.get("/products/inventory/value")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INVENTORY_VALUE_OVERFLOW"

    def test_inventory_value_empty(self, client: TestClient):
        """Test empty catalog is worth zero."""
        response = client.get("/products/inventory/value")
        assert response.status_code == 200
        assert response.json() == 0


class BrokenStore(ProductStore):
    """Store whose every operation fails."""

    backend = "broken"

    def insert(self, draft: ProductCreate) -> int:
        raise StoreError("connection lost")

    def list(self):
        raise StoreError("connection lost")

    def exists_by_part_number(self, part_number: str) -> bool:
        raise StoreError("connection lost")

    def ping(self) -> bool:
        return False


class TestStoreFailures:
    """Tests for backing store failures."""

    @pytest.fixture
    def broken_client(self):
        app = Application(settings=Settings(), store=BrokenStore()).app
        with TestClient(app) as test_client:
            yield test_client

    def test_list_store_failure(self, broken_client: TestClient):
        """Test store failure on read is a 500."""
        response = broken_client.get("/products")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "STORE_FAILURE"

    def test_create_store_failure(self, broken_client: TestClient, product_payload):
        """Test store failure on write is a 500."""
        response = broken_client.post("/products", json=product_payload())
        assert response.status_code == 500

    def test_readiness_not_ready(self, broken_client: TestClient):
        """Test unreachable store fails the readiness probe."""
        response = broken_client.get("/health/ready")
        assert response.status_code == 503
        assert response.json()["ready"] is False

    def test_health_degraded(self, broken_client: TestClient):
        """Test unreachable store degrades health."""
        data = broken_client.get("/health").json()
        assert data["status"] == "degraded"
        assert data["components"]["store"] == "unhealthy"
