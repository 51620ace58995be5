"""
Products API tests

Drives the full app (routing, validation, services, SQLite) through
TestClient.

Author: TM3
"""
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from commerce_api.api.dependencies import get_product_service
from commerce_api.main import create_app

BASE_URL = "/api/v1/products"


def create_product(client, **overrides):
    body = {
        "name": "Wireless Mouse",
        "description": "Ergonomic wireless mouse",
        "price": 49.99,
        "category": "Electronics",
        "stockQuantity": 10,
    }
    body.update(overrides)
    response = client.post(BASE_URL, json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestProductCrud:
    """Test create/read/update/delete over HTTP"""

    def test_create_returns_201_with_location(self, client, sample_product_data):
        response = client.post(BASE_URL, json=sample_product_data)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Product created successfully"
        product = body["data"]
        assert response.headers["location"] == f"{BASE_URL}/{product['id']}"
        assert product["name"] == "Laptop Pro 15"
        assert product["price"] == 1299.99
        assert product["stockQuantity"] == 50
        assert product["isActive"] is True
        assert product["createdAt"] is not None
        assert product["updatedAt"] is None

    def test_get_by_id(self, client):
        created = create_product(client)

        response = client.get(f"{BASE_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Wireless Mouse"

    def test_timestamps_round_trip_as_utc(self, client):
        """Test createdAt/updatedAt read back exactly as first returned"""
        created = create_product(client)

        fetched = client.get(f"{BASE_URL}/{created['id']}").json()["data"]

        assert fetched["createdAt"] == created["createdAt"]
        assert fetched["createdAt"].endswith("Z")

        updated = client.put(
            f"{BASE_URL}/{created['id']}",
            json={"name": "Mouse v2", "price": 10, "category": "Electronics"},
        ).json()["data"]
        refetched = client.get(f"{BASE_URL}/{created['id']}").json()["data"]

        assert refetched["updatedAt"] == updated["updatedAt"]
        assert refetched["createdAt"] == created["createdAt"]

    def test_get_missing_returns_404(self, client):
        response = client.get(f"{BASE_URL}/999")

        assert response.status_code == 404
        assert response.json() == {
            "statusCode": 404,
            "message": 'Entity "Product" (999) was not found.',
            "errors": [],
        }

    def test_update_replaces_fields(self, client):
        created = create_product(client)

        response = client.put(
            f"{BASE_URL}/{created['id']}",
            json={"name": "Mouse v2", "price": 59.5, "category": "Accessories", "stockQuantity": 3, "isActive": False},
        )

        assert response.status_code == 200
        product = response.json()["data"]
        assert product["name"] == "Mouse v2"
        assert product["price"] == 59.5
        assert product["isActive"] is False
        assert product["updatedAt"] is not None

    def test_update_missing_returns_404(self, client, sample_product_data):
        response = client.put(f"{BASE_URL}/12345", json=sample_product_data)

        assert response.status_code == 404

    def test_delete_then_get_returns_404(self, client):
        created = create_product(client)

        response = client.delete(f"{BASE_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["message"] == "Product deleted successfully"
        assert client.get(f"{BASE_URL}/{created['id']}").status_code == 404
        assert client.delete(f"{BASE_URL}/{created['id']}").status_code == 404

    def test_get_by_category(self, client):
        create_product(client, name="Desk", category="Furniture")
        create_product(client, name="Mouse", category="Electronics")

        response = client.get(f"{BASE_URL}/category/Furniture")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()["data"]] == ["Desk"]


class TestProductValidation:
    """Test 400 responses"""

    def test_invalid_body_lists_every_field(self, client):
        """Test all rule violations come back in one response"""
        response = client.post(BASE_URL, json={"name": "", "price": 0, "stockQuantity": -1})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        assert set(body["errors"]) == {"name", "price", "category", "stockQuantity"}

    def test_invalid_body_is_not_stored(self, client):
        client.post(BASE_URL, json={"name": "", "price": -1, "category": "X"})

        assert client.get(BASE_URL).json()["data"]["totalCount"] == 0

    def test_wrong_type_is_400(self, client, sample_product_data):
        response = client.post(BASE_URL, json={**sample_product_data, "price": "abc"})

        assert response.status_code == 400
        assert "price" in response.json()["errors"]

    def test_page_size_above_limit_is_400(self, client):
        response = client.get(BASE_URL, params={"pageSize": 500})

        assert response.status_code == 400
        assert "pageSize" in response.json()["errors"]

    def test_page_number_zero_is_400(self, client):
        assert client.get(BASE_URL, params={"pageNumber": 0}).status_code == 400


class TestProductListing:
    """Test paging, filtering and sorting on GET /products"""

    def test_empty_list(self, client):
        response = client.get(BASE_URL)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Products retrieved successfully"
        assert body["data"] == {
            "items": [],
            "totalCount": 0,
            "pageNumber": 1,
            "pageSize": 10,
            "totalPages": 0,
            "hasPreviousPage": False,
            "hasNextPage": False,
        }

    def test_paging_end_to_end(self, client):
        """Test the third page of 25 products"""
        # Arrange
        for i in range(1, 26):
            create_product(client, name=f"Product {i:02d}", price=float(i))

        # Act
        response = client.get(BASE_URL, params={"pageNumber": 3, "pageSize": 10})

        # Assert
        page = response.json()["data"]
        assert len(page["items"]) == 5
        assert page["totalCount"] == 25
        assert page["totalPages"] == 3
        assert page["hasPreviousPage"] is True
        assert page["hasNextPage"] is False
        assert page["items"][0]["name"] == "Product 21"

    def test_unknown_sort_falls_back_to_id(self, client):
        ids = [create_product(client, price=price)["id"] for price in (30, 10, 20)]

        response = client.get(BASE_URL, params={"sortBy": "bogus", "sortDescending": "true"})

        assert [p["id"] for p in response.json()["data"]["items"]] == sorted(ids)

    def test_descending_without_sort_by_lists_newest_first(self, client):
        ids = [create_product(client, name=name)["id"] for name in ("First", "Second", "Third")]

        response = client.get(BASE_URL, params={"sortDescending": "true"})

        assert [p["id"] for p in response.json()["data"]["items"]] == sorted(ids, reverse=True)

    def test_sort_by_price_descending(self, client):
        for price in (30, 10, 20):
            create_product(client, price=price)

        response = client.get(BASE_URL, params={"sortBy": "price", "sortDescending": "true"})

        assert [p["price"] for p in response.json()["data"]["items"]] == [30, 20, 10]

    def test_search_and_price_range(self, client):
        create_product(client, name="Laptop Pro", price=1000)
        create_product(client, name="Laptop Air", price=800)
        create_product(client, name="Mouse", description="Works with any LAPTOP", price=20)
        create_product(client, name="Chair", price=300)

        response = client.get(BASE_URL, params={"searchTerm": "laptop", "minPrice": 20, "maxPrice": 800})

        names = sorted(p["name"] for p in response.json()["data"]["items"])
        assert names == ["Laptop Air", "Mouse"]

    def test_filter_by_active_status(self, client):
        kept = create_product(client, name="Kept")
        retired = create_product(client, name="Retired")
        client.put(
            f"{BASE_URL}/{retired['id']}",
            json={"name": "Retired", "price": 1, "category": "Electronics", "isActive": False},
        )

        response = client.get(BASE_URL, params={"isActive": "true"})

        assert [p["id"] for p in response.json()["data"]["items"]] == [kept["id"]]


class TestUnexpectedErrors:
    """Test the 500 mapping"""

    def _broken_client(self, settings):
        app = create_app(settings)
        broken_service = AsyncMock()
        broken_service.get_by_id.side_effect = RuntimeError("disk on fire")
        app.dependency_overrides[get_product_service] = lambda: broken_service
        return TestClient(app, raise_server_exceptions=False)

    def test_unexpected_error_hides_details(self, settings):
        with self._broken_client(settings) as client:
            response = client.get(f"{BASE_URL}/1")

        assert response.status_code == 500
        assert response.json() == {
            "statusCode": 500,
            "message": "An unexpected error occurred",
            "errors": [],
        }

    def test_debug_mode_includes_details(self, settings):
        settings.API_DEBUG = True

        with self._broken_client(settings) as client:
            response = client.get(f"{BASE_URL}/1")

        assert response.status_code == 500
        assert response.json()["details"] == "disk on fire"
