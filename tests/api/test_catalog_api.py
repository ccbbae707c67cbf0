"""Tests for catalog API endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_catalog_service
from app.catalog.filters import ProductFilter, ProductListResult
from app.catalog.memory import InMemoryCategoryRepository
from app.catalog.service import CatalogService
from app.domain.exceptions import StorageError
from app.main import app


class BrokenProductRepository:
    """Product repository that always fails."""

    async def query(self, product_filter: ProductFilter) -> ProductListResult:
        raise StorageError("database is locked")

    async def get_by_code(self, code: str):
        raise StorageError("database is locked")


@pytest.fixture
def broken_client(category_repository: InMemoryCategoryRepository):
    """Client whose product store is failing."""
    service = CatalogService(BrokenProductRepository(), category_repository)
    app.dependency_overrides[get_catalog_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def product_codes(response) -> list[str]:
    return [p["code"] for p in response.json()["products"]]


class TestListProducts:
    """Tests for GET /catalog endpoint."""

    def test_list_all(self, client: TestClient) -> None:
        """Should list every product with the total."""
        response = client.get("/catalog")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 4
        assert product_codes(response) == ["PROD001", "PROD002", "PROD003", "PROD004"]

    def test_product_shape(self, client: TestClient) -> None:
        """Products carry category and priced variants."""
        response = client.get("/catalog", params={"limit": 1})
        product = response.json()["products"][0]

        assert product["code"] == "PROD001"
        assert product["price"] == 100.0
        assert product["category"] == {"id": 1, "code": "clothing", "name": "Clothing"}
        assert [
            (v["name"], v["sku"], v["price"], v["product_id"]) for v in product["variants"]
        ] == [
            ("Small", "PROD001-S", 100.0, product["id"]),
            ("Medium", "PROD001-M", 110.0, product["id"]),
        ]

    def test_filter_by_category(self, client: TestClient) -> None:
        """Should filter by category code."""
        response = client.get("/catalog", params={"category": "clothing"})
        assert response.status_code == 200
        assert response.json()["total"] == 2
        assert product_codes(response) == ["PROD001", "PROD004"]

    def test_filter_by_price(self, client: TestClient) -> None:
        """Should filter by priceLessThan."""
        response = client.get("/catalog", params={"priceLessThan": "100"})
        assert response.status_code == 200
        assert response.json()["total"] == 2
        assert product_codes(response) == ["PROD002", "PROD003"]

    def test_combined_filters(self, client: TestClient) -> None:
        """Should apply category and price together."""
        response = client.get(
            "/catalog", params={"category": "clothing", "priceLessThan": "120"}
        )
        assert response.json()["total"] == 1
        assert product_codes(response) == ["PROD001"]

    def test_unknown_category(self, client: TestClient) -> None:
        """Unknown categories give an empty list."""
        response = client.get("/catalog", params={"category": "nonexistent"})
        assert response.status_code == 200
        assert response.json() == {"products": [], "total": 0}

    def test_category_not_trimmed(self, client: TestClient) -> None:
        """Padded category codes match nothing."""
        response = client.get("/catalog", params={"category": " clothing "})
        assert response.json() == {"products": [], "total": 0}

    def test_pagination(self, client: TestClient) -> None:
        """Offset and limit page through the results."""
        response = client.get("/catalog", params={"offset": 2, "limit": 2})
        assert response.json()["total"] == 4
        assert product_codes(response) == ["PROD003", "PROD004"]

    @pytest.mark.parametrize(("limit", "expected"), [("0", 1), ("-1", 1), ("1000", 4)])
    def test_limit_is_clamped(self, client: TestClient, limit: str, expected: int) -> None:
        """Out-of-range limits are clamped, not rejected."""
        response = client.get("/catalog", params={"limit": limit})
        assert response.status_code == 200
        assert len(response.json()["products"]) == expected

    def test_offset_past_end(self, client: TestClient) -> None:
        """Offset beyond the end keeps the total."""
        response = client.get("/catalog", params={"offset": 50})
        assert response.json() == {"products": [], "total": 4}

    def test_invalid_price(self, client: TestClient) -> None:
        """Non-numeric priceLessThan is a 400."""
        response = client.get("/catalog", params={"priceLessThan": "cheap"})
        assert response.status_code == 400

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"] == "Invalid priceLessThan parameter"
        assert data["details"] == [
            {"field": "priceLessThan", "message": "Invalid priceLessThan parameter"}
        ]

    @pytest.mark.parametrize("param", ["offset", "limit"])
    def test_invalid_pagination(self, client: TestClient, param: str) -> None:
        """Non-integer offset or limit is a 400."""
        response = client.get("/catalog", params={param: "ten"})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_storage_error(self, broken_client: TestClient) -> None:
        """Storage failures are a 500 carrying the underlying message."""
        response = broken_client.get("/catalog")
        assert response.status_code == 500

        data = response.json()
        assert data["error_code"] == "STORAGE_ERROR"
        assert data["message"] == "database is locked"


class TestGetProduct:
    """Tests for GET /catalog/{code} endpoint."""

    def test_get_product(self, client: TestClient) -> None:
        """Should return the product with resolved variant prices."""
        response = client.get("/catalog/PROD002")
        assert response.status_code == 200

        data = response.json()
        assert data["code"] == "PROD002"
        assert data["price"] == 50.0
        assert data["category"]["code"] == "shoes"
        assert data["variants"][0]["price"] == 50.0

    def test_product_without_variants(self, client: TestClient) -> None:
        """Products without variants have an empty list."""
        response = client.get("/catalog/PROD003")
        assert response.status_code == 200
        assert response.json()["variants"] == []

    def test_not_found(self, client: TestClient) -> None:
        """Unknown codes are a 404."""
        response = client.get("/catalog/NONEXISTENT")
        assert response.status_code == 404

        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["message"] == "Product not found"
        assert data["request_id"]

    def test_storage_error_is_not_404(self, broken_client: TestClient) -> None:
        """Storage failures are reported as such, not as missing products."""
        response = broken_client.get("/catalog/PROD001")
        assert response.status_code == 500
        assert response.json()["error_code"] == "STORAGE_ERROR"
