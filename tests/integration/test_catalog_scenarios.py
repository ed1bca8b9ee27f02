"""End-to-end catalog walkthrough over the HTTP API.

Category -> Product -> SKU lifecycle, duplicate rejection, delete guards
and a filtered search, in the order a client would exercise them.
"""

import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCatalogLifecycle:
    def test_full_walkthrough(self, api_client):
        # Categories: create, reject duplicate.
        response = api_client.post("/api/v1/categories/", {"name": "Electronics"}, format="json")
        assert response.status_code == 201
        category_id = response.json()["id"]

        response = api_client.post("/api/v1/categories/", {"name": "Electronics"}, format="json")
        assert response.status_code == 400

        # Products: create in existing category, reject unknown category.
        product_body = {"name": "Laptop", "price": 1299.99, "categoryId": category_id}
        response = api_client.post("/api/v1/products/", product_body, format="json")
        assert response.status_code == 201
        product_id = response.json()["id"]

        response = api_client.post(
            "/api/v1/products/",
            {**product_body, "categoryId": str(uuid.uuid4())},
            format="json",
        )
        assert response.status_code == 404
        assert response.json()["message"].startswith("Category not found")

        # SKUs: create, reject duplicate code.
        sku_body = {"skuCode": "LAP-001", "productId": product_id, "quantity": 100}
        response = api_client.post("/api/v1/skus/", sku_body, format="json")
        assert response.status_code == 201
        sku_id = response.json()["id"]

        response = api_client.post("/api/v1/skus/", {**sku_body, "quantity": 5}, format="json")
        assert response.status_code == 400

        # Search.
        response = api_client.get(
            "/api/v1/products/",
            {
                "categoryId": category_id,
                "minPrice": "1000",
                "maxPrice": "2000",
                "page": 0,
                "size": 20,
            },
        )
        data = response.json()
        assert [p["id"] for p in data["content"]] == [product_id]
        assert data["content"][0]["price"] == "1299.99"
        assert data["totalElements"] == 1
        assert data["first"] is True
        assert data["last"] is True

        # Delete guards, then teardown child-first.
        response = api_client.delete(f"/api/v1/categories/{category_id}/")
        assert response.status_code == 400
        assert "has associated products" in response.json()["message"]

        assert api_client.delete(f"/api/v1/skus/{sku_id}/").status_code == 204
        assert api_client.delete(f"/api/v1/products/{product_id}/").status_code == 204
        assert api_client.delete(f"/api/v1/categories/{category_id}/").status_code == 204
        assert api_client.get("/api/v1/categories/").json() == []
