"""Integration tests for the catalog, static page and health endpoints."""

from fastapi.testclient import TestClient


def test_list_products(test_client: TestClient):
    response = test_client.get("/api/products")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "Chocolate Chip", "price": 25},
        {"id": 2, "name": "Red Velvet", "price": 30},
    ]


def test_admin_page_is_served(test_client: TestClient):
    response = test_client.get("/admin")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/api/orders" in response.text


def test_health(test_client: TestClient):
    assert test_client.get("/health").json() == {"status": "healthy"}
