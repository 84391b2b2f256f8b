"""Integration tests for Orders API endpoints."""

from fastapi.testclient import TestClient


def _place(client: TestClient, **overrides) -> int:
    order_data = {
        "name": "Jane",
        "phone": "555-1234",
        "items": [{"name": "Chocolate Chip", "quantity": 2}],
    }
    order_data.update(overrides)
    response = client.post("/api/orders", json=order_data)
    assert response.status_code == 201, response.text
    return response.json()["orderId"]


def test_create_order_then_list(test_client: TestClient):
    """Placed order shows up as pending with the same items."""
    order_data = {
        "name": "Jane",
        "phone": "555-1234",
        "items": [{"name": "Chocolate Chip", "quantity": 2}],
    }

    response = test_client.post("/api/orders", json=order_data)

    assert response.status_code == 201, f"Expected 201, got {response.status_code}: {response.text}"
    body = response.json()
    assert body["success"] is True
    assert body["message"]
    assert isinstance(body["orderId"], int)

    orders = test_client.get("/api/orders").json()
    placed = next(o for o in orders if o["id"] == body["orderId"])
    assert placed["status"] == "pending"
    assert placed["items"] == [{"name": "Chocolate Chip", "quantity": 2}]
    assert placed["customer_name"] == "Jane"
    assert placed["phone"] == "555-1234"
    assert placed["notes"] is None
    assert placed["created_at"] is not None


def test_create_order_keeps_notes_and_item_extras(test_client: TestClient):
    items = [
        {"name": "Red Velvet", "quantity": 1, "price": 30},
        {"name": "Chocolate Chip", "quantity": 12},
    ]
    order_id = _place(test_client, items=items, notes="Leave at the door")

    placed = next(o for o in test_client.get("/api/orders").json() if o["id"] == order_id)
    assert placed["items"] == items
    assert placed["notes"] == "Leave at the door"


def test_create_order_with_empty_items_is_rejected(test_client: TestClient):
    response = test_client.post(
        "/api/orders", json={"name": "Jane", "phone": "555-1234", "items": []}
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert test_client.get("/api/orders").json() == []


def test_create_order_missing_fields_is_rejected(test_client: TestClient):
    for body in (
        {"phone": "555-1234", "items": [{"name": "Red Velvet", "quantity": 1}]},
        {"name": "Jane", "items": [{"name": "Red Velvet", "quantity": 1}]},
        {"name": "Jane", "phone": "555-1234"},
        {"name": "", "phone": "555-1234", "items": [{"name": "Red Velvet", "quantity": 1}]},
        {"name": "   ", "phone": "555-1234", "items": [{"name": "Red Velvet", "quantity": 1}]},
    ):
        response = test_client.post("/api/orders", json=body)
        assert response.status_code == 400, body
        assert "error" in response.json()


def test_create_order_rejects_non_positive_quantity(test_client: TestClient):
    response = test_client.post(
        "/api/orders",
        json={"name": "Jane", "phone": "555-1234", "items": [{"name": "Red Velvet", "quantity": 0}]},
    )
    assert response.status_code == 400


def test_list_orders_newest_first(test_client: TestClient):
    ids = [_place(test_client, name=f"Customer {i}") for i in range(3)]

    listed = [o["id"] for o in test_client.get("/api/orders").json()]

    assert listed == list(reversed(ids))


def test_update_status(test_client: TestClient):
    order_id = _place(test_client)

    response = test_client.patch(f"/api/orders/{order_id}", json={"status": "confirmed"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Order status updated"
    assert body["order"]["id"] == order_id
    assert body["order"]["status"] == "confirmed"
    placed = next(o for o in test_client.get("/api/orders").json() if o["id"] == order_id)
    assert placed == body["order"]
    assert placed["status"] == "confirmed"


def test_update_status_any_transition_allowed(test_client: TestClient):
    order_id = _place(test_client)

    for status in ("completed", "pending", "cancelled", "confirmed"):
        response = test_client.patch(f"/api/orders/{order_id}", json={"status": status})
        assert response.status_code == 200
        placed = next(o for o in test_client.get("/api/orders").json() if o["id"] == order_id)
        assert placed["status"] == status


def test_update_status_invalid_value(test_client: TestClient):
    order_id = _place(test_client)

    for body in ({"status": "shipped"}, {"status": "PENDING"}, {}):
        response = test_client.patch(f"/api/orders/{order_id}", json=body)
        assert response.status_code == 400, body

    placed = next(o for o in test_client.get("/api/orders").json() if o["id"] == order_id)
    assert placed["status"] == "pending"


def test_update_status_unknown_order(test_client: TestClient):
    response = test_client.patch("/api/orders/9999", json={"status": "confirmed"})

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Order not found"}


def test_update_status_invalid_value_on_unknown_order_is_400(test_client: TestClient):
    response = test_client.patch("/api/orders/9999", json={"status": "shipped"})
    assert response.status_code == 400


def test_update_status_non_numeric_id(test_client: TestClient):
    response = test_client.patch("/api/orders/abc", json={"status": "confirmed"})
    assert response.status_code == 400


def test_update_status_out_of_range_id(test_client: TestClient):
    for order_id in ("99999999999999999999", "0", "-1"):
        response = test_client.patch(f"/api/orders/{order_id}", json={"status": "confirmed"})
        assert response.status_code == 400, order_id
        assert response.json()["success"] is False
