"""Integration tests for admin-only user administration."""

from fastapi.testclient import TestClient


def test_role_update_requires_token(test_client: TestClient, register_user):
    user_id = register_user("jane@cookies.test")

    response = test_client.patch(f"/api/users/{user_id}/role", json={"role": "admin"})

    assert response.status_code == 401


def test_role_update_forbidden_for_customer(test_client: TestClient, register_user, login):
    user_id = register_user("jane@cookies.test")

    response = test_client.patch(
        f"/api/users/{user_id}/role",
        json={"role": "admin"},
        headers=login("jane@cookies.test"),
    )

    assert response.status_code == 403
    assert response.json()["error"] == "Access denied. Admin role required."


def test_admin_promotes_customer(test_client: TestClient, register_user, login, admin_headers):
    user_id = register_user("jane@cookies.test")

    response = test_client.patch(
        f"/api/users/{user_id}/role", json={"role": "admin"}, headers=admin_headers
    )

    assert response.status_code == 200
    me = test_client.get("/api/auth/me", headers=login("jane@cookies.test")).json()
    assert me["user"]["role"] == "admin"


def test_admin_unknown_role_rejected(test_client: TestClient, register_user, admin_headers):
    user_id = register_user("jane@cookies.test")

    response = test_client.patch(
        f"/api/users/{user_id}/role", json={"role": "superuser"}, headers=admin_headers
    )

    assert response.status_code == 400


def test_admin_unknown_user(test_client: TestClient, admin_headers):
    response = test_client.patch("/api/users/9999/role", json={"role": "admin"}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_admin_out_of_range_user_id(test_client: TestClient, admin_headers):
    response = test_client.patch(
        "/api/users/99999999999999999999/role", json={"role": "admin"}, headers=admin_headers
    )

    assert response.status_code == 400
