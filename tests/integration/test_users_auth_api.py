"""
API tests: registration, login and user/account management.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.domains.ecommerce.domain.value_objects import RoleName

pytestmark = pytest.mark.integration


async def register(api_client, email="jane@email.com", password="secret123"):
    return await api_client.post(
        "/users",
        json={"first_name": "Jane", "last_name": "Doe", "email": email, "password": password},
    )


async def test_register_and_login(api_client):
    response = await register(api_client, email="Jane@Email.com")
    assert response.status_code == 201
    user = response.json()
    assert user["email"] == "jane@email.com"
    assert user["roles"] == ["ROLE_USER"]
    assert user["shop_id"] is None
    assert "password" not in user and "password_hash" not in user

    login = await api_client.post("/auth/login", json={"email": "jane@email.com", "password": "secret123"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = await api_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]


async def test_oauth2_form_login(api_client):
    await register(api_client)
    response = await api_client.post("/auth/token", data={"username": "jane@email.com", "password": "secret123"})
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"


async def test_duplicate_email(api_client):
    await register(api_client)
    response = await register(api_client)
    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_ENTITY"


async def test_bad_credentials(api_client):
    await register(api_client)
    response = await api_client.post("/auth/login", json={"email": "jane@email.com", "password": "nope"})
    assert response.status_code == 401


async def test_short_password_is_rejected(api_client):
    response = await register(api_client, password="123")
    assert response.status_code == 422


async def test_protected_endpoints_need_a_token(api_client):
    assert (await api_client.get("/auth/me")).status_code == 401
    response = await api_client.get("/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


async def test_users_only_see_themselves(api_client, create_user):
    jane_id, jane = await create_user("jane@email.com")
    john_id, _ = await create_user("john@email.com")
    _, admin = await create_user("root@email.com", roles=[RoleName.ADMIN.value])

    assert (await api_client.get(f"/users/{jane_id}", headers=jane)).status_code == 200
    forbidden = await api_client.get(f"/users/{john_id}", headers=jane)
    assert forbidden.status_code == 403
    assert forbidden.json()["code"] == "AUTHORIZATION_ERROR"
    assert (await api_client.get(f"/users/{john_id}", headers=admin)).status_code == 200
    assert (await api_client.get("/users/9999", headers=admin)).status_code == 404


async def test_update_user_and_account(api_client, create_user):
    user_id, headers = await create_user("jane@email.com")

    response = await api_client.put(f"/users/{user_id}", json={"first_name": "Janet"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["first_name"] == "Janet"

    account = await api_client.get(f"/users/{user_id}/account", headers=headers)
    assert account.status_code == 200
    assert account.json()["account_status"] == "PENDING"
    assert account.json()["preferred_theme"] == "LIGHT"

    response = await api_client.put(
        f"/users/{user_id}/account",
        json={"username": "janet", "preferred_theme": "dark", "gender": "female", "dashboard_color": "#112233"},
        headers=headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "janet"
    assert body["preferred_theme"] == "DARK"
    assert body["gender"] == "FEMALE"
    assert body["dashboard_color"] == "#112233"

    invalid = await api_client.put(f"/users/{user_id}/account", json={"gender": "robot"}, headers=headers)
    assert invalid.status_code == 422


async def test_username_must_be_unique(api_client, create_user):
    jane_id, jane = await create_user("jane@email.com")
    john_id, john = await create_user("john@email.com")

    await api_client.put(f"/users/{jane_id}/account", json={"username": "taken"}, headers=jane)
    response = await api_client.put(f"/users/{john_id}/account", json={"username": "taken"}, headers=john)
    assert response.status_code == 409


async def test_delete_user(api_client, create_user):
    user_id, headers = await create_user("jane@email.com")
    await api_client.get("/carts/me", headers=headers)

    response = await api_client.delete(f"/users/{user_id}", headers=headers)
    assert response.status_code == 204

    # The token now points to a deleted user
    assert (await api_client.get("/auth/me", headers=headers)).status_code == 401


async def test_health_and_correlation_headers(fastapi_app):
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as client:
        response = await client.get("/health")
        echoed = await client.get("/api/v1/categories", headers={"X-Correlation-ID": "abc123"})

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Response-Time-Ms" in response.headers
    assert echoed.headers["X-Correlation-ID"] == "abc123"
