from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from userauth.api.v1.services import get_auth_service
from userauth.db.session import get_session
from userauth.core.config import settings
from userauth.main import app

AUTH = f"{settings.API_PREFIX}/auth"


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_register_returns_bearer_token(client, token_issuer):
    resp = await client.post(f"{AUTH}/register", json={"email": "new@x.com", "password": "pw"})

    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"accessToken", "tokenType"}
    assert body["tokenType"] == "Bearer"
    assert token_issuer.verify(body["accessToken"])["role"] == "user"


@pytest.mark.asyncio
async def test_register_duplicate_email_is_bad_request(client):
    await client.post(f"{AUTH}/register", json={"email": "dup@x.com", "password": "pw"})
    resp = await client.post(f"{AUTH}/register", json={"email": "dup@x.com", "password": "other"})

    assert resp.status_code == 400
    assert resp.json() == {"message": "User with this email already exists"}


@pytest.mark.asyncio
async def test_register_requires_email_and_password(client):
    resp = await client.post(f"{AUTH}/register", json={"email": "x@x.com"})

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_login_after_register(client, token_issuer):
    await client.post(f"{AUTH}/register", json={"email": "me@x.com", "password": "pw"})

    resp = await client.post(f"{AUTH}/login", json={"email": "me@x.com", "password": "pw"})

    assert resp.status_code == 200
    assert token_issuer.verify(resp.json()["accessToken"])["email"] == "me@x.com"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"email": "me@x.com", "password": "nope"},
    {"email": "ghost@x.com", "password": "pw"},
])
async def test_login_failures_are_indistinguishable(client, payload):
    await client.post(f"{AUTH}/register", json={"email": "me@x.com", "password": "pw"})

    resp = await client.post(f"{AUTH}/login", json=payload)

    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid email or password"}


@pytest.mark.asyncio
async def test_list_users_requires_token(client):
    resp = await client.get(f"{AUTH}/users")

    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_list_users_rejects_garbage_token(client):
    resp = await client.get(f"{AUTH}/users", headers=_bearer("not-a-jwt"))

    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_list_users_requires_admin_role(client, user_token):
    resp = await client.get(f"{AUTH}/users", headers=_bearer(user_token))

    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_list_users_scenario(client, admin_token, seed_users):
    await seed_users(
        ("a@x.com", "pw", "user"),
        ("b@x.com", "pw", "admin"),
        ("ab@x.com", "pw", "user"),
    )

    resp = await client.get(
        f"{AUTH}/users",
        params={"roleFilter": "user", "search": "a", "sort": "asc", "page": 1, "pageSize": 10},
        headers=_bearer(admin_token),
    )

    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 1, "email": "a@x.com", "role": "user"},
        {"id": 3, "email": "ab@x.com", "role": "user"},
    ]
    assert resp.headers["X-Total-Count"] == "2"
    assert resp.headers["X-Total-Pages"] == "1"


@pytest.mark.asyncio
async def test_list_users_paging_headers(client, admin_token, seed_users):
    await seed_users(*[(f"u{i}@x.com", "pw", "user") for i in range(1, 26)])

    resp = await client.get(
        f"{AUTH}/users", params={"sort": "desc", "page": 1, "pageSize": 10}, headers=_bearer(admin_token)
    )

    assert resp.status_code == 200
    assert [u["id"] for u in resp.json()] == list(range(25, 15, -1))
    assert resp.headers["X-Total-Count"] == "25"
    assert resp.headers["X-Total-Pages"] == "3"


@pytest.mark.asyncio
async def test_list_users_empty_result_is_ok(client, admin_token):
    resp = await client.get(f"{AUTH}/users", headers=_bearer(admin_token))

    assert resp.status_code == 200
    assert resp.json() == []
    assert resp.headers["X-Total-Count"] == "0"


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [
    {"page": 0},
    {"pageSize": 0},
    {"page": -2},
    {"page": 10**19},
    {"pageSize": 1001},
])
async def test_list_users_rejects_out_of_range_paging(client, admin_token, params):
    resp = await client.get(f"{AUTH}/users", params=params, headers=_bearer(admin_token))

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_list_users_unexpected_failure_is_generic(client, admin_token):
    broken = AsyncMock()
    broken.list_users.side_effect = RuntimeError("database is down")
    app.dependency_overrides[get_auth_service] = lambda: broken

    resp = await client.get(f"{AUTH}/users", headers=_bearer(admin_token))

    assert resp.status_code == 500
    assert resp.json() == {"message": "An error occurred while retrieving users"}


@pytest.mark.asyncio
async def test_login_unexpected_failure_is_generic(client):
    broken = AsyncMock()
    broken.sign_in.side_effect = RuntimeError("database is down")
    app.dependency_overrides[get_auth_service] = lambda: broken

    resp = await client.post(f"{AUTH}/login", json={"email": "a@x.com", "password": "pw"})

    assert resp.status_code == 500
    assert resp.json() == {"message": "An error occurred during login"}


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.headers["X-Content-Type-Options"] == "nosniff"


@pytest.mark.asyncio
async def test_register_unexpected_failure_is_generic(client):
    broken = AsyncMock()
    broken.register.side_effect = RuntimeError("database is down")
    app.dependency_overrides[get_auth_service] = lambda: broken

    resp = await client.post(f"{AUTH}/register", json={"email": "a@x.com", "password": "pw"})

    assert resp.status_code == 500
    assert resp.json() == {"message": "An error occurred during registration"}


@pytest.mark.asyncio
async def test_failing_dependency_hides_internal_detail(client):
    async def unavailable_session():
        raise RuntimeError("connection refused by db-host:5432")
        yield

    app.dependency_overrides[get_session] = unavailable_session

    # The server error middleware re-raises after responding; keep the response instead
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as raw_client:
        resp = await raw_client.post(f"{AUTH}/login", json={"email": "a@x.com", "password": "pw"})

    assert resp.status_code == 500
    assert resp.json() == {"message": "An unexpected error occurred"}
    assert "db-host" not in resp.text
