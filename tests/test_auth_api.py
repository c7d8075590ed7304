"""Test provider registration, login and token handling."""

from conftest import PASSWORD, create_client, portal_login


REGISTRATION = {
    "name": "Dana Whitfield",
    "email": "dana@example.com",
    "password": PASSWORD,
    "credentials": "PsyD",
}


async def test_register_returns_token_and_profile(client):
    response = await client.post("/api/auth/register", json=REGISTRATION)
    assert response.status_code == 201
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["user"]["email"] == "dana@example.com"
    assert "password_hash" not in data["user"]

    me = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["name"] == "Dana Whitfield"


async def test_register_duplicate_email_conflicts(client):
    assert (await client.post("/api/auth/register", json=REGISTRATION)).status_code == 201
    response = await client.post("/api/auth/register", json=REGISTRATION)
    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "Email already registered"}


async def test_register_validates_password_strength(client):
    test_cases = ["short1A", "alllowercase1", "ALLUPPERCASE1", "NoDigitsHere"]
    for password in test_cases:
        response = await client.post("/api/auth/register", json={**REGISTRATION, "password": password})
        assert response.status_code == 400, password
        assert response.json()["field"] == "password"


async def test_login(client, provider_a):
    response = await client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD}
    )
    assert response.status_code == 200
    assert response.json()["user"]["id"] == provider_a.id


async def test_login_failures_are_generic(client, provider_a):
    for body in [
        {"email": "alice@example.com", "password": "WrongPass1"},
        {"email": "nobody@example.com", "password": PASSWORD},
    ]:
        response = await client.post("/api/auth/login", json=body)
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"


async def test_bad_tokens_are_rejected(client):
    test_cases = [
        {},
        {"Authorization": "Bearer not-a-jwt"},
        {"Authorization": "Basic YWxpY2U6cGFzcw=="},
    ]
    for headers in test_cases:
        response = await client.get("/api/auth/me", headers=headers)
        assert response.status_code == 401, headers
        assert response.json()["success"] is False


async def test_portal_token_cannot_reach_provider_routes(client, provider_a):
    sarah = await create_client(client, provider_a)
    portal = await portal_login(client, provider_a, sarah["id"], "sarah@example.com")

    response = await client.get("/api/clients", headers=portal.headers)
    assert response.status_code == 401
    assert "provider authentication" in response.json()["message"]


async def test_unknown_route_uses_error_shape(client):
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["success"] is False


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
