"""Test client records and portal account provisioning."""

from conftest import PASSWORD, create_client, portal_login
from soapdesk.features.portal.models import PortalAccount


async def test_client_crud(client, provider_a):
    sarah = await create_client(client, provider_a, email="sarah@example.com", phone="555-0100")
    assert sarah["status"] == "active"
    assert sarah["user_id"] == provider_a.id
    url = f"/api/clients/{sarah['id']}"

    response = await client.put(url, json={"status": "inactive"}, headers=provider_a.headers)
    assert response.status_code == 200
    assert response.json()["status"] == "inactive"
    assert response.json()["phone"] == "555-0100"

    listed = (await client.get("/api/clients", headers=provider_a.headers)).json()
    assert [c["id"] for c in listed] == [sarah["id"]]

    assert (await client.delete(url, headers=provider_a.headers)).status_code == 204
    assert (await client.get(url, headers=provider_a.headers)).status_code == 404


async def test_client_validation(client, provider_a):
    test_cases = [
        ({"first_name": "Sarah"}, "last_name"),
        ({"first_name": "Sarah", "last_name": "J", "email": "nope"}, "email"),
        ({"first_name": "Sarah", "last_name": "J", "status": "archived"}, "status"),
    ]
    for body, field in test_cases:
        response = await client.post("/api/clients", json=body, headers=provider_a.headers)
        assert response.status_code == 400, body
        assert response.json()["field"] == field


async def test_clients_are_isolated(client, provider_a, provider_b):
    sarah = await create_client(client, provider_a)
    url = f"/api/clients/{sarah['id']}"

    assert (await client.get("/api/clients", headers=provider_b.headers)).json() == []
    assert (await client.get(url, headers=provider_b.headers)).status_code == 403
    assert (await client.put(url, json={"first_name": "X"}, headers=provider_b.headers)).status_code == 403
    assert (await client.delete(url, headers=provider_b.headers)).status_code == 403

    still_there = (await client.get(url, headers=provider_a.headers)).json()
    assert still_there["first_name"] == "Sarah"


async def test_portal_account_lifecycle(client, provider_a):
    sarah = await create_client(client, provider_a)
    portal = await portal_login(client, provider_a, sarah["id"], "sarah@example.com")

    me = (await client.get("/api/portal/me", headers=portal.headers)).json()
    assert me["client_id"] == sarah["id"]
    assert me["provider_name"] == "Alice Carter, LCSW"
    assert me["last_login_at"] is not None

    # One account per client
    response = await client.post(
        f"/api/clients/{sarah['id']}/portal-account",
        json={"email": "other@example.com", "password": PASSWORD},
        headers=provider_a.headers,
    )
    assert response.status_code == 409

    # Deleting the client revokes the portal login
    await client.delete(f"/api/clients/{sarah['id']}", headers=provider_a.headers)
    assert await PortalAccount.find_one(PortalAccount.client_id == sarah["id"]) is None
    assert (await client.get("/api/portal/me", headers=portal.headers)).status_code == 401


async def test_portal_email_must_be_unique(client, provider_a):
    sarah = await create_client(client, provider_a)
    marcus = await create_client(client, provider_a, first_name="Marcus", last_name="Lee")
    await portal_login(client, provider_a, sarah["id"], "shared@example.com")

    response = await client.post(
        f"/api/clients/{marcus['id']}/portal-account",
        json={"email": "shared@example.com", "password": PASSWORD},
        headers=provider_a.headers,
    )
    assert response.status_code == 409
    assert response.json()["message"] == "Email already registered"


async def test_portal_account_for_foreign_client_is_forbidden(client, provider_a, provider_b):
    sarah = await create_client(client, provider_a)
    response = await client.post(
        f"/api/clients/{sarah['id']}/portal-account",
        json={"email": "sneaky@example.com", "password": PASSWORD},
        headers=provider_b.headers,
    )
    assert response.status_code == 403
