"""Shared fixtures: in-memory MongoDB, an HTTP client, and signed-in accounts."""

from dataclasses import dataclass, field
from typing import Dict

import pytest
from beanie import init_beanie
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from soapdesk.core.security import get_password_hash
from soapdesk.database import DOCUMENT_MODELS
from soapdesk.features.auth.models import User
from soapdesk.features.auth.service import AuthService
from soapdesk.features.documents.service import document_service
from soapdesk.main import app
from soapdesk.services.file_storage import FileStorage


PASSWORD = "Sup3rSecret"


@dataclass
class Account:
    """A signed-in caller: provider or portal client."""
    id: str
    token: str
    extra: Dict[str, str] = field(default_factory=dict)

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
async def db():
    """Fresh in-memory database with every document model registered."""
    mongo = AsyncMongoMockClient()
    await init_beanie(database=mongo["soapdesk_test"], document_models=DOCUMENT_MODELS)
    yield mongo["soapdesk_test"]
    app.dependency_overrides.clear()


@pytest.fixture
async def client(db, tmp_path, monkeypatch):
    """HTTP client against the app, with uploads stored under tmp_path."""
    monkeypatch.setattr(document_service, "storage", FileStorage(str(tmp_path / "uploads")))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


async def make_provider(email: str, name: str) -> Account:
    user = User(email=email, password_hash=get_password_hash(PASSWORD), name=name)
    await user.insert()
    return Account(id=str(user.id), token=AuthService.issue_token(user))


@pytest.fixture
async def provider_a(db) -> Account:
    return await make_provider("alice@example.com", "Alice Carter, LCSW")


@pytest.fixture
async def provider_b(db) -> Account:
    return await make_provider("bob@example.com", "Bob Diaz, LMFT")


async def create_client(http: AsyncClient, provider: Account, **overrides) -> dict:
    body = {"first_name": "Sarah", "last_name": "Johnson", **overrides}
    response = await http.post("/api/clients", json=body, headers=provider.headers)
    assert response.status_code == 201, response.text
    return response.json()


async def portal_login(http: AsyncClient, provider: Account, client_id: str, email: str) -> Account:
    """Give a client a portal account and sign in as them."""
    response = await http.post(
        f"/api/clients/{client_id}/portal-account",
        json={"email": email, "password": PASSWORD},
        headers=provider.headers,
    )
    assert response.status_code == 201, response.text

    response = await http.post("/api/portal/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    data = response.json()
    return Account(
        id=data["me"]["account_id"],
        token=data["access_token"],
        extra={"client_id": client_id},
    )
