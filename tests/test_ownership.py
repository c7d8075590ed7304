"""Test the provider and portal access rules."""

from types import SimpleNamespace

import pytest

from soapdesk.core.ownership import (
    PortalIdentity,
    ProviderIdentity,
    authorize_portal,
    authorize_provider,
    get_owned,
    parse_object_id,
    portal_scope,
    provider_scope,
)
from soapdesk.features.clients.models import Client
from soapdesk.shared.exceptions import ForbiddenException, NotFoundException


ALICE = ProviderIdentity(user_id="alice", name="Alice")
BOB = ProviderIdentity(user_id="bob", name="Bob")


def test_owner_is_allowed():
    record = SimpleNamespace(id="1", user_id="alice")
    assert authorize_provider(record, ALICE, "Note") is record


def test_missing_record_is_not_found():
    with pytest.raises(NotFoundException) as exc:
        authorize_provider(None, ALICE, "Note")
    assert exc.value.detail == "Note not found"


def test_other_providers_record_is_forbidden():
    record = SimpleNamespace(id="1", user_id="alice")
    with pytest.raises(ForbiddenException):
        authorize_provider(record, BOB, "Note")


def test_portal_rule_uses_client_link():
    me = PortalIdentity(account_id="acc-1", client_id="client-1", user_id="alice")
    mine = SimpleNamespace(id="d1", client_id="client-1", user_id="alice")
    theirs = SimpleNamespace(id="d2", client_id="client-2", user_id="alice")

    assert authorize_portal(mine, me) is mine
    with pytest.raises(ForbiddenException):
        authorize_portal(theirs, me)
    with pytest.raises(NotFoundException):
        authorize_portal(None, me)


def test_parse_object_id():
    assert parse_object_id("65a1b2c3d4e5f6a7b8c9d0e1") is not None
    for bad in ["", "not-an-id", "123", None, 42]:
        assert parse_object_id(bad) is None, bad


def test_scopes():
    assert provider_scope(ALICE) == {"user_id": "alice"}
    portal = PortalIdentity(account_id="a", client_id="c", user_id="alice")
    assert portal_scope(portal) == {"client_id": "c", "user_id": "alice"}


def test_identities_are_immutable():
    with pytest.raises(Exception):
        ALICE.user_id = "mallory"


async def test_get_owned_against_database(db):
    client = Client(user_id="alice", first_name="Sarah", last_name="Johnson")
    await client.insert()

    found = await get_owned(Client, str(client.id), ALICE, "Client")
    assert found.id == client.id

    with pytest.raises(ForbiddenException):
        await get_owned(Client, str(client.id), BOB, "Client")

    with pytest.raises(NotFoundException):
        await get_owned(Client, "65a1b2c3d4e5f6a7b8c9d0e1", ALICE, "Client")

    with pytest.raises(NotFoundException):
        await get_owned(Client, "garbage", ALICE, "Client")
