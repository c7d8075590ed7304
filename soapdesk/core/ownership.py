"""
Record ownership rules.

Every clinical record belongs to exactly one provider (``user_id``). A subset
is also visible to the client it is linked to (``client_id``) through a portal
session. The acting identity is always passed in explicitly; nothing here reads
request or session state.
"""

from typing import Any, Optional, Type, TypeVar

from beanie import Document, PydanticObjectId
from bson import ObjectId
from pydantic import BaseModel, ConfigDict

from soapdesk.core.logging import logger
from soapdesk.shared.exceptions import ForbiddenException, NotFoundException


DocumentT = TypeVar("DocumentT", bound=Document)


class ProviderIdentity(BaseModel):
    """An authenticated clinician."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    name: str = ""


class PortalIdentity(BaseModel):
    """An authenticated client portal session, scoped to one client record."""

    model_config = ConfigDict(frozen=True)

    account_id: str
    client_id: str
    user_id: str  # owning provider


def parse_object_id(record_id: Any) -> Optional[PydanticObjectId]:
    """Return the ObjectId for ``record_id`` or None when it is malformed."""
    if isinstance(record_id, ObjectId):
        return PydanticObjectId(record_id)
    # ObjectId(None) would mint a fresh id
    if not isinstance(record_id, str) or not ObjectId.is_valid(record_id):
        return None
    return PydanticObjectId(record_id)


async def fetch_document(model: Type[DocumentT], record_id: Any) -> Optional[DocumentT]:
    """Load a record by id. Malformed ids behave like missing records."""
    object_id = parse_object_id(record_id)
    if object_id is None:
        return None
    return await model.get(object_id)


def authorize_provider(
    record: Optional[DocumentT],
    identity: ProviderIdentity,
    label: str = "Resource",
) -> DocumentT:
    """
    Check that ``identity`` owns ``record``.

    Raises:
        NotFoundException: The record does not exist.
        ForbiddenException: The record exists but belongs to another provider.
    """
    if record is None:
        raise NotFoundException(f"{label} not found")

    if getattr(record, "user_id", None) != identity.user_id:
        logger.warning(f"Provider {identity.user_id} denied access to {label.lower()} {record.id}")
        raise ForbiddenException("Forbidden")

    return record


def authorize_portal(
    record: Optional[DocumentT],
    identity: PortalIdentity,
    label: str = "Resource",
) -> DocumentT:
    """
    Check that ``record`` is linked to the portal identity's client.

    Raises:
        NotFoundException: The record does not exist.
        ForbiddenException: The record exists but is linked to another client.
    """
    if record is None:
        raise NotFoundException(f"{label} not found")

    if getattr(record, "client_id", None) != identity.client_id:
        logger.warning(f"Portal account {identity.account_id} denied access to {label.lower()} {record.id}")
        raise ForbiddenException("Forbidden")

    return record


async def get_owned(
    model: Type[DocumentT],
    record_id: Any,
    identity: ProviderIdentity,
    label: str = "Resource",
) -> DocumentT:
    """Load a record and apply the provider rule in one step."""
    record = await fetch_document(model, record_id)
    return authorize_provider(record, identity, label)


async def get_linked(
    model: Type[DocumentT],
    record_id: Any,
    identity: PortalIdentity,
    label: str = "Resource",
) -> DocumentT:
    """Load a record and apply the portal rule in one step."""
    record = await fetch_document(model, record_id)
    return authorize_portal(record, identity, label)


def provider_scope(identity: ProviderIdentity) -> dict:
    """Query filter restricting a collection to the provider's rows."""
    return {"user_id": identity.user_id}


def portal_scope(identity: PortalIdentity) -> dict:
    """Query filter restricting a collection to the portal client's rows."""
    return {"client_id": identity.client_id, "user_id": identity.user_id}
