"""
Owner-scoped CRUD shared by every provider record type.

A service wraps one Beanie document class; ``build_crud_router`` exposes it as
a collection route plus a member route. Every member operation loads the record
and runs the ownership guard before anything is written.
"""

import types
from typing import Any, Dict, Generic, List, Optional, Type, Union, get_args, get_origin

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from soapdesk.core.logging import logger
from soapdesk.core.ownership import (
    DocumentT,
    ProviderIdentity,
    get_owned,
    provider_scope,
)
from soapdesk.features.audit.service import AuditService
from soapdesk.shared.exceptions import BadRequestException


def _accepts_none(annotation: Any) -> bool:
    if annotation is Any or annotation is type(None):
        return True
    if get_origin(annotation) in (Union, types.UnionType):
        return type(None) in get_args(annotation)
    return False


class OwnedResourceService(Generic[DocumentT]):
    """List/get/create/update/delete for a provider-owned document type."""

    # Create-schema fields that are not stored on the document itself
    create_exclude: frozenset = frozenset()

    def __init__(
        self,
        model: Type[DocumentT],
        response_schema: Type[BaseModel],
        label: str,
        resource_type: str,
    ):
        self.model = model
        self.response_schema = response_schema
        self.label = label
        self.resource_type = resource_type

    def to_response(self, record: DocumentT) -> BaseModel:
        data = record.model_dump()
        data["id"] = str(record.id)
        return self.response_schema.model_validate(data)

    # Hooks for record types with derived fields or extra references

    async def validate_references(self, data: Dict[str, Any], identity: ProviderIdentity) -> None:
        """Check that any client this record points at belongs to the provider."""
        client_id = data.get("client_id")
        if client_id is not None:
            # Imported here; clients build their own service from this module
            from soapdesk.features.clients.models import Client

            await get_owned(Client, client_id, identity, "Client")

    def apply_derived_fields(self, record: DocumentT) -> None:
        """Recompute stored fields that are never accepted from input."""

    async def after_delete(self, record: DocumentT) -> None:
        """Release anything held outside the document store."""

    # Operations

    async def list_records(self, identity: ProviderIdentity, **filters: Any) -> List[BaseModel]:
        query = {**provider_scope(identity), **filters}
        records = await self.model.find(query).sort([("updated_at", -1), ("_id", -1)]).to_list()
        return [self.to_response(record) for record in records]

    async def get_record(self, record_id: str, identity: ProviderIdentity) -> DocumentT:
        return await get_owned(self.model, record_id, identity, self.label)

    async def get(self, record_id: str, identity: ProviderIdentity) -> BaseModel:
        return self.to_response(await self.get_record(record_id, identity))

    async def create(
        self,
        payload: BaseModel,
        identity: ProviderIdentity,
        **extra: Any,
    ) -> DocumentT:
        data = payload.model_dump(exclude=set(self.create_exclude))
        await self.validate_references(data, identity)

        record = self.model(**data, **extra, user_id=identity.user_id)
        self.apply_derived_fields(record)
        await record.insert()

        logger.info(f"Created {self.resource_type} {record.id} for provider {identity.user_id}")
        await AuditService.record(identity.user_id, "create", self.resource_type, str(record.id))

        return record

    async def update(
        self,
        record_id: str,
        payload: BaseModel,
        identity: ProviderIdentity,
    ) -> DocumentT:
        record = await self.get_record(record_id, identity)

        changed = payload.model_fields_set
        for name in changed:
            value = getattr(payload, name)
            field_info = self.model.model_fields.get(name)
            if value is None and field_info is not None and not _accepts_none(field_info.annotation):
                raise BadRequestException(f"{name} cannot be null", field=name)

        await self.validate_references(payload.model_dump(include=changed), identity)

        for name in changed:
            setattr(record, name, getattr(payload, name))

        self.apply_derived_fields(record)
        record.update_timestamp()
        await record.save()

        logger.info(f"Updated {self.resource_type} {record_id} fields={sorted(changed)}")
        await AuditService.record(
            identity.user_id,
            "update",
            self.resource_type,
            record_id,
            details=", ".join(sorted(changed)) or None,
        )

        return record

    async def delete(self, record_id: str, identity: ProviderIdentity) -> None:
        record = await self.get_record(record_id, identity)

        await record.delete()
        await self.after_delete(record)

        logger.info(f"Deleted {self.resource_type} {record_id}")
        await AuditService.record(identity.user_id, "delete", self.resource_type, record_id)


def build_crud_router(
    service: OwnedResourceService,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    prefix: str,
    tags: List[str],
    router: Optional[APIRouter] = None,
) -> APIRouter:
    """Expose a service as ``GET/POST {prefix}`` and ``GET/PUT/DELETE {prefix}/{id}``."""
    # Imported here to keep this module free of the auth feature at import time
    from soapdesk.features.auth.dependencies import get_provider_identity

    router = router or APIRouter(prefix=prefix, tags=tags)
    response_schema = service.response_schema
    label = service.label

    @router.get("", response_model=List[response_schema], summary=f"List {label.lower()} records")
    async def list_records(identity: ProviderIdentity = Depends(get_provider_identity)):
        return await service.list_records(identity)

    @router.post(
        "",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {label.lower()}",
    )
    async def create_record(
        payload: create_schema,
        identity: ProviderIdentity = Depends(get_provider_identity),
    ):
        record = await service.create(payload, identity)
        return service.to_response(record)

    @router.get("/{record_id}", response_model=response_schema, summary=f"Get {label.lower()}")
    async def get_record(
        record_id: str,
        identity: ProviderIdentity = Depends(get_provider_identity),
    ):
        return await service.get(record_id, identity)

    @router.put("/{record_id}", response_model=response_schema, summary=f"Update {label.lower()}")
    async def update_record(
        record_id: str,
        payload: update_schema,
        identity: ProviderIdentity = Depends(get_provider_identity),
    ):
        record = await service.update(record_id, payload, identity)
        return service.to_response(record)

    @router.delete(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Delete {label.lower()}",
    )
    async def delete_record(
        record_id: str,
        identity: ProviderIdentity = Depends(get_provider_identity),
    ):
        await service.delete(record_id, identity)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
