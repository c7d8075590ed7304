# Audit Feature - Router

from typing import List
from fastapi import APIRouter, Depends, Query
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.features.auth.dependencies import get_provider_identity
from soapdesk.features.audit.schemas import AuditLogResponse
from soapdesk.features.audit.service import AuditService


router = APIRouter(prefix="/audit-logs", tags=["Audit"])


@router.get("", response_model=List[AuditLogResponse])
async def list_audit_logs(
    limit: int = Query(100, ge=1, le=500),
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    List the current provider's audit trail, newest first.

    - **limit**: Maximum number of entries (1-500, default 100)
    """
    return await AuditService.list_for_provider(identity.user_id, limit=limit)
