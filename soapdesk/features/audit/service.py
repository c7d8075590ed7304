# Audit Feature - Service

from typing import List, Optional
from soapdesk.features.audit.models import AuditLog
from soapdesk.features.audit.schemas import AuditLogResponse
from soapdesk.core.logging import logger


class AuditService:
    """Writes and reads the audit trail."""

    @staticmethod
    async def record(
        user_id: str,
        action: str,
        resource_type: str,
        resource_id: str,
        actor: Optional[str] = None,
        details: Optional[str] = None,
    ) -> AuditLog:
        entry = AuditLog(
            user_id=user_id,
            actor=actor or f"provider:{user_id}",
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            details=details,
        )
        await entry.insert()

        logger.debug(f"Audit: {entry.actor} {action} {resource_type} {resource_id}")
        return entry

    @staticmethod
    async def list_for_provider(user_id: str, limit: int = 100) -> List[AuditLogResponse]:
        entries = await AuditLog.find(
            AuditLog.user_id == user_id
        ).sort([("timestamp", -1), ("_id", -1)]).limit(limit).to_list()

        return [
            AuditLogResponse(
                id=str(entry.id),
                actor=entry.actor,
                action=entry.action,
                resource_type=entry.resource_type,
                resource_id=entry.resource_id,
                details=entry.details,
                timestamp=entry.timestamp,
            )
            for entry in entries
        ]
