# Messages Feature - Service

from typing import List, Literal
from soapdesk.core.logging import logger
from soapdesk.core.ownership import PortalIdentity, ProviderIdentity, get_linked, portal_scope, provider_scope
from soapdesk.features.audit.service import AuditService
from soapdesk.features.messages.models import Message, MessageThread, SenderType
from soapdesk.features.messages.schemas import (
    MessageCreate,
    MessageResponse,
    ThreadCreate,
    ThreadDetailResponse,
    ThreadResponse,
)
from soapdesk.shared.crud import OwnedResourceService
from soapdesk.shared.exceptions import BadRequestException


Reader = Literal["provider", "client"]

PREVIEW_LENGTH = 100


class MessageService(OwnedResourceService[MessageThread]):
    """Service class for thread and message operations."""

    create_exclude = frozenset({"body"})

    @staticmethod
    def _message_to_response(message: Message) -> MessageResponse:
        return MessageResponse(
            id=str(message.id),
            thread_id=message.thread_id,
            sender_type=message.sender_type,
            body=message.body,
            read_by_provider=message.read_by_provider,
            read_by_client=message.read_by_client,
            created_at=message.created_at,
        )

    @staticmethod
    async def unread_count(thread: MessageThread, reader: Reader) -> int:
        """Count messages from the other party that ``reader`` has not read."""
        if reader == "provider":
            return await Message.find(
                Message.thread_id == str(thread.id),
                Message.sender_type == "client",
                Message.read_by_provider == False,  # noqa: E712
            ).count()
        return await Message.find(
            Message.thread_id == str(thread.id),
            Message.sender_type == "provider",
            Message.read_by_client == False,  # noqa: E712
        ).count()

    async def thread_response(self, thread: MessageThread, reader: Reader = "provider") -> ThreadResponse:
        data = thread.model_dump()
        data["id"] = str(thread.id)
        data["unread_count"] = await self.unread_count(thread, reader)
        return ThreadResponse.model_validate(data)

    async def _messages(self, thread: MessageThread) -> List[MessageResponse]:
        messages = await Message.find(
            Message.thread_id == str(thread.id)
        ).sort([("created_at", 1), ("_id", 1)]).to_list()
        return [self._message_to_response(m) for m in messages]

    async def _send(self, thread: MessageThread, sender_type: SenderType, body: str) -> Message:
        """Store a message and refresh the thread preview."""
        if thread.status == "closed":
            raise BadRequestException("Thread is closed")

        message = Message(
            thread_id=str(thread.id),
            user_id=thread.user_id,
            client_id=thread.client_id,
            sender_type=sender_type,
            body=body,
            read_by_provider=sender_type == "provider",
            read_by_client=sender_type == "client",
        )
        await message.insert()

        thread.last_message = body[:PREVIEW_LENGTH]
        thread.last_message_at = message.created_at
        thread.last_message_sender = sender_type
        thread.update_timestamp()
        await thread.save()

        logger.info(f"Message {message.id} sent in thread {thread.id} by {sender_type}")
        return message

    @staticmethod
    async def _mark_read(thread: MessageThread, reader: Reader) -> int:
        """Mark all messages from the other party as read by ``reader``."""
        if reader == "provider":
            result = await Message.find(
                Message.thread_id == str(thread.id),
                Message.sender_type == "client",
                Message.read_by_provider == False,  # noqa: E712
            ).update_many({"$set": {"read_by_provider": True}})
        else:
            result = await Message.find(
                Message.thread_id == str(thread.id),
                Message.sender_type == "provider",
                Message.read_by_client == False,  # noqa: E712
            ).update_many({"$set": {"read_by_client": True}})

        count = result.modified_count if result else 0
        logger.info(f"Marked {count} messages as read by {reader} in thread {thread.id}")
        return count

    # ==================== Provider side ====================

    async def list_records(self, identity: ProviderIdentity, **filters) -> List[ThreadResponse]:
        threads = await MessageThread.find(
            {**provider_scope(identity), **filters}
        ).sort([("updated_at", -1), ("_id", -1)]).to_list()
        return [await self.thread_response(thread) for thread in threads]

    async def get(self, record_id: str, identity: ProviderIdentity) -> ThreadResponse:
        return await self.thread_response(await self.get_record(record_id, identity))

    async def create(self, payload: ThreadCreate, identity: ProviderIdentity, **extra) -> MessageThread:
        thread = await super().create(payload, identity, **extra)
        if payload.body:
            await self._send(thread, "provider", payload.body)
        return thread

    async def after_delete(self, record: MessageThread) -> None:
        await Message.find(Message.thread_id == str(record.id)).delete()

    async def list_messages(self, thread_id: str, identity: ProviderIdentity) -> List[MessageResponse]:
        thread = await self.get_record(thread_id, identity)
        return await self._messages(thread)

    async def send_as_provider(
        self,
        thread_id: str,
        payload: MessageCreate,
        identity: ProviderIdentity,
    ) -> MessageResponse:
        thread = await self.get_record(thread_id, identity)
        message = await self._send(thread, "provider", payload.body)
        await AuditService.record(
            identity.user_id, "create", "message", str(message.id), details=f"thread {thread_id}"
        )
        return self._message_to_response(message)

    async def mark_read_by_provider(self, thread_id: str, identity: ProviderIdentity) -> int:
        thread = await self.get_record(thread_id, identity)
        return await self._mark_read(thread, "provider")

    # ==================== Portal side ====================

    async def list_for_portal(self, identity: PortalIdentity) -> List[ThreadResponse]:
        threads = await MessageThread.find(
            portal_scope(identity)
        ).sort([("updated_at", -1), ("_id", -1)]).to_list()
        return [await self.thread_response(thread, "client") for thread in threads]

    async def open_for_portal(self, thread_id: str, identity: PortalIdentity) -> ThreadDetailResponse:
        """Return the thread with its messages and mark the provider's messages read."""
        thread = await get_linked(MessageThread, thread_id, identity, self.label)
        await self._mark_read(thread, "client")

        summary = await self.thread_response(thread, "client")
        return ThreadDetailResponse(**summary.model_dump(), messages=await self._messages(thread))

    async def send_as_client(
        self,
        thread_id: str,
        payload: MessageCreate,
        identity: PortalIdentity,
    ) -> MessageResponse:
        thread = await get_linked(MessageThread, thread_id, identity, self.label)
        message = await self._send(thread, "client", payload.body)
        return self._message_to_response(message)


message_service = MessageService(
    MessageThread, ThreadResponse, label="Thread", resource_type="message_thread"
)
