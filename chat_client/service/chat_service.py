from __future__ import annotations

from http.cookiejar import CookieJar

import httpx

from ..api.models import (
    Conversation,
    CreateConversationRequest,
    ExpertAssignment,
    ExpertProfile,
    ExpertQueue,
    Message,
    SendMessageRequest,
    UpdateConversationRequest,
    UpdateExpertProfileRequest,
)
from ..config import ServiceConfig
from ..domain import endpoints
from ..domain.credentials import CredentialStore
from ..domain.endpoints import endpoint_path
from ..domain.errors import UnsupportedOperationError
from .executor import RequestExecutor


class ChatService:
    """Conversation, message and expert operations.

    Every call carries `Authorization: Bearer <credential>` when the shared
    store holds one. Request bodies are built from an explicit allow-list of
    fields. Failures propagate unchanged; this service never touches the
    stored credential.
    """

    def __init__(
        self,
        config: ServiceConfig,
        credentials: CredentialStore,
        *,
        cookies: CookieJar | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._executor = RequestExecutor(
            config,
            credentials=credentials,
            cookies=cookies,
            transport=transport,
        )

    # Conversations

    async def get_conversations(self) -> list[Conversation]:
        return await self._executor.execute(
            endpoints.CONVERSATIONS, "GET", response_type=list[Conversation]
        )

    async def get_conversation(self, conversation_id: str) -> Conversation:
        return await self._executor.execute(
            endpoint_path(endpoints.CONVERSATION, id=conversation_id),
            "GET",
            response_type=Conversation,
        )

    async def create_conversation(self, request: CreateConversationRequest) -> Conversation:
        return await self._executor.execute(
            endpoints.CONVERSATIONS,
            "POST",
            {"title": request.title},
            response_type=Conversation,
        )

    async def update_conversation(
        self, conversation_id: str, request: UpdateConversationRequest
    ) -> Conversation:
        raise UnsupportedOperationError("update_conversation is not supported by the server")

    async def delete_conversation(self, conversation_id: str) -> None:
        raise UnsupportedOperationError("delete_conversation is not supported by the server")

    # Messages

    async def get_messages(self, conversation_id: str) -> list[Message]:
        return await self._executor.execute(
            endpoint_path(endpoints.CONVERSATION_MESSAGES, id=conversation_id),
            "GET",
            response_type=list[Message],
        )

    async def send_message(self, request: SendMessageRequest) -> Message:
        return await self._executor.execute(
            endpoints.MESSAGES,
            "POST",
            {"conversationId": request.conversation_id, "content": request.content},
            response_type=Message,
        )

    async def mark_message_as_read(self, message_id: str) -> None:
        raise UnsupportedOperationError("mark_message_as_read is not supported by the server")

    # Expert

    async def get_expert_queue(self) -> ExpertQueue:
        return await self._executor.execute(
            endpoints.EXPERT_QUEUE, "GET", response_type=ExpertQueue
        )

    async def claim_conversation(self, conversation_id: str) -> None:
        """Assign a waiting conversation to the calling expert (no body expected)."""
        await self._executor.execute(
            endpoint_path(endpoints.EXPERT_CLAIM, id=conversation_id), "POST"
        )

    async def unclaim_conversation(self, conversation_id: str) -> None:
        """Return a claimed conversation to the waiting queue (no body expected)."""
        await self._executor.execute(
            endpoint_path(endpoints.EXPERT_UNCLAIM, id=conversation_id), "POST"
        )

    async def get_expert_profile(self) -> ExpertProfile:
        return await self._executor.execute(
            endpoints.EXPERT_PROFILE, "GET", response_type=ExpertProfile
        )

    async def update_expert_profile(self, request: UpdateExpertProfileRequest) -> ExpertProfile:
        return await self._executor.execute(
            endpoints.EXPERT_PROFILE,
            "PUT",
            {"bio": request.bio, "knowledgeBaseLinks": list(request.knowledge_base_links)},
            response_type=ExpertProfile,
        )

    async def get_expert_assignment_history(self) -> list[ExpertAssignment]:
        return await self._executor.execute(
            endpoints.EXPERT_ASSIGNMENT_HISTORY,
            "GET",
            response_type=list[ExpertAssignment],
        )
