from .models import (
    AuthEnvelope,
    Conversation,
    CreateConversationRequest,
    ExpertAssignment,
    ExpertProfile,
    ExpertQueue,
    Message,
    RegisterRequest,
    SendMessageRequest,
    UpdateConversationRequest,
    UpdateExpertProfileRequest,
    User,
)

__all__ = [
    "AuthEnvelope",
    "Conversation",
    "CreateConversationRequest",
    "ExpertAssignment",
    "ExpertProfile",
    "ExpertQueue",
    "Message",
    "RegisterRequest",
    "SendMessageRequest",
    "UpdateConversationRequest",
    "UpdateExpertProfileRequest",
    "User",
]
