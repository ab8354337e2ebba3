from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Wire model: camelCase on the wire, snake_case in Python.

    Unknown server fields are kept so newer backends do not break parsing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class RequestModel(BaseModel):
    """Caller-side input; unknown fields are dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ------------------------
# Auth
# ------------------------

class User(ApiModel):
    """An authenticated account (customer or expert)."""
    id: str
    username: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None


class AuthEnvelope(ApiModel):
    """Body returned by login, register and refresh."""
    user: User
    token: str = Field(..., min_length=1)


class RegisterRequest(RequestModel):
    """Inputs for creating an account."""
    username: str
    password: str
    email: Optional[str] = None
    role: Optional[str] = None


# ------------------------
# Conversations and messages
# ------------------------

class Conversation(ApiModel):
    """A support conversation between a customer and (eventually) an expert."""
    id: str
    title: Optional[str] = None
    status: Optional[str] = None
    customer_id: Optional[str] = None
    assigned_expert_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    last_message_at: Optional[str] = None
    unread_count: Optional[int] = None


class CreateConversationRequest(RequestModel):
    """Inputs for opening a conversation."""
    title: str


class UpdateConversationRequest(RequestModel):
    """Inputs for editing a conversation."""
    title: Optional[str] = None
    status: Optional[str] = None


class Message(ApiModel):
    """A single message within a conversation."""
    id: str
    conversation_id: str
    content: str
    sender_id: Optional[str] = None
    sender_role: Optional[str] = None
    timestamp: Optional[str] = None
    is_read: Optional[bool] = None


class SendMessageRequest(RequestModel):
    """Inputs for posting a message."""
    conversation_id: str
    content: str


# ------------------------
# Expert
# ------------------------

class ExpertQueue(ApiModel):
    """Conversations waiting for an expert and those already assigned to the caller."""
    waiting_conversations: list[Conversation] = Field(default_factory=list)
    assigned_conversations: list[Conversation] = Field(default_factory=list)


class ExpertProfile(ApiModel):
    """Public profile of an expert."""
    id: str
    user_id: Optional[str] = None
    bio: Optional[str] = None
    knowledge_base_links: list[str] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class UpdateExpertProfileRequest(RequestModel):
    """Inputs for editing the caller's expert profile."""
    bio: str
    knowledge_base_links: list[str] = Field(default_factory=list)


class ExpertAssignment(ApiModel):
    """One past or current assignment of an expert to a conversation."""
    id: str
    conversation_id: str
    expert_id: Optional[str] = None
    status: Optional[str] = None
    assigned_at: Optional[str] = None
    resolved_at: Optional[str] = None
    rating: Optional[int] = None
