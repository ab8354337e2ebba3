from __future__ import annotations

from urllib.parse import quote

__all__ = [
    "AUTH_LOGIN",
    "AUTH_REGISTER",
    "AUTH_LOGOUT",
    "AUTH_REFRESH",
    "AUTH_ME",
    "CONVERSATIONS",
    "CONVERSATION",
    "CONVERSATION_MESSAGES",
    "MESSAGES",
    "EXPERT_QUEUE",
    "EXPERT_CLAIM",
    "EXPERT_UNCLAIM",
    "EXPERT_PROFILE",
    "EXPERT_ASSIGNMENT_HISTORY",
    "path_segment",
    "endpoint_path",
]

# Auth
AUTH_LOGIN = "/auth/login"
AUTH_REGISTER = "/auth/register"
AUTH_LOGOUT = "/auth/logout"
AUTH_REFRESH = "/auth/refresh"
AUTH_ME = "/auth/me"

# Conversations and messages
CONVERSATIONS = "/conversations"
CONVERSATION = "/conversations/{id}"
CONVERSATION_MESSAGES = "/conversations/{id}/messages"
MESSAGES = "/messages"

# Expert
EXPERT_QUEUE = "/expert/queue"
EXPERT_CLAIM = "/expert/conversations/{id}/claim"
EXPERT_UNCLAIM = "/expert/conversations/{id}/unclaim"
EXPERT_PROFILE = "/expert/profile"
EXPERT_ASSIGNMENT_HISTORY = "/expert/assignments/history"


def path_segment(value: str) -> str:
    """Quote an identifier so it always lands in exactly one path segment.

    Raises:
        ValueError: if the identifier is empty or not a string.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("identifier must be a non-empty string")
    return quote(value, safe="")


def endpoint_path(template: str, **params: str) -> str:
    """Fill an endpoint template, quoting every interpolated identifier.

    >>> endpoint_path(EXPERT_CLAIM, id="c1")
    '/expert/conversations/c1/claim'
    """
    return template.format(**{k: path_segment(v) for k, v in params.items()})
