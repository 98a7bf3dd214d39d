"""
Schemas module - Request/Response schemas for API endpoints.

Only API contracts live here; the AI helper results (Feedback) are
schemas too because they are returned as-is to the client.
"""

from jobboard.schemas.schemas import (
    JobType,
    JobCreate,
    JobUpdate,
    JobResponse,
    SubscribeRequest,
    ChatTurn,
    ChatRequest,
    ChatResponse,
    Feedback,
    AtsFriendliness,
    MessageResponse,
    ErrorResponse,
)

__all__ = [
    "JobType",
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "SubscribeRequest",
    "ChatTurn",
    "ChatRequest",
    "ChatResponse",
    "Feedback",
    "AtsFriendliness",
    "MessageResponse",
    "ErrorResponse",
]
