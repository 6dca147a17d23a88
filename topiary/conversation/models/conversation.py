"""Durable conversation record."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class Conversation(BaseModel):
    """Per-conversation state persisted between turns.

    ``state`` is the conversation-scoped store handed to the topic tree; it
    must stay JSON-serializable.
    """

    model_config = ConfigDict(frozen=False)

    conversation_id: str = Field(..., description="Unique identifier")
    state: dict[str, Any] = Field(
        default_factory=dict, description="Conversation-scoped state"
    )
    turn_count: int = Field(default=0, ge=0, description="Total turns")
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation time"
    )
    last_activity_at: datetime = Field(
        default_factory=utc_now, description="Last activity"
    )
