"""Per-turn context passed through the topic tree."""

from dataclasses import dataclass, field
from typing import Any

from topiary.topics.models import ConversationState


@dataclass
class TurnContext:
    """Everything a topic sees of the current turn.

    ``conversation_state`` is a live reference into the durable
    conversation record: whatever the topic tree writes there is what the
    caller persists after the turn.
    """

    conversation_id: str
    activity: Any
    conversation_state: ConversationState = field(default_factory=dict)  # type: ignore[assignment]
    turn_number: int = 0
    responses: list[Any] = field(default_factory=list)

    @property
    def text(self) -> str | None:
        """Text of the inbound activity, if it has any."""
        if isinstance(self.activity, str):
            return self.activity
        if isinstance(self.activity, dict):
            text = self.activity.get("text")
            return text if isinstance(text, str) else None
        return None

    async def send(self, message: Any) -> None:
        """Queue an outbound message for this turn."""
        self.responses.append(message)
