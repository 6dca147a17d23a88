"""In-memory implementation of ConversationStore."""

from datetime import UTC, datetime

from topiary.conversation.models import Conversation
from topiary.conversation.store import ConversationStore


class InMemoryConversationStore(ConversationStore):
    """In-memory implementation of ConversationStore for testing and development.

    Conversations are kept as serialized JSON, so every ``get`` returns a
    fresh object graph and nothing survives a turn by object identity.
    """

    def __init__(self) -> None:
        self._conversations: dict[str, str] = {}

    async def get(self, conversation_id: str) -> Conversation | None:
        """Get a conversation by ID."""
        raw = self._conversations.get(conversation_id)
        if raw is None:
            return None
        return Conversation.model_validate_json(raw)

    async def save(self, conversation: Conversation) -> str:
        """Save a conversation, returning its ID."""
        conversation.last_activity_at = datetime.now(UTC)
        self._conversations[conversation.conversation_id] = conversation.model_dump_json()
        return conversation.conversation_id

    async def delete(self, conversation_id: str) -> bool:
        """Delete a conversation."""
        if conversation_id in self._conversations:
            del self._conversations[conversation_id]
            return True
        return False

    async def list_ids(self) -> list[str]:
        """List IDs of all stored conversations."""
        return sorted(self._conversations)
