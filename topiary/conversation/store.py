"""ConversationStore abstract interface."""

from abc import ABC, abstractmethod

from topiary.conversation.models import Conversation


class ConversationStore(ABC):
    """Abstract interface for conversation storage.

    Read before each turn and written after it by the turn engine.
    """

    @abstractmethod
    async def get(self, conversation_id: str) -> Conversation | None:
        """Get a conversation by ID."""
        pass

    @abstractmethod
    async def save(self, conversation: Conversation) -> str:
        """Save a conversation, returning its ID."""
        pass

    @abstractmethod
    async def delete(self, conversation_id: str) -> bool:
        """Delete a conversation."""
        pass

    @abstractmethod
    async def list_ids(self) -> list[str]:
        """List IDs of all stored conversations."""
        pass
