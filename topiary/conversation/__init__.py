"""Durable conversation storage used by the turn engine."""

from topiary.conversation.models import Conversation
from topiary.conversation.store import ConversationStore
from topiary.conversation.stores import InMemoryConversationStore

__all__ = [
    "Conversation",
    "ConversationStore",
    "InMemoryConversationStore",
]
