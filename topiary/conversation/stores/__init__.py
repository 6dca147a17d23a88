"""Conversation stores."""

from topiary.conversation.store import ConversationStore
from topiary.conversation.stores.inmemory import InMemoryConversationStore

__all__ = [
    "ConversationStore",
    "InMemoryConversationStore",
]
