"""Conversation domain models."""

from topiary.conversation.models.conversation import Conversation

__all__ = ["Conversation"]
