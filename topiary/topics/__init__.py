"""Hierarchical, resumable topics of conversation.

Contains the topic tree primitives:
- Topic and ConversationTopic for units of conversational behavior
- TopicsRoot for anchoring the tree in conversation state
- SubTopicRegistry for rebuilding active sub-topics by key
- TurnContext for the per-turn view of a conversation
"""

from topiary.topics.context import TurnContext
from topiary.topics.exceptions import TopicError, UnknownTopicError
from topiary.topics.models import (
    ACTIVE_TOPIC,
    TOPICS_ROOT,
    ActiveTopicState,
    ConversationState,
    TopicsRootState,
    TopicState,
    new_topic_state,
)
from topiary.topics.registry import SubTopicRegistry, TopicFactory
from topiary.topics.root import TopicsRoot
from topiary.topics.topic import ConversationTopic, Topic

__all__ = [
    # Constants
    "ACTIVE_TOPIC",
    "TOPICS_ROOT",
    # State shapes
    "ActiveTopicState",
    "ConversationState",
    "TopicState",
    "TopicsRootState",
    "new_topic_state",
    # Topics
    "Topic",
    "ConversationTopic",
    "TopicsRoot",
    "SubTopicRegistry",
    "TopicFactory",
    "TurnContext",
    # Errors
    "TopicError",
    "UnknownTopicError",
]
