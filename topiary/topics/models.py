"""Persisted state shapes for the topic tree.

All of these are plain JSON-serializable dicts. Topics share them by
reference: a parent's ``activeTopic`` slot holds the very dict its child
mutates, so the whole tree is persisted through the root's state alone.
"""

from typing import Any, NotRequired, TypedDict

ACTIVE_TOPIC = "activeTopic"
TOPICS_ROOT = "topicsRoot"


class ActiveTopicState(TypedDict):
    """Dehydrated reference to the active sub-topic.

    ``key`` names the registry factory that rebuilds the topic and
    ``state`` is that topic's own state record, opaque to the parent.
    """

    key: str
    state: NotRequired[Any]


class TopicState(TypedDict, total=False):
    """Base shape every topic state satisfies.

    Concrete topics add their own fields alongside ``activeTopic``.
    """

    activeTopic: ActiveTopicState | None


class TopicsRootState(TypedDict, total=False):
    """Entry anchoring the topic tree in conversation state."""

    state: TopicState


class ConversationState(TypedDict, total=False):
    """Durable per-conversation state as seen by the topic tree."""

    topicsRoot: TopicsRootState | None


def new_topic_state(**fields: Any) -> TopicState:
    """Return a fresh state record with no active topic."""
    state: dict[str, Any] = {ACTIVE_TOPIC: None}
    state.update(fields)
    return state  # type: ignore[return-value]
