"""Topic base class.

A topic is one unit of conversational behavior. It owns a state record,
optional success/failure handlers, a registry of sub-topic factories and at
most one active sub-topic.

Topic objects only live for a single turn. What survives is the state
record: when a sub-topic is activated its state dict is embedded by
reference into the parent's ``activeTopic`` slot ("dehydrated"), and on the
next turn the parent rebuilds the child from that slot on first access
("rehydrated"). Because every state dict hangs off the root's state, which
itself lives in durable conversation storage, the tree persists without any
explicit save code.
"""

import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from topiary.observability.logging import get_logger
from topiary.observability.metrics import TOPIC_ACTIVATIONS, TOPIC_COMPLETIONS
from topiary.topics.models import ACTIVE_TOPIC, ActiveTopicState, TopicState, new_topic_state
from topiary.topics.registry import SubTopicRegistry

if TYPE_CHECKING:
    from topiary.topics.context import TurnContext

S = TypeVar("S", bound=TopicState)
V = TypeVar("V")

SuccessHandler = Callable[["TurnContext", Any], Awaitable[None] | None]
FailureHandler = Callable[["TurnContext", str], Awaitable[None] | None]

logger = get_logger(__name__)


def _noop(_context: "TurnContext", _outcome: Any) -> None:
    return None


class Topic(ABC, Generic[S, V]):
    """Abstract base class for a topic of conversation.

    Type parameters:
        S: Shape of the topic's persisted state
        V: Value passed to the success handler when the topic completes

    Subclasses implement ``on_receive``. To delegate a turn, read
    ``active_topic`` and await its ``on_receive``. When the child resolves,
    the parent clears it with ``clear_active_topic``; the base class never
    clears anything on its own.
    """

    def __init__(self, state: S | None = None) -> None:
        self._state: S = state if state is not None else new_topic_state()  # type: ignore[assignment]
        self._on_success: SuccessHandler = _noop
        self._on_failure: FailureHandler = _noop
        self._subtopics = SubTopicRegistry(owner=type(self).__name__)
        self._active_topic: Topic[Any, Any] | None = None

    @property
    def state(self) -> S:
        """State record persisted between turns."""
        return self._state

    @state.setter
    def state(self, state: S) -> None:
        # Any cached child was derived from the old state
        self._state = state
        self._active_topic = None

    @property
    def subtopics(self) -> SubTopicRegistry:
        """Factories for the sub-topics this topic can activate."""
        return self._subtopics

    @abstractmethod
    async def on_receive(self, context: "TurnContext") -> V | None:
        """Handle the current turn while this topic is active."""

    # Completion handlers

    def on_success(self, handler: SuccessHandler) -> Self:
        """Set the handler called with the resulting value on success.

        Replaces any previously set handler.
        """
        self._on_success = handler
        return self

    def on_failure(self, handler: FailureHandler) -> Self:
        """Set the handler called with a reason string on failure.

        Replaces any previously set handler.
        """
        self._on_failure = handler
        return self

    async def succeed(self, context: "TurnContext", value: V | None = None) -> None:
        """Report successful completion to the success handler."""
        name = type(self).__name__
        logger.info("topic_succeeded", topic=name)
        TOPIC_COMPLETIONS.labels(topic=name, outcome="success").inc()
        result = self._on_success(context, value)
        if inspect.isawaitable(result):
            await result

    async def fail(self, context: "TurnContext", reason: str) -> None:
        """Report unsuccessful completion to the failure handler."""
        name = type(self).__name__
        logger.info("topic_failed", topic=name, reason=reason)
        TOPIC_COMPLETIONS.labels(topic=name, outcome="failure").inc()
        result = self._on_failure(context, reason)
        if inspect.isawaitable(result):
            await result

    # Sub-topic management

    def set_active_topic(self, key: str, *args: Any, **kwargs: Any) -> "Topic[Any, Any]":
        """Create the sub-topic registered under ``key`` and make it active.

        Arguments are passed to the factory; they are only needed on the
        turn the sub-topic is first created. Any previously active
        sub-topic is replaced.

        Raises:
            UnknownTopicError: If ``key`` is not registered
        """
        topic = self._subtopics.create(key, *args, **kwargs)
        self._active_topic = topic
        # The child's state dict itself goes into our state, so later
        # mutations by the child persist through us.
        self._state[ACTIVE_TOPIC] = ActiveTopicState(key=key, state=topic.state)  # type: ignore[literal-required]

        logger.debug(
            "topic_activated",
            owner=type(self).__name__,
            key=key,
            topic=type(topic).__name__,
        )
        TOPIC_ACTIVATIONS.labels(topic=type(topic).__name__, source="created").inc()
        return topic

    @property
    def active_topic(self) -> "Topic[Any, Any] | None":
        """The active sub-topic, rebuilt from state on first access.

        Returns None when no sub-topic is active. Repeated reads within a
        turn return the same instance.

        Raises:
            UnknownTopicError: If the persisted key is not registered
        """
        active = self._state.get(ACTIVE_TOPIC)
        if active is None:
            return None

        if self._active_topic is not None:
            return self._active_topic

        key = active["key"]
        topic = self._subtopics.create(key)
        if active.get("state") is None:
            active["state"] = topic.state
        else:
            topic.state = active["state"]
        self._active_topic = topic

        logger.debug(
            "topic_rehydrated",
            owner=type(self).__name__,
            key=key,
            topic=type(topic).__name__,
        )
        TOPIC_ACTIVATIONS.labels(topic=type(topic).__name__, source="rehydrated").inc()
        return topic

    @property
    def has_active_topic(self) -> bool:
        return self._state.get(ACTIVE_TOPIC) is not None

    def clear_active_topic(self) -> None:
        """Abandon the active sub-topic, whether or not it completed."""
        if self.has_active_topic:
            logger.debug("topic_cleared", owner=type(self).__name__)
        self._state[ACTIVE_TOPIC] = None  # type: ignore[literal-required]
        self._active_topic = None


class ConversationTopic(Topic[S, V]):
    """A topic of conversation with optional sub-topics.

    Base class for application topics; the behavior is that of Topic.
    """
