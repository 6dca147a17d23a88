"""Sub-topic factory registry."""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from topiary.observability.logging import get_logger
from topiary.topics.exceptions import UnknownTopicError

if TYPE_CHECKING:
    from topiary.topics.topic import Topic

TopicFactory = Callable[..., "Topic[Any, Any]"]

logger = get_logger(__name__)


class SubTopicRegistry:
    """Named factories a topic uses to create and rebuild its sub-topics.

    Keys are persisted in conversation state, so they must stay stable for
    as long as stored conversations may reference them. Every factory must
    accept being called with no arguments: that is how an active topic is
    rebuilt before its persisted state is put back.
    """

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self._factories: dict[str, TopicFactory] = {}

    def register(
        self, key: str, factory: TopicFactory | None = None
    ) -> Any:
        """Register ``factory`` under ``key``, replacing any earlier entry.

        Without a factory, returns a decorator so a local function can be
        registered in place.
        """
        if factory is None:

            def decorator(func: TopicFactory) -> TopicFactory:
                self._factories[key] = func
                return func

            return decorator

        self._factories[key] = factory
        return factory

    def get(self, key: str) -> TopicFactory | None:
        """Get a factory by key."""
        return self._factories.get(key)

    def create(self, key: str, *args: Any, **kwargs: Any) -> "Topic[Any, Any]":
        """Create a sub-topic with the factory registered under ``key``.

        Raises:
            UnknownTopicError: If nothing is registered under ``key``
        """
        factory = self._factories.get(key)
        if factory is None:
            logger.warning(
                "unknown_subtopic",
                key=key,
                owner=self.owner,
                registered=sorted(self._factories),
            )
            raise UnknownTopicError(key, self.owner)
        if args or kwargs:
            return factory(*args, **kwargs)
        return factory()

    def keys(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
