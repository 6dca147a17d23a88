"""TopicsRoot: anchors the topic tree in conversation state."""

from typing import Any

from topiary.observability.logging import get_logger
from topiary.topics.context import TurnContext
from topiary.topics.models import ACTIVE_TOPIC, TOPICS_ROOT, TopicState
from topiary.topics.topic import Topic

logger = get_logger(__name__)


class TopicsRoot(Topic[TopicState, Any]):
    """Root topic whose state lives in durable conversation state.

    The root binds to ``conversation_state["topicsRoot"]["state"]`` itself
    rather than a copy. Every sub-topic's state is reachable from that dict,
    so the whole tree is saved whenever the conversation state is.
    Subclasses implement ``on_receive`` with the root-level routing.
    """

    def __init__(self, context: TurnContext) -> None:
        conversation_state: dict[str, Any] = context.conversation_state  # type: ignore[assignment]

        root = conversation_state.get(TOPICS_ROOT)
        if root is None:
            root = {"state": {ACTIVE_TOPIC: None}}
            conversation_state[TOPICS_ROOT] = root
            logger.debug("topics_root_initialized", conversation_id=context.conversation_id)
        elif root.get("state") is None:
            root["state"] = {ACTIVE_TOPIC: None}

        super().__init__(root["state"])
