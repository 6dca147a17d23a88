"""Turn engine.

Drives one turn of a conversation through a topic tree:
- Load (or create) the conversation record from the ConversationStore
- Build a TurnContext around the record's live state dict
- Construct the TopicsRoot and await its on_receive
- Persist the record, now carrying every mutation the tree made
"""

import time
from collections.abc import Callable
from typing import Any

import structlog
from pydantic import BaseModel, Field

from topiary.config.settings import Settings
from topiary.conversation.models import Conversation
from topiary.conversation.store import ConversationStore
from topiary.observability.logging import get_logger
from topiary.observability.metrics import TURN_COUNT, TURN_LATENCY
from topiary.topics.context import TurnContext
from topiary.topics.root import TopicsRoot

RootFactory = Callable[[TurnContext], TopicsRoot]

logger = get_logger(__name__)


class TurnResult(BaseModel):
    """Outcome of processing a single turn."""

    conversation_id: str = Field(..., description="Conversation the turn belongs to")
    turn_number: int = Field(..., description="1-based turn number")
    responses: list[Any] = Field(default_factory=list, description="Outbound messages")
    value: Any = Field(default=None, description="Value returned by the root topic")
    has_active_topic: bool = Field(..., description="Root still delegates to a sub-topic")
    duration_ms: float = Field(..., description="Processing time")


class TopicsEngine:
    """Runs turns against a topic tree rooted in a ConversationStore.

    Only one turn per conversation may be in flight at a time; the engine
    does no locking of its own.
    """

    def __init__(
        self,
        store: ConversationStore,
        root_factory: RootFactory,
        *,
        settings: Settings | None = None,
    ) -> None:
        if settings is None:
            from topiary.config import get_settings

            settings = get_settings()
        self._store = store
        self._root_factory = root_factory
        self._settings = settings

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def settings(self) -> Settings:
        return self._settings

    async def process_turn(self, conversation_id: str, activity: Any) -> TurnResult:
        """Process one inbound activity and persist the resulting state.

        Errors raised by the topic tree propagate. The partially mutated
        state is saved first only when ``engine.persist_on_error`` is set.
        """
        start = time.perf_counter()

        conversation = await self._store.get(conversation_id)
        if conversation is None:
            conversation = Conversation(conversation_id=conversation_id)
            logger.info("conversation_created", conversation_id=conversation_id)

        turn_number = conversation.turn_count + 1
        context = TurnContext(
            conversation_id=conversation_id,
            activity=activity,
            conversation_state=conversation.state,  # type: ignore[arg-type]
            turn_number=turn_number,
        )

        structlog.contextvars.bind_contextvars(
            conversation_id=conversation_id,
            turn_number=turn_number,
        )
        try:
            root = self._root_factory(context)
            value = await root.on_receive(context)
        except Exception:
            TURN_COUNT.labels(status="error").inc()
            logger.exception("turn_failed")
            if self._settings.engine.persist_on_error:
                conversation.turn_count = turn_number
                await self._store.save(conversation)
            raise
        finally:
            structlog.contextvars.unbind_contextvars("conversation_id", "turn_number")

        conversation.turn_count = turn_number
        await self._store.save(conversation)

        elapsed = time.perf_counter() - start
        TURN_COUNT.labels(status="ok").inc()
        TURN_LATENCY.observe(elapsed)
        logger.info(
            "turn_processed",
            conversation_id=conversation_id,
            turn_number=turn_number,
            has_active_topic=root.has_active_topic,
            responses=len(context.responses),
            duration_ms=elapsed * 1000,
        )

        return TurnResult(
            conversation_id=conversation_id,
            turn_number=turn_number,
            responses=context.responses,
            value=value,
            has_active_topic=root.has_active_topic,
            duration_ms=elapsed * 1000,
        )
