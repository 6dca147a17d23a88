"""Bootstrap a TopicsEngine from configuration.

Loads settings, configures logging from them and wires the engine to a
conversation store (in-memory unless one is given).

Example usage:

    from topiary.bootstrap import bootstrap

    engine = bootstrap(MyRootTopic)
    result = await engine.process_turn("conversation-1", "Hello!")
"""

from topiary.config import get_settings
from topiary.config.settings import Settings
from topiary.conversation.store import ConversationStore
from topiary.conversation.stores.inmemory import InMemoryConversationStore
from topiary.engine import RootFactory, TopicsEngine
from topiary.observability.logging import get_logger, setup_logging_from_config


def bootstrap(
    root_factory: RootFactory,
    *,
    store: ConversationStore | None = None,
    settings: Settings | None = None,
) -> TopicsEngine:
    """Configure logging and build a TopicsEngine.

    Args:
        root_factory: Builds the TopicsRoot for each turn from its context
        store: Conversation store (default: a fresh InMemoryConversationStore)
        settings: Settings to use (default: get_settings())
    """
    settings = settings or get_settings()
    setup_logging_from_config(settings.observability.logging, app_name=settings.app_name)

    store = store or InMemoryConversationStore()
    get_logger(__name__).info(
        "engine_bootstrapped",
        store=type(store).__name__,
        persist_on_error=settings.engine.persist_on_error,
    )
    return TopicsEngine(store, root_factory, settings=settings)
