"""Shared test fixtures for the Topiary test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from topiary.conversation.stores import InMemoryConversationStore
from topiary.topics import TurnContext


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "[engine]\npersist_on_error = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear cached settings and loaded TOML before and after each test."""
    from topiary.config import get_settings
    from topiary.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def conversation_state() -> dict:
    """Empty durable conversation state."""
    return {}


@pytest.fixture
def make_context(conversation_state: dict) -> Callable[..., TurnContext]:
    """Factory fixture building a TurnContext over the shared conversation state."""

    def _make_context(activity: object = "", turn_number: int = 1) -> TurnContext:
        return TurnContext(
            conversation_id="conv-1",
            activity=activity,
            conversation_state=conversation_state,  # type: ignore[arg-type]
            turn_number=turn_number,
        )

    return _make_context


@pytest.fixture
def store() -> InMemoryConversationStore:
    """Create a fresh store for each test."""
    return InMemoryConversationStore()
