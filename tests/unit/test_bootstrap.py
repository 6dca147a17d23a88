"""Tests for bootstrap."""

import json

import pytest
import structlog

from tests.factories import RootTopic
from topiary.bootstrap import bootstrap
from topiary.config.settings import Settings
from topiary.conversation.stores.inmemory import InMemoryConversationStore
from topiary.engine import TopicsEngine
from topiary.observability.logging import get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def json_settings(**overrides) -> Settings:
    return Settings(
        observability={"logging": {"level": "INFO", "format": "json"}},
        **overrides,
    )


class TestBootstrap:
    def test_returns_engine_with_default_store(self) -> None:
        engine = bootstrap(RootTopic, settings=json_settings())

        assert isinstance(engine, TopicsEngine)
        assert isinstance(engine.store, InMemoryConversationStore)

    def test_uses_given_store(self) -> None:
        store = InMemoryConversationStore()
        engine = bootstrap(RootTopic, store=store, settings=json_settings())
        assert engine.store is store

    def test_configures_logging_from_settings(self, capsys) -> None:
        """Log events should carry the configured app name."""
        bootstrap(RootTopic, settings=json_settings(app_name="support-bot"))
        get_logger("test").info("ready")

        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["event"] == "ready"
        assert event["app"] == "support-bot"

    def test_loads_settings_when_omitted(
        self, mock_toml_files, test_config_dir, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({
            "default.toml": (
                'app_name = "from-toml"\n'
                "[engine]\npersist_on_error = true\n"
                '[observability.logging]\nformat = "json"'
            )
        })
        monkeypatch.setenv("TOPIARY_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("TOPIARY_ENV", "test")

        engine = bootstrap(RootTopic)

        assert engine.settings.app_name == "from-toml"
        assert engine.settings.engine.persist_on_error is True

    @pytest.mark.asyncio
    async def test_engine_runs_turns(self) -> None:
        engine = bootstrap(RootTopic, settings=json_settings())
        result = await engine.process_turn("conv-1", "hi")
        assert result.responses == ["What is your name?"]
