"""Tests for Prometheus metrics."""

import pytest
from prometheus_client import REGISTRY

from tests.factories import CounterTopic, RootTopic
from topiary.config.settings import Settings
from topiary.engine import TopicsEngine
from topiary.topics import TurnContext


def sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestTopicMetrics:
    def test_activation_counted_by_source(self) -> None:
        """Should count created and rehydrated activations separately."""
        labels_created = {"topic": "CounterTopic", "source": "created"}
        labels_rehydrated = {"topic": "CounterTopic", "source": "rehydrated"}
        created_before = sample("topiary_topic_activations_total", labels_created)
        rehydrated_before = sample("topiary_topic_activations_total", labels_rehydrated)

        state: dict = {}
        RootTopic(TurnContext(conversation_id="c", activity="", conversation_state=state)).set_active_topic("counter")
        rebuilt = RootTopic(TurnContext(conversation_id="c", activity="", conversation_state=state)).active_topic

        assert isinstance(rebuilt, CounterTopic)
        assert sample("topiary_topic_activations_total", labels_created) == created_before + 1
        assert sample("topiary_topic_activations_total", labels_rehydrated) == rehydrated_before + 1

    @pytest.mark.asyncio
    async def test_completion_counted_by_outcome(self) -> None:
        labels = {"topic": "CounterTopic", "outcome": "failure"}
        before = sample("topiary_topic_completions_total", labels)

        await CounterTopic().fail(TurnContext(conversation_id="c", activity=""), "nope")

        assert sample("topiary_topic_completions_total", labels) == before + 1


class TestTurnMetrics:
    @pytest.mark.asyncio
    async def test_turn_counted(self, store) -> None:
        before = sample("topiary_turn_count_total", {"status": "ok"})
        latency_before = sample("topiary_turn_latency_seconds_count")

        await TopicsEngine(store, RootTopic, settings=Settings()).process_turn("c", "hi")

        assert sample("topiary_turn_count_total", {"status": "ok"}) == before + 1
        assert sample("topiary_turn_latency_seconds_count") == latency_before + 1
