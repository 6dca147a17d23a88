"""Prometheus metrics for the topic tree and the turn engine."""

from prometheus_client import Counter, Histogram

# Turn metrics
TURN_COUNT = Counter(
    "topiary_turn_count_total",
    "Total number of turns processed",
    labelnames=["status"],
)

TURN_LATENCY = Histogram(
    "topiary_turn_latency_seconds",
    "Turn processing latency in seconds",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Topic metrics
TOPIC_ACTIVATIONS = Counter(
    "topiary_topic_activations_total",
    "Sub-topics made live, either freshly created or rebuilt from state",
    labelnames=["topic", "source"],
)

TOPIC_COMPLETIONS = Counter(
    "topiary_topic_completions_total",
    "Topics reporting completion through their handlers",
    labelnames=["topic", "outcome"],
)
