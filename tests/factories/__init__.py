"""Test factories for creating topics and turn contexts."""

from tests.factories.topics import (
    CounterTopic,
    GreetingTopic,
    NamePrompt,
    RootTopic,
)

__all__ = [
    "CounterTopic",
    "GreetingTopic",
    "NamePrompt",
    "RootTopic",
]
