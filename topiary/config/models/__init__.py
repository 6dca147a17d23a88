"""Configuration section models."""

from topiary.config.models.engine import EngineConfig
from topiary.config.models.observability import (
    LoggingConfig,
    ObservabilityConfig,
)

__all__ = [
    "EngineConfig",
    "LoggingConfig",
    "ObservabilityConfig",
]
