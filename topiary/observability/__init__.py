"""Observability: structured logging and metrics.

Uses structlog for logging and Prometheus for metrics.
"""

from topiary.observability.logging import (
    AppNameAdder,
    PIIRedactor,
    get_logger,
    setup_logging,
    setup_logging_from_config,
)

__all__ = [
    "AppNameAdder",
    "PIIRedactor",
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
]
