"""Utility functions for pathcompose.

This module provides:

- Structured logging setup
- Decision observers for composition tracing
- Composition statistics
"""

from pathcompose.utils.logging import (
    CompositionStats,
    DecisionCollector,
    configure_logging,
    log_decision,
)

__all__ = [
    "CompositionStats",
    "DecisionCollector",
    "configure_logging",
    "log_decision",
]
