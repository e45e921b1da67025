"""
Metrics module for observability.

Exposes checkpoint registry counters and gauges in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    block_checks,
    checkpoint_max_height,
    checkpoints_merged,
    checkpoints_pinned,
    generate_metrics,
    load_failures,
)

__all__ = [
    "REGISTRY",
    "block_checks",
    "checkpoint_max_height",
    "checkpoints_merged",
    "checkpoints_pinned",
    "generate_metrics",
    "load_failures",
]
