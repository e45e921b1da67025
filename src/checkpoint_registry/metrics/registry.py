"""
Metric registry using prometheus_client.

Provides pre-defined metrics for the checkpoint registry.
"""

from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    generate_latest,
)

# Create a dedicated registry for checkpoint metrics.
#
# Using a dedicated registry avoids pollution from default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Registry State
# -----------------------------------------------------------------------------

checkpoints_pinned = Gauge(
    "checkpoint_registry_pinned",
    "Number of pinned checkpoints",
    registry=REGISTRY,
)

checkpoint_max_height = Gauge(
    "checkpoint_registry_max_height",
    "Highest pinned checkpoint height",
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------

block_checks = Counter(
    "checkpoint_registry_block_checks_total",
    "Blocks checked against the pins, by outcome",
    ["outcome"],
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Loading
# -----------------------------------------------------------------------------

checkpoints_merged = Counter(
    "checkpoint_registry_merged_total",
    "Checkpoints added to the registry, by source",
    ["source"],
    registry=REGISTRY,
)

load_failures = Counter(
    "checkpoint_registry_load_failures_total",
    "Checkpoint loads that were rejected, by source",
    ["source"],
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
