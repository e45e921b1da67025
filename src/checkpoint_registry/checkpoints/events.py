"""
Reporting for checkpoint registry activity.

The store returns structured outcomes and never logs. The registry hands
those outcomes to an observer, which decides how loud each one is.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from checkpoint_registry import metrics

from .store import CheckKind

if TYPE_CHECKING:
    from checkpoint_registry.types import CheckpointError, Uint64

    from .document import MergeResult
    from .network import NetworkType
    from .store import BlockCheck

logger = logging.getLogger(__name__)


class CheckpointObserver(Protocol):
    """Receives registry events."""

    def block_checked(self, check: BlockCheck) -> None:
        """A block was compared against the pins."""
        ...

    def defaults_applied(self, network: NetworkType, added: int) -> None:
        """The default table for `network` was applied."""
        ...

    def document_missing(self, path: Path) -> None:
        """No checkpoint document exists at `path`."""
        ...

    def checkpoints_merged(self, source: str, result: MergeResult) -> None:
        """External checkpoints were merged."""
        ...

    def load_failed(self, source: str, error: CheckpointError) -> None:
        """An external checkpoint source was rejected."""
        ...

    def registry_changed(self, size: int, max_height: Uint64 | None) -> None:
        """The set of pins may have changed."""
        ...


class LoggingObserver:
    """
    Observer that logs events and updates the Prometheus metrics.

    Severity:
    - A pin mismatch is an error: the block is invalid.
    - A rejected checkpoint source is a warning: the node keeps running.
    - A passed pin and completed merges are informational.
    - Skipped lines and missing documents are debug noise.
    """

    def block_checked(self, check: BlockCheck) -> None:
        kind = check.kind
        metrics.block_checks.labels(outcome=kind.value).inc()

        if kind is CheckKind.PASSED:
            logger.info("Checkpoint passed for height %d %s", check.height, check.observed.hex())
        elif kind is CheckKind.MISMATCH:
            assert check.expected is not None
            logger.error(
                "Checkpoint failed for height %d. Expected hash: %s, fetched hash: %s",
                check.height,
                check.expected.hex(),
                check.observed.hex(),
            )

    def defaults_applied(self, network: NetworkType, added: int) -> None:
        logger.info("Applied %d default checkpoints for %s", added, network)
        metrics.checkpoints_merged.labels(source="defaults").inc(added)

    def document_missing(self, path: Path) -> None:
        logger.debug("Checkpoint document not found: %s", path)

    def checkpoints_merged(self, source: str, result: MergeResult) -> None:
        for height in result.skipped:
            logger.debug("Ignoring %s checkpoint at height %d", source, height)
        for height in result.added:
            logger.debug("Added %s checkpoint at height %d", source, height)

        logger.info(
            "Merged %d checkpoints from %s (%d skipped)",
            len(result.added),
            source,
            len(result.skipped),
        )
        metrics.checkpoints_merged.labels(source=source).inc(len(result.added))

    def load_failed(self, source: str, error: CheckpointError) -> None:
        logger.warning("Error loading checkpoints from %s: %s", source, error)
        metrics.load_failures.labels(source=source).inc()

    def registry_changed(self, size: int, max_height: Uint64 | None) -> None:
        metrics.checkpoints_pinned.set(size)
        metrics.checkpoint_max_height.set(0 if max_height is None else int(max_height))
