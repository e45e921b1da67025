"""
Checkpoint registry used by the chain engine.

Startup Sequence
----------------
1. `init_default_checkpoints` pins the hardcoded table for the network.
2. `load_checkpoints_from_json` extends it from an optional local document.
3. `load_checkpoints_from_dns` extends it from the discovery provider.

Steps 2 and 3 are usually run together through `load_new_checkpoints`.
After startup the engine only queries: `check_block` for every incoming
block and `is_alternative_block_allowed` for every reorg candidate.

Mutation is expected to finish before the registry is shared. There is no
internal locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence, SupportsInt

from checkpoint_registry.types import CheckpointError, Uint64

from .defaults import DEFAULT_CHECKPOINTS
from .discovery import CheckpointDiscovery, NoopDiscovery
from .document import merge_hashlines, read_checkpoint_document
from .events import CheckpointObserver, LoggingObserver
from .network import NetworkType
from .store import BlockCheck, Checkpoint, CheckpointStore, HashLike

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Checkpoints:
    """
    Public checkpoint surface for the blockchain engine.

    Wraps a `CheckpointStore` with the default table, the discovery provider
    and an observer. All three are injectable.
    """

    defaults: Mapping[NetworkType, Sequence[Checkpoint]] = field(
        default_factory=lambda: DEFAULT_CHECKPOINTS
    )
    """Hardcoded checkpoint table, indexed by network."""

    discovery: CheckpointDiscovery = field(default_factory=NoopDiscovery)
    """Provider consulted by `load_checkpoints_from_dns`."""

    observer: CheckpointObserver = field(default_factory=LoggingObserver)
    """Receives validation and loading events."""

    store: CheckpointStore = field(default_factory=CheckpointStore)
    """The pins themselves."""

    # -------------------------------------------------------------------------
    # Store access
    # -------------------------------------------------------------------------

    def add_checkpoint(self, height: SupportsInt, block_hash: HashLike) -> bool:
        """
        Pin `block_hash` at `height`.

        Returns:
            True if the pin is new, False if it was already present.

        Raises:
            CheckpointParseError: If the height or hash is malformed.
            CheckpointConflictError: If `height` is pinned to a different hash.
        """
        added = self.store.add(height, block_hash)
        if added:
            self._notify_changed()
        return added

    def get_max_height(self) -> Uint64 | None:
        """Highest pinned height, or None when nothing is pinned."""
        return self.store.max_height()

    def get_points(self) -> tuple[Checkpoint, ...]:
        """All pins in ascending height order."""
        return self.store.points()

    def check_for_conflicts(self, other: Checkpoints | CheckpointStore) -> None:
        """
        Verify that `other` agrees with this registry wherever both pin a height.

        Raises:
            CheckpointConflictError: On the first disagreement.
        """
        other_store = other.store if isinstance(other, Checkpoints) else other
        self.store.conflicts_with(other_store)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def is_in_checkpoint_zone(self, height: SupportsInt) -> bool:
        """Whether `height` is at or below the highest pin."""
        return self.store.in_checkpoint_zone(height)

    def check_block(self, height: SupportsInt, block_hash: HashLike) -> bool:
        """Whether a block is consistent with the pin at its height."""
        return self.check_block_outcome(height, block_hash).accepted

    def check_block_outcome(self, height: SupportsInt, block_hash: HashLike) -> BlockCheck:
        """
        Compare a block against the pin at its height and report the outcome.

        The returned `BlockCheck` also tells whether the height is pinned.
        A block with `accepted == False` must be treated as invalid.
        """
        check = self.store.check_block(height, block_hash)
        self.observer.block_checked(check)
        return check

    def is_alternative_block_allowed(
        self, blockchain_height: SupportsInt, block_height: SupportsInt
    ) -> bool:
        """Whether a branch with a block at `block_height` may replace the best chain."""
        return self.store.alternative_block_allowed(blockchain_height, block_height)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def init_default_checkpoints(self, network: NetworkType) -> int:
        """
        Pin the hardcoded table for `network`.

        Safe to call repeatedly: pins already present are left alone.

        Returns:
            Number of pins added.

        Raises:
            CheckpointConflictError: If the table contradicts an existing pin.
        """
        added = 0
        try:
            for checkpoint in self.defaults.get(network, ()):
                if self.store.add(checkpoint.height, checkpoint.hash):
                    added += 1
        finally:
            self._notify_changed()
        self.observer.defaults_applied(network, added)
        return added

    def load_checkpoints_from_json(self, path: Path | str) -> int:
        """
        Merge checkpoints from a local JSON document.

        Only lines above the highest pin held before the call are merged.
        Lower lines are skipped without being validated. With an empty
        registry every line is merged.

        Returns:
            Number of pins added. Zero if the document does not exist.

        Raises:
            CheckpointDocumentError: If the document is malformed. Nothing is merged.
            CheckpointParseError: If a merged line has a malformed hash.
            CheckpointConflictError: If a merged line contradicts a pin.
                Lines merged before the failing one are kept.
        """
        path = Path(path)
        document = read_checkpoint_document(path)
        if document is None:
            self.observer.document_missing(path)
            return 0

        floor = self.store.max_height()
        logger.debug("Merging checkpoint document %s above height %s", path, floor)
        try:
            result = merge_hashlines(self.store, document.hashlines, floor=floor)
        finally:
            self._notify_changed()

        self.observer.checkpoints_merged("json", result)
        return len(result.added)

    def load_checkpoints_from_dns(self, network: NetworkType) -> int:
        """
        Merge checkpoints offered by the discovery provider.

        Every offered line goes through the regular `add` path.

        Returns:
            Number of pins added.

        Raises:
            CheckpointError: If the provider fails or offers a bad line.
        """
        try:
            result = merge_hashlines(self.store, self.discovery.discover(network))
        finally:
            self._notify_changed()

        self.observer.checkpoints_merged("discovery", result)
        return len(result.added)

    def load_new_checkpoints(
        self, path: Path | str, network: NetworkType, use_dns: bool = False
    ) -> bool:
        """
        Run every configured external checkpoint source.

        The JSON document is always loaded. Discovery runs only when
        `use_dns` is set, and runs even if the document failed.
        A failure does not undo what earlier steps merged.

        Returns:
            True if every step that ran succeeded.
        """
        result = True

        try:
            self.load_checkpoints_from_json(path)
        except CheckpointError as e:
            self.observer.load_failed("json", e)
            result = False

        if use_dns:
            try:
                self.load_checkpoints_from_dns(network)
            except CheckpointError as e:
                self.observer.load_failed("discovery", e)
                result = False

        return result

    def _notify_changed(self) -> None:
        self.observer.registry_changed(len(self.store), self.store.max_height())
