"""
Checkpoint Store
================

An ordered set of trusted (height, block hash) pins and the pure validation
queries the chain engine runs against it.

Why Checkpoints?
----------------
A node syncing from scratch has to trust whichever chain its peers serve.
A handful of hardcoded pins anchors that history: any block at a pinned
height must carry the pinned hash, and no reorganization may rewrite the
chain at or below the most recent pin the node has already passed.

Invariants
----------
- One hash per height. Re-adding the same pair is a no-op, a different
  hash is a conflict and leaves the store untouched.
- Append-only. Nothing is ever removed or overwritten.
- Every hash is exactly 32 bytes and every height fits in a uint64.

The store performs no I/O and no logging. Validation queries return
structured outcomes and leave reporting to the caller.
"""

from __future__ import annotations

from bisect import bisect_right, insort
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, SupportsInt

from checkpoint_registry.types import (
    Bytes32,
    CheckpointConflictError,
    CheckpointParseError,
    StrictBaseModel,
    Uint64,
)

HashLike = Bytes32 | bytes | bytearray | str
"""Anything `parse_hash` can turn into a block hash."""

GENESIS_HEIGHT = Uint64(0)
"""Height of the genesis block, which can never be re-proposed."""


class Checkpoint(StrictBaseModel):
    """A trusted pin asserting the canonical block hash at a height."""

    height: Uint64
    """Height of the pinned block."""

    hash: Bytes32
    """Hash the canonical block at `height` must have."""


def parse_height(height: SupportsInt) -> Uint64:
    """
    Validate a block height.

    Raises:
        CheckpointParseError: If the value is not an unsigned 64-bit integer.
    """
    if isinstance(height, Uint64):
        return height
    try:
        return Uint64(height)
    except (OverflowError, TypeError, ValueError) as e:
        raise CheckpointParseError(f"Invalid checkpoint height {height!r}: {e}") from e


def parse_hash(value: HashLike) -> Bytes32:
    """
    Decode a block hash from raw bytes or hex text.

    Hex text must be exactly 64 digits, optionally prefixed with '0x'.

    Raises:
        CheckpointParseError: If the value does not decode to 32 bytes.
    """
    if isinstance(value, Bytes32):
        return value
    try:
        if isinstance(value, str):
            return Bytes32.from_hex(value)
        if isinstance(value, (bytes, bytearray)):
            return Bytes32(value)
    except ValueError as e:
        raise CheckpointParseError(f"Invalid checkpoint hash {value!r}: {e}") from e
    raise CheckpointParseError(f"Unsupported checkpoint hash type {type(value).__name__}")


class CheckKind(Enum):
    """Outcome of checking a block against the pins."""

    NOT_A_CHECKPOINT = "not_a_checkpoint"
    """No pin exists at the block's height; nothing to enforce."""

    PASSED = "passed"
    """The block matches the pin at its height."""

    MISMATCH = "mismatch"
    """The block disagrees with the pin at its height and must be rejected."""


@dataclass(frozen=True, slots=True)
class BlockCheck:
    """Structured result of checking one block against the store."""

    height: Uint64
    """Height of the checked block."""

    observed: Bytes32
    """Hash of the checked block."""

    expected: Bytes32 | None
    """Pinned hash at `height`, or None when the height is not pinned."""

    @property
    def kind(self) -> CheckKind:
        """Classify the check."""
        if self.expected is None:
            return CheckKind.NOT_A_CHECKPOINT
        if self.expected == self.observed:
            return CheckKind.PASSED
        return CheckKind.MISMATCH

    @property
    def is_checkpoint(self) -> bool:
        """Whether the block's height is pinned."""
        return self.expected is not None

    @property
    def accepted(self) -> bool:
        """Whether the block is consistent with the pins."""
        return self.kind is not CheckKind.MISMATCH


class CheckpointStore:
    """
    Ordered mapping from height to pinned hash.

    Heights are kept sorted alongside the mapping so that "highest pin" and
    "nearest pin at or below X" are a bisect away.

    Not thread-safe. Callers sharing a store across threads must serialize
    writers against readers themselves.
    """

    __slots__ = ("_points", "_heights")

    def __init__(self) -> None:
        self._points: dict[Uint64, Bytes32] = {}
        self._heights: list[Uint64] = []

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add(self, height: SupportsInt, block_hash: HashLike) -> bool:
        """
        Pin `block_hash` at `height`.

        Both inputs are decoded before the store is consulted, so a malformed
        value never reaches it.

        Args:
            height: Block height to pin.
            block_hash: Hash as `Bytes32`, raw bytes or 64 hex digits.

        Returns:
            True if the pin is new, False if the identical pin already existed.

        Raises:
            CheckpointParseError: If the height or hash is malformed.
            CheckpointConflictError: If `height` is pinned to a different hash.
        """
        pinned_height = parse_height(height)
        digest = parse_hash(block_hash)

        existing = self._points.get(pinned_height)
        if existing is not None:
            if existing != digest:
                raise CheckpointConflictError(pinned_height, existing=existing, proposed=digest)
            return False

        self._points[pinned_height] = digest
        insort(self._heights, pinned_height)
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, height: SupportsInt) -> Bytes32 | None:
        """Return the hash pinned at `height`, if any."""
        return self._points.get(parse_height(height))

    def max_height(self) -> Uint64 | None:
        """Return the highest pinned height, or None for an empty store."""
        if not self._heights:
            return None
        return self._heights[-1]

    def points(self) -> tuple[Checkpoint, ...]:
        """Snapshot of every pin in ascending height order."""
        return tuple(self)

    def nearest_at_or_below(self, height: SupportsInt) -> Checkpoint | None:
        """Return the highest pin whose height is `<= height`, if any."""
        index = bisect_right(self._heights, parse_height(height))
        if index == 0:
            return None
        pinned_height = self._heights[index - 1]
        return Checkpoint(height=pinned_height, hash=self._points[pinned_height])

    def conflicts_with(self, other: CheckpointStore) -> None:
        """
        Verify that `other` agrees with this store on every shared height.

        Neither store is modified.

        Raises:
            CheckpointConflictError: On the first shared height with a different hash.
        """
        for checkpoint in other:
            existing = self._points.get(checkpoint.height)
            if existing is not None and existing != checkpoint.hash:
                raise CheckpointConflictError(
                    checkpoint.height, existing=existing, proposed=checkpoint.hash
                )

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def in_checkpoint_zone(self, height: SupportsInt) -> bool:
        """
        Check whether pins are enforced at `height`.

        The zone covers every height up to and including the highest pin.
        An empty store has no zone.
        """
        highest = self.max_height()
        return highest is not None and parse_height(height) <= highest

    def check_block(self, height: SupportsInt, block_hash: HashLike) -> BlockCheck:
        """
        Compare a block against the pin at its height.

        A mismatch is reported, not raised: the caller must reject the block.
        """
        block_height = parse_height(height)
        return BlockCheck(
            height=block_height,
            observed=parse_hash(block_hash),
            expected=self._points.get(block_height),
        )

    def alternative_block_allowed(
        self, current_best_height: SupportsInt, candidate_height: SupportsInt
    ) -> bool:
        """
        Decide whether a branch may compete with the current best chain.

        Rules:
        1. Genesis can never be replaced.
        2. Before the chain reaches its first pin, any branch is allowed.
        3. Otherwise the branch must fork strictly above the nearest pin at
           or below the current tip. History at a pinned height is final.

        Args:
            current_best_height: Height of the current best chain.
            candidate_height: Height of the alternative block.
        """
        candidate = parse_height(candidate_height)
        if candidate == GENESIS_HEIGHT:
            return False

        pin = self.nearest_at_or_below(current_best_height)
        if pin is None:
            return True

        return candidate > pin.height

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Checkpoint]:
        for height in self._heights:
            yield Checkpoint(height=height, hash=self._points[height])

    def __len__(self) -> int:
        return len(self._heights)

    def __contains__(self, height: object) -> bool:
        if not isinstance(height, int):
            return False
        try:
            return parse_height(height) in self._points
        except CheckpointParseError:
            return False

    def __repr__(self) -> str:
        return f"CheckpointStore(size={len(self)}, max_height={self.max_height()!r})"
