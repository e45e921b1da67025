"""
Shared pytest fixtures for checkpoint registry tests.

Provides sample hashes, pre-populated stores and a recording observer.
"""

from __future__ import annotations

import pytest

from checkpoint_registry.checkpoints import (
    Checkpoint,
    Checkpoints,
    CheckpointStore,
    NetworkType,
)
from checkpoint_registry.types import Bytes32, Uint64
from tests.checkpoint_registry.helpers import HASH_A, HASH_B, RecordingObserver


@pytest.fixture
def hash_a() -> Bytes32:
    """First sample block hash."""
    return Bytes32.from_hex(HASH_A)


@pytest.fixture
def hash_b() -> Bytes32:
    """Second sample block hash."""
    return Bytes32.from_hex(HASH_B)


@pytest.fixture
def store() -> CheckpointStore:
    """Empty checkpoint store."""
    return CheckpointStore()


@pytest.fixture
def pinned_store(hash_a: Bytes32) -> CheckpointStore:
    """Store with a single pin at height 100."""
    store = CheckpointStore()
    store.add(100, hash_a)
    return store


@pytest.fixture
def observer() -> RecordingObserver:
    """Fresh recording observer."""
    return RecordingObserver()


@pytest.fixture
def sample_defaults() -> dict[NetworkType, tuple[Checkpoint, ...]]:
    """A small default table with pins on the test network only."""
    return {
        NetworkType.TESTNET: (
            Checkpoint(height=Uint64(0), hash=Bytes32.from_hex(HASH_A)),
            Checkpoint(height=Uint64(50), hash=Bytes32.from_hex(HASH_B)),
        ),
    }


@pytest.fixture
def registry(observer: RecordingObserver) -> Checkpoints:
    """Registry with the real default table and a recording observer."""
    return Checkpoints(observer=observer)
