"""
Checkpoint registry: trusted (height, hash) pins for chain validation.

Provides the store, the per-network default table, the document loader,
the discovery extension point and the `Checkpoints` facade.
"""

from .defaults import DEFAULT_CHECKPOINTS, MAINNET_CHECKPOINTS
from .discovery import CheckpointDiscovery, NoopDiscovery
from .document import (
    Hashline,
    HashlineDocument,
    MergeResult,
    merge_hashlines,
    parse_checkpoint_document,
    read_checkpoint_document,
)
from .events import CheckpointObserver, LoggingObserver
from .network import NetworkType
from .registry import Checkpoints
from .store import (
    BlockCheck,
    Checkpoint,
    CheckKind,
    CheckpointStore,
    parse_hash,
    parse_height,
)

__all__ = [
    "BlockCheck",
    "CheckKind",
    "Checkpoint",
    "CheckpointDiscovery",
    "CheckpointObserver",
    "CheckpointStore",
    "Checkpoints",
    "DEFAULT_CHECKPOINTS",
    "Hashline",
    "HashlineDocument",
    "LoggingObserver",
    "MAINNET_CHECKPOINTS",
    "MergeResult",
    "NetworkType",
    "NoopDiscovery",
    "merge_hashlines",
    "parse_checkpoint_document",
    "parse_hash",
    "parse_height",
    "read_checkpoint_document",
]
