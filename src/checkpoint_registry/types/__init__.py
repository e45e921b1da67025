"""Reusable type definitions for the checkpoint registry."""

from .base import DocumentModel, StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32
from .exceptions import (
    CheckpointConflictError,
    CheckpointDocumentError,
    CheckpointError,
    CheckpointParseError,
)
from .uint import BaseUint, Uint64

__all__ = [
    # Core types
    "Uint64",
    "BaseUint",
    "Bytes32",
    "BaseBytes",
    "StrictBaseModel",
    "DocumentModel",
    # Exceptions
    "CheckpointError",
    "CheckpointParseError",
    "CheckpointDocumentError",
    "CheckpointConflictError",
]
