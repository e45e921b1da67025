"""Exception hierarchy for the checkpoint registry."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .byte_arrays import Bytes32
    from .uint import Uint64


class CheckpointError(Exception):
    """
    Base exception for all checkpoint-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class CheckpointParseError(CheckpointError):
    """Raised when a checkpoint height or hash cannot be decoded."""


class CheckpointDocumentError(CheckpointParseError):
    """
    Raised when a checkpoint document cannot be read or does not match the schema.

    Attributes:
        path: The document location, if it came from a file.
        detail: Description of what went wrong.
    """

    def __init__(self, detail: str, *, path: Path | None = None) -> None:
        self.path = path
        self.detail = detail

        if path is not None:
            msg = f"Invalid checkpoint document {path}: {detail}"
        else:
            msg = f"Invalid checkpoint document: {detail}"

        super().__init__(msg)


class CheckpointConflictError(CheckpointError):
    """
    Raised when a height is already pinned to a different hash.

    Attributes:
        height: The contested height.
        existing: The hash already pinned at that height.
        proposed: The hash that was rejected.
    """

    def __init__(self, height: Uint64, *, existing: Bytes32, proposed: Bytes32) -> None:
        self.height = height
        self.existing = existing
        self.proposed = proposed

        super().__init__(
            f"Checkpoint at height {height} already pinned to {existing.hex()}, "
            f"refusing {proposed.hex()}"
        )
