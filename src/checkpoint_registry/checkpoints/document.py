"""
Checkpoint document loader.

Operators can ship extra checkpoints beside the node as a JSON document:

    {
      "hashlines": [
        {"height": 25418, "hash": "0a1b..."},
        {"height": 25500, "hash": "ffee..."}
      ]
    }

The document is parsed against an explicit schema before anything touches
the store. Hashes stay as text here and are decoded by the store itself,
so lines that end up skipped never need to be well formed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from checkpoint_registry.types import CheckpointDocumentError, DocumentModel, Uint64

from .store import CheckpointStore


class Hashline(DocumentModel):
    """One (height, hash) record of a checkpoint document."""

    height: Uint64
    """Height of the block to pin."""

    hash: str
    """Block hash as 64 hex digits."""


class HashlineDocument(DocumentModel):
    """A checkpoint document: an ordered list of hashlines."""

    hashlines: tuple[Hashline, ...]
    """Records in document order."""


def parse_checkpoint_document(
    content: str | bytes, *, path: Path | None = None
) -> HashlineDocument:
    """
    Parse checkpoint document text.

    Args:
        content: Raw JSON text.
        path: Where the text came from, used in error messages.

    Raises:
        CheckpointDocumentError: If the text is not JSON or does not match the schema.
    """
    try:
        data = json.loads(content)
    except (ValueError, RecursionError) as e:
        raise CheckpointDocumentError(f"not valid JSON: {e}", path=path) from e

    try:
        return HashlineDocument.model_validate(data)
    except ValidationError as e:
        raise CheckpointDocumentError(
            f"schema mismatch ({e.error_count()} errors): {e.errors()[0]['msg']}", path=path
        ) from e


def read_checkpoint_document(path: Path | str) -> HashlineDocument | None:
    """
    Load a checkpoint document from disk.

    Checkpoint files are optional, so a missing file is not an error.

    Returns:
        The parsed document, or None if `path` does not exist.

    Raises:
        CheckpointDocumentError: If the file cannot be looked up, read or parsed.
    """
    path = Path(path)
    try:
        if not path.exists():
            return None
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CheckpointDocumentError(f"unreadable: {e}", path=path) from e

    return parse_checkpoint_document(content, path=path)


@dataclass(slots=True)
class MergeResult:
    """What a merge did to the store."""

    added: list[Uint64] = field(default_factory=list)
    """Heights newly pinned, in document order."""

    skipped: list[Uint64] = field(default_factory=list)
    """Heights ignored because they do not extend the store."""


def merge_hashlines(
    store: CheckpointStore,
    hashlines: Iterable[Hashline],
    *,
    floor: Uint64 | None = None,
) -> MergeResult:
    """
    Add hashlines to `store` in order.

    Lines at or below `floor` are skipped before their hash is decoded.
    Every other line goes through `CheckpointStore.add`.

    The merge stops at the first failing line. Lines merged before it stay
    merged.

    Args:
        store: Store to extend.
        hashlines: Records to merge.
        floor: Highest height to ignore, or None to merge everything.

    Raises:
        CheckpointParseError: If a merged line carries a malformed hash.
        CheckpointConflictError: If a merged line contradicts an existing pin.
    """
    result = MergeResult()
    for line in hashlines:
        if floor is not None and line.height <= floor:
            result.skipped.append(line.height)
            continue
        if store.add(line.height, line.hash):
            result.added.append(line.height)
    return result
