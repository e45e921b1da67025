"""Test helpers for checkpoint registry unit tests."""

from __future__ import annotations

import json
from pathlib import Path

from .mocks import FailingDiscovery, RecordingObserver, StaticDiscovery

HASH_A = "aa" * 32
HASH_B = "bb" * 32
HASH_C = "cc" * 32


def write_document(path: Path, *lines: tuple[int, str]) -> Path:
    """Write a checkpoint document with the given (height, hash) lines."""
    path.write_text(json.dumps({"hashlines": [{"height": h, "hash": x} for h, x in lines]}))
    return path


__all__ = [
    "HASH_A",
    "HASH_B",
    "HASH_C",
    "FailingDiscovery",
    "RecordingObserver",
    "StaticDiscovery",
    "write_document",
]
