"""
Global configuration for the checkpoint registry.

Settings are read from the environment once, at import, and validated eagerly.
"""

import os

_SUPPORTED_NETWORKS: list[str] = ["mainnet", "testnet", "stagenet", "fakechain", "undefined"]

CHECKPOINT_NETWORK = os.environ.get("CHECKPOINT_NETWORK", "mainnet").lower()
"""Network whose default checkpoints are loaded. Defaults to 'mainnet'."""

if CHECKPOINT_NETWORK not in _SUPPORTED_NETWORKS:
    raise ValueError(
        f"Invalid CHECKPOINT_NETWORK environment variable: '{CHECKPOINT_NETWORK}'. "
        f"Supported values: {_SUPPORTED_NETWORKS}"
    )

CHECKPOINT_FILE = os.environ.get("CHECKPOINT_FILE", "checkpoints.json")
"""Path of the optional checkpoint document merged at startup."""
