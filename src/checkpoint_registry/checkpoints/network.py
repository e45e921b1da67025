"""Network selector for the deployment class a node runs on."""

from __future__ import annotations

from enum import Enum


class NetworkType(Enum):
    """
    Deployment class of the node.

    Only the production network ships with hardcoded checkpoints.
    """

    MAINNET = "mainnet"
    """Primary production network."""

    TESTNET = "testnet"
    """Public test network."""

    STAGENET = "stagenet"
    """Staging network mirroring production rules."""

    FAKECHAIN = "fakechain"
    """Local simulation chain used by tests and tooling."""

    UNDEFINED = "undefined"
    """Sentinel for a node that has not been configured."""

    @classmethod
    def from_name(cls, name: str) -> NetworkType:
        """
        Look up a network by its case-insensitive name.

        Raises:
            ValueError: If the name does not match any network.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown network '{name}'. Supported values: {supported}") from None

    def __str__(self) -> str:
        return self.value
