"""
Pluggable sources of additional checkpoints.

The registry asks a discovery provider for extra hashlines after the local
document has been merged. Providers satisfy the protocol structurally, so a
networked implementation can be dropped in without touching call sites.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from .document import Hashline
    from .network import NetworkType


class CheckpointDiscovery(Protocol):
    """Protocol for checkpoint sources beyond the local document."""

    def discover(self, network: NetworkType) -> Iterable[Hashline]:
        """
        Return checkpoints published for `network`.

        Raises:
            CheckpointError: If the source answered with unusable data.
        """
        ...


class NoopDiscovery:
    """Discovery provider that never finds anything."""

    def discover(self, network: NetworkType) -> Iterable[Hashline]:
        return ()
