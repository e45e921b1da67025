"""Tests for the per-network default checkpoint table."""

from __future__ import annotations

import pytest

from checkpoint_registry.checkpoints import (
    DEFAULT_CHECKPOINTS,
    MAINNET_CHECKPOINTS,
    NetworkType,
)
from checkpoint_registry.types import Bytes32, Uint64


def test_every_network_has_an_entry() -> None:
    """The table covers the whole enum."""
    assert set(DEFAULT_CHECKPOINTS) == set(NetworkType)


@pytest.mark.parametrize(
    "network",
    [NetworkType.TESTNET, NetworkType.STAGENET, NetworkType.FAKECHAIN, NetworkType.UNDEFINED],
)
def test_non_production_networks_are_empty(network: NetworkType) -> None:
    """Only the production network ships pins."""
    assert DEFAULT_CHECKPOINTS[network] == ()


def test_mainnet_table_shape() -> None:
    """Mainnet pins start at genesis, end at the v13 fork and are strictly increasing."""
    assert DEFAULT_CHECKPOINTS[NetworkType.MAINNET] is MAINNET_CHECKPOINTS
    assert len(MAINNET_CHECKPOINTS) == 22
    assert MAINNET_CHECKPOINTS[0].height == Uint64(0)
    assert MAINNET_CHECKPOINTS[-1].height == Uint64(25417)

    heights = [int(cp.height) for cp in MAINNET_CHECKPOINTS]
    assert heights == sorted(set(heights))


def test_mainnet_genesis_hash() -> None:
    """The genesis pin decodes to the expected digest."""
    assert MAINNET_CHECKPOINTS[0].hash == Bytes32.from_hex(
        "c106ebad646e2dc0f9ab96741b2c320d3435b43d6f6f9660b1f318f33a764ad2"
    )


def test_table_is_read_only() -> None:
    """The shared table cannot be modified at runtime."""
    with pytest.raises(TypeError):
        DEFAULT_CHECKPOINTS[NetworkType.TESTNET] = MAINNET_CHECKPOINTS  # type: ignore[index]


@pytest.mark.parametrize(
    "name,expected",
    [
        ("mainnet", NetworkType.MAINNET),
        ("TestNet", NetworkType.TESTNET),
        (" stagenet ", NetworkType.STAGENET),
    ],
)
def test_network_from_name(name: str, expected: NetworkType) -> None:
    """Network names are matched case-insensitively."""
    assert NetworkType.from_name(name) is expected


def test_unknown_network_name() -> None:
    """Unknown names list the supported values."""
    with pytest.raises(ValueError, match="Supported values"):
        NetworkType.from_name("devnet")
