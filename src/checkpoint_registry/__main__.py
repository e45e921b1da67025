"""
Checkpoint registry CLI entry point.

Bootstrap the registry for a network, merge the optional checkpoint document,
then list the pins or check a single block against them.

Usage::

    python -m checkpoint_registry
    python -m checkpoint_registry --network mainnet --checkpoints ./checkpoints.json
    python -m checkpoint_registry --check 25417 0x30b8d1fe...e88e4dfaaa

Options:
    --network      Network whose defaults are loaded (default: $CHECKPOINT_NETWORK or mainnet)
    --checkpoints  Checkpoint document to merge (default: $CHECKPOINT_FILE or checkpoints.json)
    --dns          Also query the discovery provider
    --check        Check HEIGHT HASH against the pins instead of listing them
    --metrics      Print Prometheus metrics after running

Exit status is 1 when loading fails or a checked block contradicts a pin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from checkpoint_registry import config
from checkpoint_registry.checkpoints import Checkpoints, NetworkType
from checkpoint_registry.metrics import generate_metrics
from checkpoint_registry.types import CheckpointParseError

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)

        timestamp = self.formatTime(record, self.datefmt)
        colored_time = f"{self.CYAN}{timestamp}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"

        return f"{colored_time} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def build_registry(
    network: NetworkType, checkpoints_path: Path, use_dns: bool = False
) -> tuple[Checkpoints, bool]:
    """
    Run the startup sequence for `network`.

    Returns:
        The registry and whether every external source loaded cleanly.
    """
    registry = Checkpoints()
    registry.init_default_checkpoints(network)
    loaded = registry.load_new_checkpoints(checkpoints_path, network, use_dns)

    logger.info(
        "Registry ready for %s: %d checkpoints, max height %s",
        network,
        len(registry.get_points()),
        registry.get_max_height(),
    )
    return registry, loaded


def run(
    network: NetworkType,
    checkpoints_path: Path,
    use_dns: bool = False,
    check: tuple[str, str] | None = None,
    show_metrics: bool = False,
) -> int:
    """
    Execute the CLI command.

    Returns:
        Process exit status.
    """
    registry, loaded = build_registry(network, checkpoints_path, use_dns)
    status = 0 if loaded else 1

    if check is not None:
        raw_height, raw_hash = check
        try:
            outcome = registry.check_block_outcome(int(raw_height), raw_hash)
        except (CheckpointParseError, ValueError) as e:
            logger.error("Cannot check block: %s", e)
            return 2
        print(f"{outcome.height} {outcome.observed.hex()} {outcome.kind.value}")
        if not outcome.accepted:
            status = 1
    else:
        for checkpoint in registry.get_points():
            print(f"{checkpoint.height} {checkpoint.hash.hex()}")

    if show_metrics:
        sys.stdout.write(generate_metrics().decode())

    return status


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Checkpoint registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--network",
        type=NetworkType.from_name,
        default=NetworkType.from_name(config.CHECKPOINT_NETWORK),
        help="Network whose default checkpoints are loaded",
    )
    parser.add_argument(
        "--checkpoints",
        type=Path,
        default=Path(config.CHECKPOINT_FILE),
        help="Checkpoint JSON document to merge",
    )
    parser.add_argument(
        "--dns",
        action="store_true",
        help="Also query the discovery provider",
    )
    parser.add_argument(
        "--check",
        nargs=2,
        metavar=("HEIGHT", "HASH"),
        default=None,
        help="Check a block against the pins",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print Prometheus metrics after running",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args()

    setup_logging(args.verbose, args.no_color)

    check = tuple(args.check) if args.check is not None else None
    sys.exit(run(args.network, args.checkpoints, args.dns, check, args.metrics))


if __name__ == "__main__":
    main()
