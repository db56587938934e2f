from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Optional, Sequence

from ..sim.core.errors import BoardError, ConfigError
from ..sim.core.rng import DeterministicRng
from ..sim.core.world import SimulationResult, World
from .loaders import load_board, load_parameters
from .report import CompositeReporter, ConsoleReporter, CsvReporter

logger = logging.getLogger(__name__)


def run_headless(
    parameters_path: Path,
    board_path: Path,
    seed: Optional[int] = None,
    log_path: Optional[Path] = None,
    stream: Optional[IO[str]] = None,
    snapshots: bool = True,
) -> SimulationResult:
    config = load_parameters(parameters_path, seed=seed)
    grid = load_board(board_path, config)
    logger.info("Loaded %dx%d board with %d ripe cells", grid.width, grid.height, grid.ripe_food_count)

    reporters = [ConsoleReporter(stream, snapshots=snapshots)]
    if log_path:
        reporters.append(CsvReporter(log_path))
    reporter = CompositeReporter(reporters)
    try:
        world = World(config, grid, DeterministicRng(config.seed))
        return world.run(reporter)
    finally:
        reporter.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evolving agents on a toroidal food grid")
    parser.add_argument("parameters", type=Path, help="Parameter file (name value per line, or YAML)")
    parser.add_argument("board", type=Path, help="Board file: ' ' empty cell, 'x' food")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write per-round statistics")
    parser.add_argument("--quiet", action="store_true", help="Skip the periodic full population dumps.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostic messages written to stderr.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        run_headless(args.parameters, args.board, seed=args.seed, log_path=args.log, snapshots=not args.quiet)
    except FileNotFoundError as exc:
        print(f"File not found: {exc.filename}")
        return 1
    except (ConfigError, BoardError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
