"""CLI for solving a position read from a text file."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Literal, Optional

import tyro

from c4solver.config import SolverConfig, load_config
from c4solver.games import BoardFormatError, display, read_board
from c4solver.registry import get_board_class
from c4solver.search import solve_with_stats
from c4solver.utils import MetricsLogger


def _read_text(board_path: str) -> str:
    if board_path == "-":
        return sys.stdin.read()
    return Path(board_path).read_text()


def solve_position(
    board_path: str,
    depth: Optional[int] = None,
    board_type: Optional[Literal["array", "bit", "symmetric"]] = None,
    strategy: Optional[
        Literal["inplace", "copy", "inplace_cached", "cached", "ordered", "symmetric"]
    ] = None,
    mover: Optional[Literal["Y", "R"]] = None,
    config: Optional[str] = None,
    log_dir: Optional[str] = None,
    verbose: bool = False,
) -> int:
    """
    Solve a connect-four position within a depth horizon.

    Args:
        board_path: Text file holding the board ('-' reads stdin)
        depth: Maximum number of plies to search
        board_type: Board encoding to search with
        strategy: Search variant
        mover: Player to move ('Y' or 'R'); derived from the board if omitted
        config: YAML file with defaults for the options above
        log_dir: Directory for the CSV of run metrics
        verbose: Enable debug logging
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    cfg = load_config(config) if config is not None else SolverConfig()
    overrides = {
        "depth": depth,
        "board_type": board_type,
        "strategy": strategy,
        "mover": mover,
        "log_dir": log_dir,
    }
    cfg = replace(cfg, **{key: value for key, value in overrides.items() if value is not None})

    try:
        board = read_board(_read_text(board_path), get_board_class(cfg.board_type))
    except (BoardFormatError, OSError) as e:
        print(f"Error: could not read board from {board_path}: {e}")
        return 1

    report = solve_with_stats(board, cfg.depth, cfg.mover_token(), strategy=cfg.strategy)

    print(display(board))
    print("=" * 50)
    print(f"To move:  {report.mover}")
    print(f"Depth:    {report.depth}")
    print(f"Strategy: {report.strategy} on {report.board_type}")
    print(f"Winner:   {report.winner if report.winner is not None else 'undetermined'}")
    print(f"Outcome:  {report.outcome.value}")
    print(f"Time:     {report.elapsed:.3f}s")
    print(f"Cache:    {report.cache_size} entries, {report.cache_hits} hits")
    print("=" * 50)

    if cfg.log_dir is not None:
        with MetricsLogger(log_dir=cfg.log_dir) as metrics:
            metrics.log_dict({"board": board_path, **report.as_dict()})

    return 0


def main() -> None:
    sys.exit(tyro.cli(solve_position))


if __name__ == "__main__":
    main()
