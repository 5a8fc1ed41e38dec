"""Entry point for solving a position with any registered strategy."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from c4solver.games.basic import Token
from c4solver.games.board import Board
from c4solver.registry import get_strategy_entry
from .outcome import Outcome
from .transposition import TranspositionCache

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "symmetric"


@dataclass
class SolveReport:
    winner: Optional[Token]
    outcome: Outcome
    mover: Token
    depth: int
    strategy: str
    board_type: str
    elapsed: float
    cache_hits: int = 0
    cache_misses: int = 0
    cache_size: int = 0

    def as_dict(self) -> Dict[str, Any]:
        """Flat, CSV-friendly view."""
        row = asdict(self)
        row["winner"] = str(self.winner) if self.winner is not None else "undetermined"
        row["outcome"] = self.outcome.value
        row["mover"] = str(self.mover)
        return row


def solve_with_stats(
    board: Board,
    depth: int,
    mover: Optional[Token] = None,
    *,
    strategy: str = DEFAULT_STRATEGY,
) -> SolveReport:
    """
    Solve ``board`` to ``depth`` plies and report timing and cache usage.

    A fresh cache is created for every call, so concurrent calls on separate
    boards do not interact. In-place strategies restore ``board`` before
    returning.
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    entry = get_strategy_entry(strategy)
    if mover is None:
        mover = board.curr_player()

    kwargs = dict(entry.defaults)
    cache = TranspositionCache()
    if entry.cached:
        kwargs["cache"] = cache

    logger.debug("Solving %s to depth %d with '%s', %s to move", type(board).__name__, depth, strategy, mover)
    start = time.perf_counter()
    outcome = entry.fn(board, depth, mover, **kwargs)
    elapsed = time.perf_counter() - start

    report = SolveReport(
        winner=outcome.winner(mover),
        outcome=outcome,
        mover=mover,
        depth=depth,
        strategy=strategy,
        board_type=type(board).__name__,
        elapsed=elapsed,
        cache_hits=cache.hits,
        cache_misses=cache.misses,
        cache_size=len(cache),
    )
    logger.debug(
        "Solved in %.3fs: %s (cache: %d entries, %d hits)",
        elapsed,
        outcome.value,
        report.cache_size,
        report.cache_hits,
    )
    return report


def solve(
    board: Board,
    depth: int,
    mover: Optional[Token] = None,
    *,
    strategy: str = DEFAULT_STRATEGY,
) -> Optional[Token]:
    """
    Winner of ``board`` within ``depth`` plies with ``mover`` to play, or
    ``None`` if neither side can force a win that soon.
    """
    return solve_with_stats(board, depth, mover, strategy=strategy).winner
