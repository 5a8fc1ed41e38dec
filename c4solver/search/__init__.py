"""Exhaustive bounded minimax search."""

from c4solver.games.basic import COLUMNS

from .minimax_basic import minimax_copy, minimax_inplace
from .minimax_cached import cached_search, minimax_cached, minimax_inplace_cached
from .minimax_ordered import minimax_ordered
from .minimax_symmetric import minimax_symmetric
from .outcome import Outcome
from .solver import DEFAULT_STRATEGY, SolveReport, solve, solve_with_stats
from .symmetry import SymmetryDelta, make_delta, next_delta
from .transposition import TranspositionCache
from ..registry import list_strategies, register_strategy

_STRATEGIES = (
    # Plain left-to-right column order.
    ("inplace", minimax_inplace, False, {"columns": COLUMNS}),
    ("copy", minimax_copy, False, {}),
    ("inplace_cached", minimax_inplace_cached, True, {}),
    ("cached", minimax_cached, True, {}),
    ("ordered", minimax_ordered, True, {}),
    ("symmetric", minimax_symmetric, True, {}),
)

for _strategy_id, _fn, _cached, _defaults in _STRATEGIES:
    if _strategy_id not in list_strategies():
        register_strategy(_strategy_id, _fn, cached=_cached, **_defaults)

__all__ = [
    "DEFAULT_STRATEGY",
    "Outcome",
    "SolveReport",
    "SymmetryDelta",
    "TranspositionCache",
    "cached_search",
    "make_delta",
    "minimax_cached",
    "minimax_copy",
    "minimax_inplace",
    "minimax_inplace_cached",
    "minimax_ordered",
    "minimax_symmetric",
    "next_delta",
    "solve",
    "solve_with_stats",
]
