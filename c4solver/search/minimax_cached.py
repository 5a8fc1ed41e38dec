"""Minimax with a transposition cache."""

from __future__ import annotations

from typing import Optional, Sequence

from c4solver.games.basic import CENTRE_FIRST, Token
from c4solver.games.board import Board, next_boards
from c4solver.games.detection import won_at
from c4solver.games.index import Column
from c4solver.games.placement import placed
from .outcome import Outcome
from .transposition import TranspositionCache


def minimax_cached(
    board: Board,
    depth: int,
    mover: Token,
    cache: Optional[TranspositionCache] = None,
) -> Outcome:
    """Copy-based search; boards themselves are the cache keys."""
    if cache is None:
        cache = TranspositionCache()
    return cached_search(board, depth, mover, cache)


def cached_search(board: Board, depth: int, mover: Token, cache: TranspositionCache) -> Outcome:
    if depth == 0:
        return Outcome.UNDETERMINED

    cached = cache.get(board)
    if cached is not None:
        return cached

    outcome = Outcome.UNDETERMINED
    losing = True
    for child, cell in next_boards(board, mover):
        if won_at(child, cell):
            outcome = Outcome.MOVER_WINS
            break
        result = cached_search(child, depth - 1, mover.next(), cache)
        if result is Outcome.OPPONENT_WINS:
            outcome = Outcome.MOVER_WINS
            break
        if result is Outcome.UNDETERMINED:
            losing = False
    else:
        if losing:
            outcome = Outcome.OPPONENT_WINS

    cache.put(board, outcome)
    return outcome


def minimax_inplace_cached(
    board: Board,
    depth: int,
    mover: Token,
    cache: Optional[TranspositionCache] = None,
    columns: Sequence[Column] = CENTRE_FIRST,
) -> Outcome:
    """
    In-place search keyed by ``board.key()`` snapshots.

    Entries are not interchangeable with ``minimax_cached`` ones, since the
    keys differ in kind.
    """
    if cache is None:
        cache = TranspositionCache()
    return _inplace_cached_search(board, depth, mover, cache, columns)


def _inplace_cached_search(
    board: Board,
    depth: int,
    mover: Token,
    cache: TranspositionCache,
    columns: Sequence[Column],
) -> Outcome:
    if depth == 0:
        return Outcome.UNDETERMINED

    key = board.key()
    cached = cache.get(key)
    if cached is not None:
        return cached

    outcome = Outcome.UNDETERMINED
    losing = True
    for col in columns:
        with placed(board, col, mover) as cell:
            if cell is None:
                continue
            if won_at(board, cell):
                outcome = Outcome.MOVER_WINS
                break
            result = _inplace_cached_search(board, depth - 1, mover.next(), cache, columns)
            if result is Outcome.OPPONENT_WINS:
                outcome = Outcome.MOVER_WINS
                break
            if result is Outcome.UNDETERMINED:
                losing = False
    else:
        if losing:
            outcome = Outcome.OPPONENT_WINS

    cache.put(key, outcome)
    return outcome
