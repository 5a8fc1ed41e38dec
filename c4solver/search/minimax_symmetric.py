"""Cached minimax that halves the branching of mirror-symmetric positions."""

from __future__ import annotations

from typing import Optional

from c4solver.games.basic import Token
from c4solver.games.board import Board, next_boards
from c4solver.games.detection import won_at
from .minimax_cached import cached_search
from .outcome import Outcome
from .symmetry import SymmetryDelta, child_columns, make_delta, next_delta
from .transposition import TranspositionCache


def minimax_symmetric(
    board: Board,
    depth: int,
    mover: Token,
    cache: Optional[TranspositionCache] = None,
) -> Outcome:
    """
    Pair with ``SymmetricBitBoard`` to also share cache slots between mirrored
    positions; any other encoding still gets the halved branching.
    """
    if cache is None:
        cache = TranspositionCache()
    delta = make_delta(board)
    if delta is None:
        return cached_search(board, depth, mover, cache)
    return symmetric_search(board, depth, mover, cache, delta)


def symmetric_search(
    board: Board,
    depth: int,
    mover: Token,
    cache: TranspositionCache,
    delta: SymmetryDelta,
) -> Outcome:
    if depth == 0:
        return Outcome.UNDETERMINED

    cached = cache.get(board)
    if cached is not None:
        return cached

    outcome = Outcome.UNDETERMINED
    losing = True
    for child, cell in next_boards(board, mover, child_columns(delta)):
        if won_at(child, cell):
            outcome = Outcome.MOVER_WINS
            break
        child_delta = next_delta(child, cell, delta)
        if child_delta is None:
            result = cached_search(child, depth - 1, mover.next(), cache)
        else:
            result = symmetric_search(child, depth - 1, mover.next(), cache, child_delta)
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
