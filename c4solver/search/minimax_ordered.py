"""Cached minimax that tries the most threatening children first."""

from __future__ import annotations

from operator import itemgetter
from typing import List, Optional, Tuple

from c4solver.games.basic import Token
from c4solver.games.board import Board, next_boards
from c4solver.games.detection import Threats, count_adjacent_at
from .outcome import Outcome
from .transposition import TranspositionCache


def minimax_ordered(
    board: Board,
    depth: int,
    mover: Token,
    cache: Optional[TranspositionCache] = None,
) -> Outcome:
    if cache is None:
        cache = TranspositionCache()
    return ordered_search(board, depth, mover, cache)


def ordered_search(board: Board, depth: int, mover: Token, cache: TranspositionCache) -> Outcome:
    """
    Like ``cached_search`` but all children are generated up front.

    An immediate win ends the node at once. The rest are explored by
    descending ``(threes, twos)``; the sort is stable so ties keep centre-first
    order. Ordering only changes how soon a cutoff is found, never the outcome.
    """
    if depth == 0:
        return Outcome.UNDETERMINED

    cached = cache.get(board)
    if cached is not None:
        return cached

    candidates: List[Tuple[Threats, Board]] = []
    for child, cell in next_boards(board, mover):
        threats = count_adjacent_at(child, cell)
        if threats is None:
            cache.put(board, Outcome.MOVER_WINS)
            return Outcome.MOVER_WINS
        candidates.append((threats, child))
    candidates.sort(key=itemgetter(0), reverse=True)

    outcome = Outcome.UNDETERMINED
    losing = True
    for _, child in candidates:
        result = ordered_search(child, depth - 1, mover.next(), cache)
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
