"""Uncached exhaustive minimax, in-place and copy-based."""

from __future__ import annotations

from typing import Sequence

from c4solver.games.basic import CENTRE_FIRST, Token
from c4solver.games.board import Board, next_boards
from c4solver.games.detection import won_at
from c4solver.games.index import Column
from c4solver.games.placement import placed
from .outcome import Outcome


def minimax_inplace(
    board: Board,
    depth: int,
    mover: Token,
    columns: Sequence[Column] = CENTRE_FIRST,
) -> Outcome:
    """
    Search by placing into ``board`` itself and unplacing afterwards.

    ``board`` is left exactly as received on every return path.
    """
    if depth == 0:
        return Outcome.UNDETERMINED

    losing = True
    for col in columns:
        with placed(board, col, mover) as cell:
            if cell is None:
                continue
            if won_at(board, cell):
                return Outcome.MOVER_WINS
            result = minimax_inplace(board, depth - 1, mover.next(), columns)
            if result is Outcome.OPPONENT_WINS:
                return Outcome.MOVER_WINS
            if result is Outcome.UNDETERMINED:
                losing = False

    return Outcome.OPPONENT_WINS if losing else Outcome.UNDETERMINED


def minimax_copy(board: Board, depth: int, mover: Token) -> Outcome:
    """Search by copying the board for every child. ``board`` is never modified."""
    if depth == 0:
        return Outcome.UNDETERMINED

    losing = True
    for child, cell in next_boards(board, mover):
        if won_at(child, cell):
            return Outcome.MOVER_WINS
        result = minimax_copy(child, depth - 1, mover.next())
        if result is Outcome.OPPONENT_WINS:
            return Outcome.MOVER_WINS
        if result is Outcome.UNDETERMINED:
            losing = False

    return Outcome.OPPONENT_WINS if losing else Outcome.UNDETERMINED
