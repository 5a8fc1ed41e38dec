"""
Incremental tracking of left-right mirror symmetry.

The delta holds, for each column pair left of the centre, the height of the
right column minus the height of the left one:

    delta[i] = height(6 - i) - height(i)

``None`` means some mirrored pair of cells holds different tokens. No later
move can undo that, so the branch drops symmetry tracking for good.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from c4solver.games.basic import CELLS, CENTRE, CENTRE_FIRST, CENTRE_TO_LEFT, COLUMNS, ROWS, Cell
from c4solver.games.board import Board
from c4solver.games.index import Column

SymmetryDelta = Tuple[int, int, int]

SYMMETRIC: SymmetryDelta = (0, 0, 0)


def make_delta(board: Board) -> Optional[SymmetryDelta]:
    """Scan ``board`` once; ``None`` if it is irreversibly asymmetric."""
    delta = [0, 0, 0]
    for col in COLUMNS[:CENTRE]:
        mirror = col.flipped()
        for row in ROWS:
            left = board.get(CELLS[col][row])
            right = board.get(CELLS[mirror][row])
            if left is None and right is None:
                break
            if left is None:
                delta[col] += 1
            elif right is None:
                delta[col] -= 1
            elif left is not right:
                return None
    return (delta[0], delta[1], delta[2])


def next_delta(
    board: Board,
    cell: Cell,
    delta: Optional[SymmetryDelta],
) -> Optional[SymmetryDelta]:
    """Delta after the token now at ``cell`` was placed. O(1)."""
    if delta is None:
        return None
    if cell.col == CENTRE:
        return delta

    mirror = board.get(cell.flipped())
    if mirror is not None and mirror is not board.get(cell):
        return None

    updated = list(delta)
    if cell.col < CENTRE:
        updated[cell.col] -= 1
    else:
        updated[cell.col.flipped()] += 1
    return (updated[0], updated[1], updated[2])


def is_symmetric(delta: Optional[SymmetryDelta]) -> bool:
    return delta == SYMMETRIC


def child_columns(delta: Optional[SymmetryDelta]) -> Sequence[Column]:
    """Columns worth expanding: only up to the centre while the board is its own mirror."""
    return CENTRE_TO_LEFT if is_symmetric(delta) else CENTRE_FIRST
