"""
Win and threat detection around a just-occupied cell.

Everything here is defined through ``Board.get`` only, so it applies to every
encoding. Work per call is bounded: at most three cells in each direction on
each side of the cell, in four directions.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Tuple

from .basic import CELLS, COLUMNS, ROWS, WIN_LENGTH, Cell, Token
from .board import Board

# (dcol, drow): horizontal, vertical, rising diagonal, falling diagonal.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (1, -1))

_Ray = Tuple[Cell, ...]


def _ray(cell: Cell, dcol: int, drow: int) -> _Ray:
    cells = []
    col, row = int(cell.col), int(cell.row)
    for _ in range(WIN_LENGTH - 1):
        col += dcol
        row += drow
        if not (0 <= col < len(COLUMNS) and 0 <= row < len(ROWS)):
            break
        cells.append(CELLS[col][row])
    return tuple(cells)


# _RAYS[col][row] -> one (forward, backward) pair per direction.
_RAYS: Tuple[Tuple[Tuple[Tuple[_Ray, _Ray], ...], ...], ...] = tuple(
    tuple(
        tuple((_ray(cell, dc, dr), _ray(cell, -dc, -dr)) for dc, dr in DIRECTIONS)
        for cell in column
    )
    for column in CELLS
)


class Threats(NamedTuple):
    """Directions through a cell whose same-token run is exactly 3 / exactly 2 long."""

    threes: int
    twos: int


def _run_length(board: Board, token: Token, forward: Sequence[Cell], backward: Sequence[Cell]) -> int:
    length = 1
    for cell in forward:
        if board.get(cell) is not token:
            break
        length += 1
    for cell in backward:
        if board.get(cell) is not token:
            break
        length += 1
    return length


def won_at(board: Board, cell: Cell) -> bool:
    """True iff four or more same-colour tokens line up through ``cell``."""
    token = board.get(cell)
    if token is None:
        return False
    for forward, backward in _RAYS[cell.col][cell.row]:
        if _run_length(board, token, forward, backward) >= WIN_LENGTH:
            return True
    return False


def count_adjacent_at(board: Board, cell: Cell) -> Optional[Threats]:
    """
    Tally shorter runs through ``cell`` for move ordering.

    Returns ``None`` as soon as any direction already holds a win. An empty
    cell has no runs.
    """
    token = board.get(cell)
    if token is None:
        return Threats(0, 0)
    threes = twos = 0
    for forward, backward in _RAYS[cell.col][cell.row]:
        length = _run_length(board, token, forward, backward)
        if length >= WIN_LENGTH:
            return None
        if length == 3:
            threes += 1
        elif length == 2:
            twos += 1
    return Threats(threes, twos)
