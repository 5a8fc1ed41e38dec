"""Scoped place/unplace for in-place search."""

from __future__ import annotations

from typing import Optional

from .basic import Cell, Token
from .board import Board
from .index import Column


class placed:
    """
    Place ``token`` in ``col`` for the duration of a ``with`` block.

    ``__enter__`` returns the landing cell, or ``None`` if the column was full
    (nothing is placed then). ``__exit__`` unplaces on every way out of the
    block: normal completion, ``return``, ``break``, ``continue`` or an
    exception.

        with placed(board, col, token) as cell:
            if cell is None:
                continue
            ...
    """

    __slots__ = ("board", "col", "token", "cell")

    def __init__(self, board: Board, col: Column, token: Token) -> None:
        self.board = board
        self.col = col
        self.token = token
        self.cell: Optional[Cell] = None

    def __enter__(self) -> Optional[Cell]:
        self.cell = self.board.place(self.col, self.token)
        return self.cell

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self.cell is not None:
            self.board.unplace(self.col)
            self.cell = None
        return False
