"""Dense board stored as a numpy array of cells."""

from __future__ import annotations

from typing import Hashable, Optional

import numpy as np

from .basic import CELLS, COLUMN_COUNT, ROW_COUNT, ROWS, TOP, Cell, Token
from .errors import UnplaceError
from .index import Column

_EMPTY = 0
_TOKEN_VALUES = {Token.YELLOW: 1, Token.RED: -1}


class ArrayBoard:
    """
    One int8 per cell, indexed ``grid[col, row]`` with row 0 at the bottom.
    Values: 0 empty, 1 yellow, -1 red.
    """

    __slots__ = ("grid",)

    def __init__(self, grid: Optional[np.ndarray] = None) -> None:
        if grid is None:
            grid = np.zeros((COLUMN_COUNT, ROW_COUNT), dtype=np.int8)
        elif grid.shape != (COLUMN_COUNT, ROW_COUNT):
            raise ValueError(f"Expected grid of shape {(COLUMN_COUNT, ROW_COUNT)}, got {grid.shape}")
        self.grid = grid

    @classmethod
    def empty(cls) -> "ArrayBoard":
        return cls()

    def get(self, cell: Cell) -> Optional[Token]:
        value = self.grid[cell.col, cell.row]
        if value == _EMPTY:
            return None
        return Token.YELLOW if value > 0 else Token.RED

    def can_place(self, col: Column) -> bool:
        return bool(self.grid[col, TOP] == _EMPTY)

    def height(self, col: Column) -> int:
        return int(np.count_nonzero(self.grid[col]))

    def place(self, col: Column, token: Token) -> Optional[Cell]:
        # Gravity: lowest empty row.
        for row in ROWS:
            if self.grid[col, row] == _EMPTY:
                self.grid[col, row] = _TOKEN_VALUES[token]
                return CELLS[col][row]
        return None

    def unplace(self, col: Column) -> None:
        for row in reversed(ROWS):
            if self.grid[col, row] != _EMPTY:
                self.grid[col, row] = _EMPTY
                return
        raise UnplaceError(f"Tried to unplace from an empty column: {col}")

    def curr_player(self) -> Token:
        placed = int(np.count_nonzero(self.grid))
        return Token.YELLOW if placed % 2 == 0 else Token.RED

    def copy(self) -> "ArrayBoard":
        return ArrayBoard(self.grid.copy())

    def mirrored(self) -> "ArrayBoard":
        """Left-right reflection."""
        return ArrayBoard(self.grid[::-1].copy())

    def key(self) -> Hashable:
        return self.grid.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayBoard):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash(self.grid.tobytes())

    def __repr__(self) -> str:
        return f"ArrayBoard({self.grid.tolist()!r})"
