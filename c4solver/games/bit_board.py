"""Board stored as one packed integer per column."""

from __future__ import annotations

from typing import Hashable, List, Optional, Sequence, Tuple

from . import bit_column
from .basic import CELLS, COLUMN_COUNT, Cell, Token
from .errors import UnplaceError
from .index import Column


class BitBoard:
    """
    Seven ``bit_column`` integers. Copying is a list copy, so this encoding
    suits both copy-based and in-place search.
    """

    __slots__ = ("_cols",)

    def __init__(self, cols: Optional[Sequence[int]] = None) -> None:
        if cols is None:
            self._cols: List[int] = [bit_column.EMPTY] * COLUMN_COUNT
        else:
            if len(cols) != COLUMN_COUNT:
                raise ValueError(f"Expected {COLUMN_COUNT} columns, got {len(cols)}")
            self._cols = list(cols)

    @classmethod
    def empty(cls) -> "BitBoard":
        return cls()

    @property
    def cols(self) -> Tuple[int, ...]:
        return tuple(self._cols)

    def get(self, cell: Cell) -> Optional[Token]:
        return bit_column.get(self._cols[cell.col], cell.row)

    def can_place(self, col: Column) -> bool:
        return not bit_column.is_full(self._cols[col])

    def height(self, col: Column) -> int:
        return bit_column.height(self._cols[col])

    def place(self, col: Column, token: Token) -> Optional[Cell]:
        column = self._cols[col]
        if bit_column.is_full(column):
            return None
        self._cols[col] = bit_column.push(column, token)
        return CELLS[col][bit_column.height(column)]

    def unplace(self, col: Column) -> None:
        column = self._cols[col]
        if bit_column.is_empty(column):
            raise UnplaceError(f"Tried to unplace from an empty column: {col}")
        self._cols[col] = bit_column.pop(column)

    def curr_player(self) -> Token:
        placed = sum(bit_column.height(column) for column in self._cols)
        return Token.YELLOW if placed % 2 == 0 else Token.RED

    def copy(self) -> "BitBoard":
        return type(self)(self._cols)

    def mirrored(self) -> "BitBoard":
        """Left-right reflection."""
        return type(self)(self._cols[::-1])

    def key(self) -> Hashable:
        return tuple(self._cols)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cols == other._cols

    def __hash__(self) -> int:
        return hash(tuple(self._cols))

    def __repr__(self) -> str:
        cols = ", ".join(bin(column) for column in self._cols)
        return f"{type(self).__name__}([{cols}])"
