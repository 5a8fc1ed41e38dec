"""Tokens, cells and the fixed board geometry."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple

from .errors import BoardFormatError
from .index import Column, Row

COLUMN_COUNT = Column.count()
ROW_COUNT = Row.count()
WIN_LENGTH = 4


class Token(Enum):
    YELLOW = "Y"
    RED = "R"

    def next(self) -> "Token":
        """The other token."""
        return Token.RED if self is Token.YELLOW else Token.YELLOW

    @classmethod
    def from_char(cls, char: str) -> "Token":
        try:
            return cls(char)
        except ValueError:
            raise BoardFormatError(f"Invalid token character: {char!r}") from None

    def __str__(self) -> str:
        return self.value


# Yellow always starts.
START = Token.YELLOW


class Cell(NamedTuple):
    col: Column
    row: Row

    def flipped(self) -> "Cell":
        return CELLS[self.col.flipped()][self.row]


COLUMNS: Tuple[Column, ...] = tuple(Column(i) for i in range(COLUMN_COUNT))
ROWS: Tuple[Row, ...] = tuple(Row(i) for i in range(ROW_COUNT))

CENTRE = Column(COLUMN_COUNT // 2)
BOTTOM = Row(0)
TOP = Row(Row.MAX)

# Centre outwards.
CENTRE_FIRST: Tuple[Column, ...] = tuple(Column(i) for i in (3, 2, 4, 1, 5, 0, 6))
# Left edge through the centre, centre first. Enough on a mirror-symmetric board.
CENTRE_TO_LEFT: Tuple[Column, ...] = tuple(Column(i) for i in (3, 2, 1, 0))

# CELLS[col][row]
CELLS: Tuple[Tuple[Cell, ...], ...] = tuple(
    tuple(Cell(col, row) for row in ROWS) for col in COLUMNS
)
