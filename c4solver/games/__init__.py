"""Board encodings, geometry and the textual board format."""

from __future__ import annotations

from .array_board import ArrayBoard
from .basic import (
    CELLS,
    CENTRE,
    CENTRE_FIRST,
    CENTRE_TO_LEFT,
    COLUMN_COUNT,
    COLUMNS,
    ROW_COUNT,
    ROWS,
    START,
    Cell,
    Token,
)
from .bit_board import BitBoard
from .board import Board, clone_and_place, next_boards
from .detection import Threats, count_adjacent_at, won_at
from .errors import BoardFormatError, UnplaceError
from .index import Column, Row
from .placement import placed
from .symmetric_board import SymmetricBitBoard
from .text import display, read_board
from ..registry import list_boards, register_board

for _board_id, _board_cls in (
    ("array", ArrayBoard),
    ("bit", BitBoard),
    ("symmetric", SymmetricBitBoard),
):
    if _board_id not in list_boards():
        register_board(_board_id, _board_cls)

__all__ = [
    "ArrayBoard",
    "BitBoard",
    "Board",
    "BoardFormatError",
    "CELLS",
    "CENTRE",
    "CENTRE_FIRST",
    "CENTRE_TO_LEFT",
    "COLUMNS",
    "COLUMN_COUNT",
    "Cell",
    "Column",
    "ROWS",
    "ROW_COUNT",
    "Row",
    "START",
    "SymmetricBitBoard",
    "Threats",
    "Token",
    "UnplaceError",
    "clone_and_place",
    "count_adjacent_at",
    "display",
    "next_boards",
    "placed",
    "read_board",
    "won_at",
]
