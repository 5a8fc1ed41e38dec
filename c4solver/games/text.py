"""Textual board format.

    |.......|
    |.......|
    |.......|
    |.......|
    |RRRR...|
    |YYYY...|
    +-------+

Rows are delimited by ``|``, top row first. ``.`` or a space marks an empty
cell. A line starting with ``+`` or ``-`` ends the board.
"""

from __future__ import annotations

import logging
from typing import Optional, Type, TypeVar

from .basic import CELLS, COLUMN_COUNT, COLUMNS, ROWS, Token
from .bit_board import BitBoard
from .board import Board
from .errors import BoardFormatError

logger = logging.getLogger(__name__)

ROW_DELIMITER = "|"
EMPTY_MARKERS = (".", " ")
BORDER_MARKERS = ("+", "-")
BORDER = "+" + "-" * COLUMN_COUNT + "+"

B = TypeVar("B", bound=Board)


def _strip_border(text: str) -> str:
    body = []
    for line in text.splitlines():
        if line.strip().startswith(BORDER_MARKERS):
            break
        body.append(line)
    return "\n".join(body)


def read_board(text: str, board_cls: Type[B] = BitBoard) -> B:
    """
    Parse ``text`` into a new ``board_cls`` board.

    Rows are replayed bottom-up, so each column is rebuilt in stacking order.

    Raises:
        BoardFormatError: on an unknown character, a row wider than the board,
            an overfull column, or token counts that no legal game produces.
    """
    board = board_cls.empty()
    counts = {Token.YELLOW: 0, Token.RED: 0}

    for line in reversed(_strip_border(text).split(ROW_DELIMITER)):
        if not line.strip():
            continue
        for i, char in enumerate(line):
            if char in EMPTY_MARKERS:
                continue
            token = Token.from_char(char)
            if i >= COLUMN_COUNT:
                raise BoardFormatError(f"Token {char!r} outside the board in row {line!r}")
            if board.place(COLUMNS[i], token) is None:
                raise BoardFormatError(f"Column {i} holds more tokens than it has rows")
            counts[token] += 1

    difference = counts[Token.YELLOW] - counts[Token.RED]
    if difference not in (0, 1):
        raise BoardFormatError(
            f"Inconsistent token counts: {counts[Token.YELLOW]} yellow, {counts[Token.RED]} red"
        )
    logger.debug("Read %s with %d tokens", board_cls.__name__, sum(counts.values()))
    return board


def _marker(token: Optional[Token]) -> str:
    return EMPTY_MARKERS[0] if token is None else str(token)


def display(board: Board) -> str:
    """Render ``board`` in the format ``read_board`` accepts."""
    lines = [
        ROW_DELIMITER
        + "".join(_marker(board.get(CELLS[col][row])) for col in COLUMNS)
        + ROW_DELIMITER
        for row in reversed(ROWS)
    ]
    lines.append(BORDER)
    return "\n".join(lines)
