"""
Packed single-column encoding.

A column is one int: a leading sentinel 1 followed by one bit per occupied
row, bottom token most significant, top token least significant.

    0b1          empty column
    0b1abcdef    full column, a at the bottom, f at the top

Yellow is stored as 0, red as 1.
"""

from __future__ import annotations

from typing import Optional

from .basic import ROW_COUNT, Token

EMPTY = 0b1

_TOKEN_BITS = {Token.YELLOW: 0, Token.RED: 1}


def height(column: int) -> int:
    """Number of tokens; also the bit index of the sentinel."""
    return column.bit_length() - 1


def is_empty(column: int) -> bool:
    return column == EMPTY


def is_full(column: int) -> bool:
    return height(column) >= ROW_COUNT


def get(column: int, row: int) -> Optional[Token]:
    count = height(column)
    if row >= count:
        return None
    bit = (column >> (count - row - 1)) & 1
    return Token.RED if bit else Token.YELLOW


def push(column: int, token: Token) -> int:
    return (column << 1) | _TOKEN_BITS[token]


def pop(column: int) -> int:
    return column >> 1
