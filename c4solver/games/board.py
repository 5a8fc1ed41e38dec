"""Board capability set shared by every encoding."""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Optional, Protocol, Tuple, TypeVar

from .basic import CENTRE_FIRST, Cell, Token
from .index import Column


class Board(Protocol):
    """
    Structural interface of a board encoding.

    Encodings do not share a base class; anything providing these methods can
    be searched. ``won_at`` and ``count_adjacent_at`` live in
    :mod:`c4solver.games.detection` and work on any ``Board``.
    """

    @classmethod
    def empty(cls) -> "Board":
        """A board with no tokens placed."""

    def get(self, cell: Cell) -> Optional[Token]:
        ...

    def can_place(self, col: Column) -> bool:
        ...

    def place(self, col: Column, token: Token) -> Optional[Cell]:
        """
        Drop ``token`` into ``col`` and return the landing cell.
        Returns ``None`` without touching the board if the column is full.
        """

    def unplace(self, col: Column) -> None:
        """
        Remove the top token of ``col``. Only valid right after a matching
        ``place`` in the same frame; raises ``UnplaceError`` on an empty column.
        """

    def height(self, col: Column) -> int:
        ...

    def curr_player(self) -> Token:
        """Player to move, from the token count (even means yellow)."""

    def copy(self) -> "Board":
        ...

    def key(self) -> Hashable:
        """Hashable snapshot of the current state, for caching in-place searches."""


B = TypeVar("B", bound=Board)


def clone_and_place(board: B, col: Column, token: Token) -> Optional[Tuple[B, Cell]]:
    """Copy ``board`` and place into the copy; the original is never touched."""
    if not board.can_place(col):
        return None
    child = board.copy()
    cell = child.place(col, token)
    return child, cell


def next_boards(
    board: B,
    token: Token,
    columns: Iterable[Column] = CENTRE_FIRST,
) -> Iterator[Tuple[B, Cell]]:
    """Every child of ``board`` reachable by ``token``, in ``columns`` order."""
    for col in columns:
        child = clone_and_place(board, col, token)
        if child is not None:
            yield child
