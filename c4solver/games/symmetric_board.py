"""Packed board that treats a position and its mirror image as the same state."""

from __future__ import annotations

from typing import Hashable

from .basic import CENTRE
from .bit_board import BitBoard


class SymmetricBitBoard(BitBoard):
    """
    ``BitBoard`` storage with mirror-aware equality and hashing.

    Mirrored positions have the same game-theoretic outcome, so a cache keyed
    by these boards stores each pair once.
    """

    __slots__ = ()

    def key(self) -> Hashable:
        # Canonical form: the lesser of the two reflections.
        cols = tuple(self._cols)
        return min(cols, cols[::-1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymmetricBitBoard):
            return NotImplemented
        return self._cols == other._cols or self._cols == other._cols[::-1]

    def __hash__(self) -> int:
        cols = self._cols
        parts = [cols[CENTRE]]
        for left in range(CENTRE):
            a, b = cols[left], cols[-1 - left]
            # (min, max) ignores which side of the pair holds which column.
            parts.append(min(a, b))
            parts.append(max(a, b))
        return hash(tuple(parts))
