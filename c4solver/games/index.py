"""Bounded column and row indices."""

from __future__ import annotations


class BoundedIndex(int):
    """
    Integer restricted to ``[0, MAX]``.

    Subclasses set ``MAX``. Construction validates the range, so an index that
    exists is always a legal one. Arithmetic falls back to plain ``int``.
    """

    MAX: int = 0

    def __new__(cls, value: int) -> "BoundedIndex":
        value = int(value)
        if not 0 <= value <= cls.MAX:
            raise ValueError(
                f"{cls.__name__} out of bounds: {value} not in [0, {cls.MAX}]"
            )
        return super().__new__(cls, value)

    @classmethod
    def count(cls) -> int:
        return cls.MAX + 1

    def shift(self, by: int) -> "BoundedIndex":
        """Shift by ``by``, saturating at both edges."""
        return type(self)(min(max(int(self) + by, 0), self.MAX))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    __str__ = int.__repr__


class Column(BoundedIndex):
    MAX = 6

    def flipped(self) -> "Column":
        """Column on the opposite side of the centre."""
        return Column(self.MAX - int(self))


class Row(BoundedIndex):
    MAX = 5
