"""Result of a bounded search, relative to the player to move."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from c4solver.games.basic import Token


class Outcome(Enum):
    MOVER_WINS = "mover_wins"
    OPPONENT_WINS = "opponent_wins"
    UNDETERMINED = "undetermined"

    def winner(self, mover: Token) -> Optional[Token]:
        """Winning token, given who was to move; ``None`` if undetermined."""
        if self is Outcome.MOVER_WINS:
            return mover
        if self is Outcome.OPPONENT_WINS:
            return mover.next()
        return None

    @classmethod
    def from_winner(cls, winner: Optional[Token], mover: Token) -> "Outcome":
        if winner is None:
            return cls.UNDETERMINED
        return cls.MOVER_WINS if winner is mover else cls.OPPONENT_WINS
