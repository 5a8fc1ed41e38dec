"""Per-search transposition cache."""

from __future__ import annotations

from typing import Dict, Hashable, Optional

from .outcome import Outcome


class TranspositionCache:
    """
    Outcomes of boards already explored during one top-level search.

    Created per solve call and dropped when it returns, so it needs no
    invalidation. Keys must not be mutated while stored.
    """

    def __init__(self) -> None:
        self.table: Dict[Hashable, Outcome] = {}
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def get(self, key: Hashable) -> Optional[Outcome]:
        outcome = self.table.get(key)
        if outcome is None:
            self.misses += 1
        else:
            self.hits += 1
        return outcome

    def put(self, key: Hashable, outcome: Outcome) -> None:
        self.table[key] = outcome
        self.stores += 1

    def reset(self) -> None:
        self.table.clear()
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __contains__(self, key: Hashable) -> bool:
        return key in self.table

    def __len__(self) -> int:
        return len(self.table)
