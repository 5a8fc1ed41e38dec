"""Configuration schema for solve runs."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from c4solver.games.basic import Token


@dataclass
class SolverConfig:
    board_type: str = "symmetric"
    strategy: str = "symmetric"
    depth: int = 8
    mover: Optional[str] = None
    log_dir: Optional[str] = None

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("depth must be non-negative")
        if self.mover is not None and self.mover not in {token.value for token in Token}:
            raise ValueError(f"mover must be 'Y' or 'R', got {self.mover!r}")

    def mover_token(self) -> Optional[Token]:
        return Token(self.mover) if self.mover is not None else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown solver config keys: {sorted(unknown)}")

        mover = data.get("mover")
        log_dir = data.get("log_dir")
        return cls(
            board_type=str(data.get("board_type", "symmetric")),
            strategy=str(data.get("strategy", "symmetric")),
            depth=int(data.get("depth", 8)),
            mover=str(mover) if mover is not None else None,
            log_dir=str(log_dir) if log_dir is not None else None,
        )


def load_config(path: Union[str, Path]) -> SolverConfig:
    """Load SolverConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return SolverConfig.from_dict(data)
