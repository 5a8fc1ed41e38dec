"""Central registries for board encodings and search strategies."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Dict, Iterable, NamedTuple, Type

BoardFactory = Type[Any]
StrategyFn = Callable[..., Any]


class StrategyEntry(NamedTuple):
    fn: StrategyFn
    cached: bool
    defaults: Dict[str, Any]


_BOARD_REGISTRY: Dict[str, BoardFactory] = {}
_STRATEGY_REGISTRY: Dict[str, StrategyEntry] = {}


def register_board(board_id: str, board_cls: BoardFactory) -> None:
    """Register a board encoding class."""
    if board_id in _BOARD_REGISTRY:
        raise ValueError(f"Board id '{board_id}' is already registered.")
    _BOARD_REGISTRY[board_id] = board_cls


def get_board_class(board_id: str) -> BoardFactory:
    if board_id not in _BOARD_REGISTRY:
        raise KeyError(f"Board id '{board_id}' is not registered.")
    return _BOARD_REGISTRY[board_id]


def make_board(board_id: str) -> Any:
    """Return an empty board of a registered encoding."""
    return get_board_class(board_id).empty()


def list_boards() -> Iterable[str]:
    """Return iterable of registered board identifiers."""
    return tuple(_BOARD_REGISTRY.keys())


def register_strategy(
    strategy_id: str,
    fn: StrategyFn,
    *,
    cached: bool = False,
    **default_kwargs: Any,
) -> None:
    """
    Register a search strategy ``fn(board, depth, mover, **kwargs) -> Outcome``.

    ``cached`` strategies also take a ``cache`` keyword argument.
    """
    if strategy_id in _STRATEGY_REGISTRY:
        raise ValueError(f"Strategy id '{strategy_id}' is already registered.")
    _STRATEGY_REGISTRY[strategy_id] = StrategyEntry(fn, cached, dict(default_kwargs))


def get_strategy_entry(strategy_id: str) -> StrategyEntry:
    """Retrieve the raw function, cache flag and defaults of a strategy."""
    if strategy_id not in _STRATEGY_REGISTRY:
        raise KeyError(f"Strategy id '{strategy_id}' is not registered.")
    entry = _STRATEGY_REGISTRY[strategy_id]
    return StrategyEntry(entry.fn, entry.cached, dict(entry.defaults))


def get_strategy(strategy_id: str) -> StrategyFn:
    """Return the strategy function with its registered defaults bound."""
    entry = get_strategy_entry(strategy_id)
    if not entry.defaults:
        return entry.fn
    return partial(entry.fn, **entry.defaults)


def list_strategies() -> Iterable[str]:
    """Return iterable of registered strategy identifiers."""
    return tuple(_STRATEGY_REGISTRY.keys())
