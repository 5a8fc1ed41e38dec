"""Tests for the solve entry points."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from c4solver.games import BitBoard, SymmetricBitBoard, Token, read_board
from c4solver.registry import list_strategies
from c4solver.search import DEFAULT_STRATEGY, Outcome, solve, solve_with_stats
from positions import BOARD0, OPEN_THREE, SIMPLE


def test_solve_returns_winner():
    board = read_board(SIMPLE[0])
    assert solve(board, 1) is Token.YELLOW


def test_solve_with_explicit_mover():
    board = read_board(BOARD0[0])
    assert solve(board, 6, Token.RED) is Token.YELLOW


def test_mover_defaults_to_player_to_move():
    board = read_board(BOARD0[0])
    report = solve_with_stats(board, 6)
    assert report.mover is Token.RED
    assert report.outcome is Outcome.OPPONENT_WINS
    assert report.winner is Token.YELLOW


def test_undetermined_within_horizon():
    board = read_board(OPEN_THREE[0])
    assert solve(board, 2) is None
    assert solve(board, 0) is None


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        solve(BitBoard.empty(), -1)


def test_unknown_strategy_rejected():
    with pytest.raises(KeyError):
        solve(BitBoard.empty(), 2, strategy="no_such_strategy")


@pytest.mark.parametrize("strategy", ["inplace", "copy", "inplace_cached", "cached", "ordered", "symmetric"])
def test_every_registered_strategy_solves(strategy):
    assert strategy in list_strategies()
    board = read_board(OPEN_THREE[0], SymmetricBitBoard)
    assert solve(board, 3, strategy=strategy) is Token.YELLOW


def test_report_fields():
    board = read_board(OPEN_THREE[0], SymmetricBitBoard)
    report = solve_with_stats(board, 3)

    assert report.strategy == DEFAULT_STRATEGY
    assert report.board_type == "SymmetricBitBoard"
    assert report.depth == 3
    assert report.elapsed >= 0.0
    assert report.cache_size > 0
    assert report.cache_hits + report.cache_misses > 0


def test_uncached_strategy_reports_empty_cache():
    report = solve_with_stats(BitBoard.empty(), 3, strategy="copy")
    assert report.cache_size == 0
    assert report.cache_hits == 0


def test_report_as_dict_is_flat():
    board = read_board(BOARD0[0])
    row = solve_with_stats(board, 6, strategy="cached").as_dict()

    assert row["winner"] == "Y"
    assert row["mover"] == "R"
    assert row["outcome"] == "opponent_wins"
    assert row["strategy"] == "cached"

    row = solve_with_stats(BitBoard.empty(), 2).as_dict()
    assert row["winner"] == "undetermined"


def test_inplace_strategy_restores_board():
    board = read_board(BOARD0[0])
    before = board.copy()
    solve(board, 8, strategy="inplace")
    assert board == before


def test_concurrent_solves_agree():
    positions = [SIMPLE, BOARD0, OPEN_THREE] * 3

    def run(position):
        text, depth, _ = position
        return solve(read_board(text, SymmetricBitBoard), depth)

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(run, positions))

    expected = [Token(winner) for _, _, winner in positions]
    assert results == expected
