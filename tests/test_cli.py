"""Tests for the solve CLI."""

from __future__ import annotations

import csv

from c4solver.cli.solve import solve_position
from positions import BOARD0, OPEN_THREE, SIMPLE


def _write(tmp_path, text, name="board.txt"):
    path = tmp_path / name
    path.write_text(text + "\n+-------+\n")
    return str(path)


def test_solve_position_prints_winner(tmp_path, capsys):
    board_path = _write(tmp_path, SIMPLE[0])
    assert solve_position(board_path, depth=1) == 0

    out = capsys.readouterr().out
    assert "Winner:   Y" in out
    assert "To move:  Y" in out
    assert "+-------+" in out


def test_solve_position_undetermined(tmp_path, capsys):
    board_path = _write(tmp_path, OPEN_THREE[0])
    assert solve_position(board_path, depth=2, strategy="ordered", board_type="bit") == 0

    out = capsys.readouterr().out
    assert "Winner:   undetermined" in out
    assert "Strategy: ordered on BitBoard" in out


def test_solve_position_uses_config(tmp_path, capsys):
    board_path = _write(tmp_path, BOARD0[0])
    config_path = tmp_path / "solve.yaml"
    config_path.write_text("board_type: array\nstrategy: cached\ndepth: 6\n")

    assert solve_position(board_path, config=str(config_path)) == 0

    out = capsys.readouterr().out
    assert "Strategy: cached on ArrayBoard" in out
    assert "Depth:    6" in out
    assert "Winner:   Y" in out


def test_solve_position_writes_metrics(tmp_path):
    board_path = _write(tmp_path, SIMPLE[0])
    log_dir = tmp_path / "logs"
    assert solve_position(board_path, depth=1, log_dir=str(log_dir)) == 0

    with open(log_dir / "solve_metrics.csv", newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert rows[0]["board"] == board_path
    assert rows[0]["winner"] == "Y"
    assert rows[0]["depth"] == "1"


def test_solve_position_rejects_malformed_board(tmp_path, capsys):
    board_path = _write(tmp_path, "|..X....|")
    assert solve_position(board_path, depth=2) == 1
    assert "Error" in capsys.readouterr().out


def test_solve_position_missing_file(tmp_path, capsys):
    assert solve_position(str(tmp_path / "missing.txt"), depth=2) == 1
    assert "Error" in capsys.readouterr().out
