"""Tests for the board encodings."""

import numpy as np
import pytest

from c4solver.games import (
    CELLS,
    COLUMNS,
    ROWS,
    START,
    ArrayBoard,
    BitBoard,
    Cell,
    Column,
    Row,
    SymmetricBitBoard,
    Token,
    UnplaceError,
    clone_and_place,
    next_boards,
)
from c4solver.games import bit_column

BOARD_TYPES = [ArrayBoard, BitBoard, SymmetricBitBoard]


def _fill_row_by_row(board, rows):
    token = START
    for _ in range(rows):
        for col in COLUMNS:
            board.place(col, token)
            token = token.next()
    return board


@pytest.mark.parametrize("board_cls", BOARD_TYPES)
def test_empty_board(board_cls):
    board = board_cls.empty()
    for col in COLUMNS:
        assert board.can_place(col)
        assert board.height(col) == 0
        for row in ROWS:
            assert board.get(CELLS[col][row]) is None
    assert board.curr_player() is Token.YELLOW


@pytest.mark.parametrize("board_cls", BOARD_TYPES)
def test_place_stacks_from_bottom(board_cls):
    board = board_cls.empty()
    assert board.place(Column(2), Token.YELLOW) == Cell(Column(2), Row(0))
    assert board.place(Column(2), Token.RED) == Cell(Column(2), Row(1))
    assert board.get(CELLS[2][0]) is Token.YELLOW
    assert board.get(CELLS[2][1]) is Token.RED
    assert board.get(CELLS[2][2]) is None
    assert board.height(Column(2)) == 2


@pytest.mark.parametrize("board_cls", BOARD_TYPES)
def test_cannot_place_in_full_column(board_cls):
    board = board_cls.empty()
    token = START
    for col in COLUMNS:
        for _ in ROWS:
            assert board.can_place(col)
            assert board.curr_player() is token
            assert board.place(col, token) is not None
            token = token.next()
        assert not board.can_place(col)

        snapshot = board.copy()
        assert board.place(col, token) is None
        assert board == snapshot


@pytest.mark.parametrize("board_cls", BOARD_TYPES)
def test_unplace_inverts_place(board_cls):
    board = board_cls.empty()
    token = START
    for _ in ROWS:
        for col in COLUMNS:
            before = board.copy()
            assert board.place(col, token) is not None
            board.unplace(col)
            assert board == before
            board.place(col, token)
            token = token.next()


@pytest.mark.parametrize("board_cls", BOARD_TYPES)
def test_unplace_empty_column_raises(board_cls):
    board = board_cls.empty()
    board.place(Column(0), Token.YELLOW)
    with pytest.raises(UnplaceError):
        board.unplace(Column(1))


@pytest.mark.parametrize("board_cls", BOARD_TYPES)
def test_copy_is_independent(board_cls):
    board = _fill_row_by_row(board_cls.empty(), 2)
    copy = board.copy()
    copy.place(Column(3), Token.YELLOW)
    assert board.height(Column(3)) == 2
    assert copy.height(Column(3)) == 3
    assert board != copy


@pytest.mark.parametrize("board_cls", BOARD_TYPES)
def test_clone_and_place_leaves_parent(board_cls):
    board = board_cls.empty()
    child, cell = clone_and_place(board, Column(4), Token.YELLOW)
    assert cell == Cell(Column(4), Row(0))
    assert board == board_cls.empty()
    assert child.get(cell) is Token.YELLOW


def test_next_boards_centre_first_and_skips_full():
    board = BitBoard.empty()
    for _ in ROWS:
        board.place(Column(3), Token.RED)
    cols = [int(cell.col) for _, cell in next_boards(board, Token.YELLOW)]
    assert cols == [2, 4, 1, 5, 0, 6]


@pytest.mark.parametrize("board_cls", BOARD_TYPES)
def test_key_tracks_state(board_cls):
    board = board_cls.empty()
    key = board.key()
    board.place(Column(1), Token.YELLOW)
    assert board.key() != key
    board.unplace(Column(1))
    assert board.key() == key
    hash(board.key())


def test_bit_column_layout():
    column = bit_column.EMPTY
    assert bit_column.height(column) == 0
    column = bit_column.push(column, Token.YELLOW)
    column = bit_column.push(column, Token.RED)
    assert column == 0b101
    assert bit_column.get(column, 0) is Token.YELLOW
    assert bit_column.get(column, 1) is Token.RED
    assert bit_column.get(column, 2) is None
    assert bit_column.pop(column) == 0b10


def test_array_board_grid_values():
    board = ArrayBoard.empty()
    board.place(Column(0), Token.YELLOW)
    board.place(Column(0), Token.RED)
    assert board.grid.dtype == np.int8
    assert board.grid[0].tolist() == [1, -1, 0, 0, 0, 0]


def test_plain_boards_distinguish_mirrors():
    for board_cls in (ArrayBoard, BitBoard):
        board = board_cls.empty()
        board.place(Column(0), Token.YELLOW)
        assert board != board.mirrored()


def test_symmetric_board_equals_mirror():
    board_a = SymmetricBitBoard.empty()
    board_b = SymmetricBitBoard.empty()
    token = START
    for _ in ROWS:
        for col in COLUMNS:
            board_a.place(col, token)
            board_b.place(col.flipped(), token)
            assert board_a == board_b
            assert hash(board_a) == hash(board_b)
            assert board_a.key() == board_b.key()
            token = token.next()


def test_symmetric_board_distinct_positions_differ():
    board_a = SymmetricBitBoard.empty()
    board_a.place(Column(0), Token.YELLOW)
    board_a.place(Column(1), Token.RED)

    # Only the outer pair is swapped, so this is not a reflection of board_a.
    board_b = SymmetricBitBoard.empty()
    board_b.place(Column(6), Token.YELLOW)
    board_b.place(Column(1), Token.RED)

    assert board_a != board_b
    assert board_a.key() != board_b.key()
    assert board_a == board_a.mirrored()


def test_encodings_never_compare_equal_across_types():
    assert BitBoard.empty() != SymmetricBitBoard.empty()
    assert ArrayBoard.empty() != BitBoard.empty()
