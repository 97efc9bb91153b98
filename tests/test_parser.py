import math

import pytest

from logic.parser import (
    assemble_step_points,
    decode_board,
    decode_cell,
    decode_coord,
    decode_mask,
    decode_path_list,
)
from logic.symbols import SYMBOL_MAP
from models import PathPoint, PointKind


@pytest.mark.parametrize("encoded", ["", None])
def test_decode_board_empty(encoded):
    assert decode_board(encoded) == ()


def test_decode_board_shape_follows_separators():
    encoded = "0,0,1;0,1,2;0,2,3|1,0,a;1,1,b;1,2,c|2,0,d;2,1,w;2,2,M"
    board = decode_board(encoded)
    assert len(board) == 3
    assert [len(row) for row in board] == [3, 3, 3]
    assert board[0] == ("1", "2", "3")
    assert board[2] == ("d", "w", "M")


def test_decode_board_keeps_jagged_rows():
    board = decode_board("0,0,1|1,0,2;1,1,3;1,2,4")
    assert [len(row) for row in board] == [1, 3]


@pytest.mark.parametrize(
    "raw, expected",
    [("e", "E"), ("f", "F"), ("B", "F"), ("-", "·"), ("X", "X"), ("w", "w"), ("7", "7")],
)
def test_decode_cell_uses_symbol_table(raw, expected):
    assert decode_cell(f"0,0,{raw}") == expected


def test_decode_cell_unknown_symbol_passes_through():
    assert decode_cell("0,0,Z") == "Z"


@pytest.mark.parametrize("cell", ["", "0", "0,1"])
def test_decode_cell_short_cell_is_blank(cell):
    assert decode_cell(cell) == " "


def test_decode_board_accepts_custom_symbol_table():
    board = decode_board("0,0,e;0,1,q", symbols={"q": "Q"})
    assert board == (("e", "Q"),)


def test_symbol_table_is_read_only():
    with pytest.raises(TypeError):
        SYMBOL_MAP["e"] = "x"


@pytest.mark.parametrize("mask", ["", None, "0", "0000", "0000000000000000"])
def test_decode_mask_empty(mask):
    assert decode_mask(mask) == frozenset()


@pytest.mark.parametrize("bit", [0, 1, 7, 8, 9, 27, 56, 63])
def test_decode_mask_single_bit(bit):
    mask = format(1 << bit, "016x")
    assert decode_mask(mask) == {(bit // 8, bit % 8)}


def test_decode_mask_full_row():
    assert decode_mask("ff") == {(0, c) for c in range(8)}


def test_decode_mask_leading_zeros_ignored():
    assert decode_mask("000100") == decode_mask("100") == {(1, 0)}


@pytest.mark.parametrize("mask", ["xyz", "-1", "+f", "0x1f", "1_0", " 1", "1 ", "ff\n"])
def test_decode_mask_malformed_is_empty(mask):
    assert decode_mask(mask) == frozenset()


def test_decode_coord():
    assert decode_coord("3,4") == (3, 4)


@pytest.mark.parametrize("text", ["a,2", "3", "", "3,b"])
def test_decode_coord_malformed_gives_nan(text):
    x, y = decode_coord(text)
    assert math.isnan(x) or math.isnan(y)


def test_decode_path_list():
    assert decode_path_list("1,2;3,4;5,6") == [(1, 2), (3, 4), (5, 6)]
    assert decode_path_list("") == []
    assert decode_path_list(None) == []


def test_assemble_step_points_order():
    points = assemble_step_points("0,0", "1,1;2,2", "3,3")
    assert points == [
        PathPoint(0, 0, PointKind.START),
        PathPoint(1, 1, PointKind.PATH),
        PathPoint(2, 2, PointKind.PATH),
        PathPoint(3, 3, PointKind.END),
    ]


def test_assemble_step_points_only_position():
    points = assemble_step_points(None, None, "4,5")
    assert points == [PathPoint(4, 5, PointKind.END)]


def test_assemble_step_points_nothing():
    assert assemble_step_points(None, None, None) == []
