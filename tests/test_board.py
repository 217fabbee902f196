import pytest

from tictactoe.board import (
    Board,
    GameResult,
    Mark,
    WinInfo,
    WinType,
    detect_win,
    find_winner,
    is_valid_state,
    side_to_move,
)


def test_serialize_roundtrip_and_row_major_layout():
    b = Board.deserialize("120000002")
    assert b[0, 0] is Mark.X
    assert b[0, 1] is Mark.O
    assert b[2, 2] is Mark.O
    assert b.serialize() == "120000002"
    assert b.filled() == 3


@pytest.mark.parametrize("bad", ["abc", "012345678", "0123456789", "12345678x", ""])
def test_deserialize_rejects_malformed(bad: str):
    with pytest.raises(ValueError):
        Board.deserialize(bad)


@pytest.mark.parametrize("pos", [(-1, 0), (0, 3), (3, 3), (1, -2)])
def test_accessors_are_bounds_checked(pos):
    b = Board()
    with pytest.raises(IndexError):
        b[pos]
    with pytest.raises(IndexError):
        b[pos] = Mark.X


def test_placed_restores_cell_on_exit_and_on_error():
    b = Board()
    with b.placed(1, 1, Mark.X):
        assert b[1, 1] is Mark.X
    assert b[1, 1] is Mark.EMPTY

    with pytest.raises(RuntimeError):
        with b.placed(0, 2, Mark.O):
            raise RuntimeError("boom")
    assert b == Board()


def test_placed_refuses_occupied_cell():
    b = Board.deserialize("100000000")
    with pytest.raises(ValueError):
        with b.placed(0, 0, Mark.O):
            pass
    assert b[0, 0] is Mark.X


def test_swapped_exchanges_marks_only():
    b = Board.deserialize("120000210")
    assert b.swapped().serialize() == "210000120"
    assert b.serialize() == "120000210"


def test_empty_cells_row_major():
    b = Board.deserialize("101010000")
    assert b.empty_cells() == [(0, 1), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)]


def test_detect_win_prefers_row_over_column():
    # X completes row 0 and column 0 with the same move at (0, 0)
    b = Board.deserialize("111122122")
    assert detect_win(b, 0, 0, Mark.X) == WinInfo(WinType.ROW, 0)


def test_detect_win_diagonals_only_through_played_cell():
    b = Board.deserialize("120010201")
    assert detect_win(b, 2, 2, Mark.X) == WinInfo(WinType.DIAGONAL)
    # (0, 1) is on neither diagonal
    assert detect_win(b, 0, 1, Mark.X) is None

    anti = Board.deserialize("002020200")
    assert detect_win(anti, 2, 0, Mark.O) == WinInfo(WinType.REVERSE_DIAGONAL)


def test_find_winner_full_scan():
    assert find_winner(Board()) == (Mark.EMPTY, None)
    assert find_winner(Board.deserialize("000222110")) == (Mark.O, WinInfo(WinType.ROW, 1))
    assert find_winner(Board.deserialize("120120100")) == (Mark.X, WinInfo(WinType.COLUMN, 0))
    assert find_winner(Board.deserialize("121122211")) == (Mark.EMPTY, None)


def test_win_info_cells():
    assert WinInfo(WinType.ROW, 2).cells() == [(2, 0), (2, 1), (2, 2)]
    assert WinInfo(WinType.COLUMN, 1).cells() == [(0, 1), (1, 1), (2, 1)]
    assert WinInfo(WinType.DIAGONAL).cells() == [(0, 0), (1, 1), (2, 2)]
    assert WinInfo(WinType.REVERSE_DIAGONAL).cells() == [(0, 2), (1, 1), (2, 0)]


def test_game_result_draw_flag():
    assert GameResult(Mark.EMPTY).is_draw
    assert not GameResult(Mark.X, WinInfo(WinType.ROW, 0)).is_draw


def test_valid_state_and_side_to_move():
    assert is_valid_state(Board())
    assert side_to_move(Board()) is Mark.X
    assert side_to_move(Board.deserialize("100000000")) is Mark.O
    # too many O pieces
    assert not is_valid_state(Board.deserialize("220000000"))
    # both sides own a line
    assert not is_valid_state(Board.deserialize("111222000"))
    # X won but O kept playing
    assert not is_valid_state(Board.deserialize("111220200"))


def test_mark_parse_and_opponent():
    assert Mark.parse("x") is Mark.X
    assert Mark.parse(" O ") is Mark.O
    assert Mark.parse("2") is Mark.O
    assert Mark.X.opponent is Mark.O
    assert Mark.O.opponent is Mark.X
    with pytest.raises(ValueError):
        Mark.parse("Z")
