from tictactoe.board import Board, Mark
from tictactoe.tactics import blocking_moves, fork_moves, immediate_winning_moves


def test_immediate_wins_and_blocks():
    # X O . / X O . / . . .
    b = Board.deserialize("120120000")
    assert immediate_winning_moves(b, Mark.X) == [(2, 0)]
    assert blocking_moves(b, Mark.X) == [(2, 1)]
    assert immediate_winning_moves(b, Mark.O) == [(2, 1)]
    assert b.serialize() == "120120000"


def test_no_tactics_on_empty_board():
    b = Board()
    assert immediate_winning_moves(b, Mark.X) == []
    assert blocking_moves(b, Mark.X) == []
    assert fork_moves(b, Mark.X) == []


def test_fork_detected():
    # X . . / . O . / . . X : both free corners give X two threats
    b = Board.deserialize("100020001")
    forks = fork_moves(b, Mark.X)
    assert (0, 2) in forks
    assert (2, 0) in forks
    assert (1, 2) not in forks
    assert b.serialize() == "100020001"
