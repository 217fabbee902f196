import pytest

from tictactoe.board import Board
from tictactoe.engine import select_move

try:
    import pytest_benchmark  # noqa: F401
    HAS_BENCH = True
except Exception:
    HAS_BENCH = False


@pytest.mark.skipif(not HAS_BENCH, reason="pytest-benchmark not installed")
def test_benchmark_select_move_mid_game(benchmark):
    board = Board.deserialize("120010020")

    move = benchmark(lambda: select_move(board, board.filled()))
    assert move in board.empty_cells()


@pytest.mark.skipif(not HAS_BENCH, reason="pytest-benchmark not installed")
def test_benchmark_select_move_after_two_moves(benchmark):
    board = Board.deserialize("100020000")

    move = benchmark.pedantic(lambda: select_move(board, board.filled()), rounds=3, iterations=1)
    assert move in board.empty_cells()
