"""
Tactics and simple motifs: immediate wins, blocks, forks.
Teaching notes:
- These are one-ply lookups, cheap enough to show as hints next to the full search.
"""
from typing import List, Tuple

from .board import Board, Mark, detect_win

Move = Tuple[int, int]


def immediate_winning_moves(board: Board, mark: Mark) -> List[Move]:
    wins: List[Move] = []
    for row, column in board.empty_cells():
        with board.placed(row, column, mark):
            if detect_win(board, row, column, mark) is not None:
                wins.append((row, column))
    return wins


def blocking_moves(board: Board, mark: Mark) -> List[Move]:
    """Cells where mark must play to stop the opponent's immediate win."""
    return immediate_winning_moves(board, mark.opponent)


def fork_moves(board: Board, mark: Mark) -> List[Move]:
    forks: List[Move] = []
    for row, column in board.empty_cells():
        with board.placed(row, column, mark):
            if len(immediate_winning_moves(board, mark)) >= 2:
                forks.append((row, column))
    return forks
