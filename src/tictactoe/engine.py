"""
Computer move selection: minimax with alpha-beta pruning and a depth penalty.
Scoring:
- Terminal positions score +10 for an X win, -10 for an O win, 0 otherwise.
- Non-terminal nodes return their best child value minus their depth, so among
  equal outcomes shallower ones are preferred by the maximizer.
- X is always the maximizing mark. Callers that play O search a mark-swapped
  board (see session.py).
- The minimizing side narrows the same alpha bound as the maximizing side
  (alpha = min(alpha, value)); beta is never tightened.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import CELLS, Board, Mark, find_winner

MAXIMIZER = Mark.X
MINIMIZER = Mark.O

SCORES = {
    Mark.X: 10,
    Mark.O: -10,
    Mark.EMPTY: 0,
}


@dataclass
class SearchStats:
    nodes: int = 0


def minimax(
    board: Board,
    turns_passed: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    depth: int,
    stats: Optional[SearchStats] = None,
) -> float:
    if stats is not None:
        stats.nodes += 1
    winner, _ = find_winner(board)
    if turns_passed == CELLS or winner is not Mark.EMPTY:
        return SCORES[winner]

    if maximizing:
        best = -math.inf
        for row, column in board.empty_cells():
            with board.placed(row, column, MAXIMIZER):
                value = minimax(board, turns_passed + 1, False, alpha, beta, depth + 1, stats)
            best = max(best, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                break
        return best - depth

    best = math.inf
    for row, column in board.empty_cells():
        with board.placed(row, column, MINIMIZER):
            value = minimax(board, turns_passed + 1, True, alpha, beta, depth + 1, stats)
        best = min(best, value)
        alpha = min(alpha, value)
        if beta <= alpha:
            break
    return best - depth


def select_move(
    board: Board,
    turns_passed: int,
    stats: Optional[SearchStats] = None,
) -> Optional[Tuple[int, int]]:
    """Best cell for X, or None when the board is already full.

    Cells are scanned row-major and only a strictly greater evaluation replaces
    the current choice, so the first best cell wins ties. The caller's board
    is never modified.
    """
    if turns_passed == CELLS:
        return None
    if stats is None:
        stats = SearchStats()

    scratch = board.copy()
    best_value = -math.inf
    best_move: Optional[Tuple[int, int]] = None
    for row, column in scratch.empty_cells():
        with scratch.placed(row, column, MAXIMIZER):
            value = minimax(scratch, turns_passed + 1, False, -math.inf, math.inf, 0, stats)
        if value > best_value:
            best_value = value
            best_move = (row, column)

    logging.debug("select_move turns=%d best=%s value=%s nodes=%d",
                  turns_passed, best_move, best_value, stats.nodes)
    return best_move
