"""
Human-versus-computer game loop glue.

The session owns which mark the human plays. Human moves and computer replies
both go through GameState.attempt_move, so the state machine stays the only
writer of the board.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Mark
from .engine import SearchStats, select_move
from .state import REJECTED, GameState, MoveOutcome


@dataclass(frozen=True)
class ComputerMove:
    row: int
    column: int
    outcome: MoveOutcome


def best_move_for(board: Board, turns_passed: int, mark: Mark,
                  stats: Optional[SearchStats] = None) -> Optional[Tuple[int, int]]:
    """Engine move for either mark.

    The engine always maximizes for X, so an O search runs on a copy of the
    board with X and O exchanged.
    """
    if mark is Mark.O:
        board = board.swapped()
    return select_move(board, turns_passed, stats)


class Session:
    def __init__(self, human_mark: Mark = Mark.X) -> None:
        human_mark = Mark(human_mark)
        if human_mark not in (Mark.X, Mark.O):
            raise ValueError(f"Human must play X or O, got {human_mark!r}")
        self.human_mark = human_mark
        self.computer_mark = human_mark.opponent
        self._state = GameState()

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self) -> None:
        self._state.reset()

    def is_computer_turn(self) -> bool:
        return not self._state.game_over and self._state.current_player is self.computer_mark

    def human_move(self, row: int, column: int) -> MoveOutcome:
        if self._state.current_player is not self.human_mark:
            return REJECTED
        return self._state.attempt_move(row, column, self.human_mark)

    def computer_move(self) -> Optional[ComputerMove]:
        if not self.is_computer_turn():
            return None
        stats = SearchStats()
        move = best_move_for(self._state.board, self._state.turns_passed, self.computer_mark, stats)
        if move is None:
            return None
        row, column = move
        outcome = self._state.attempt_move(row, column, self.computer_mark)
        logging.info("Computer (%s) plays (%d, %d) after %d nodes",
                     self.computer_mark.symbol, row, column, stats.nodes)
        return ComputerMove(row, column, outcome)
