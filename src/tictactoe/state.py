"""
Game state machine: turn sequencing, move legality, win/draw detection.

The machine is either in progress or finished. Moves are only applied while
in progress; a finished game holds its GameResult until reset() starts over
with a fresh board. Illegal moves are an expected outcome of a stray click, so
they are reported through MoveOutcome rather than raised.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import CELLS, Board, GameResult, Mark, detect_win, in_bounds


@dataclass(frozen=True)
class MoveOutcome:
    accepted: bool
    game_ended: bool = False
    result: Optional[GameResult] = None


REJECTED = MoveOutcome(accepted=False)


class GameState:
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        # Rebind everything at once so no half-reset state is observable.
        self._board, self._current, self._turns, self._game_over, self._result = (
            Board(), Mark.X, 0, False, None
        )

    @property
    def board(self) -> Board:
        """A copy of the grid; mutating it does not affect the game."""
        return self._board.copy()

    @property
    def grid(self) -> Tuple[Tuple[Mark, ...], ...]:
        return self._board.rows()

    @property
    def current_player(self) -> Mark:
        return self._current

    @property
    def turns_passed(self) -> int:
        return self._turns

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def result(self) -> Optional[GameResult]:
        return self._result

    def can_move(self, row: int, column: int, mark: Optional[Mark] = None) -> bool:
        if self._game_over:
            return False
        if not in_bounds(row, column):
            return False
        if self._board[row, column] is not Mark.EMPTY:
            return False
        if mark is not None and mark != self._current:
            return False
        return True

    def attempt_move(self, row: int, column: int, mark: Optional[Mark] = None) -> MoveOutcome:
        if not self.can_move(row, column, mark):
            logging.debug("Rejected move %s at (%s, %s)", mark, row, column)
            return REJECTED

        mover = self._current
        self._board[row, column] = mover
        self._turns += 1
        logging.debug("%s played (%d, %d), turn %d", mover.symbol, row, column, self._turns)

        win = detect_win(self._board, row, column, mover)
        if win is not None:
            return self._finish(GameResult(mover, win))
        if self._turns == CELLS:
            return self._finish(GameResult(Mark.EMPTY))

        self._current = mover.opponent
        return MoveOutcome(accepted=True)

    def _finish(self, result: GameResult) -> MoveOutcome:
        self._game_over = True
        self._result = result
        if result.is_draw:
            logging.info("Game over: draw after %d turns", self._turns)
        else:
            logging.info("Game over: %s wins, line=%s index=%s",
                         result.winner.symbol, result.win.kind.value, result.win.index)
        return MoveOutcome(accepted=True, game_ended=True, result=result)
