"""
Baseline players and seeded matches.
Teaching notes:
- A player is any callable taking the GameState and returning (row, column).
- The random player is the reference opponent: the engine should rarely, if
  ever, lose against it.
"""
from __future__ import annotations

import logging
import random
import statistics
import time
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from .board import GameResult, Mark
from .session import best_move_for
from .state import GameState

Player = Callable[[GameState], Tuple[int, int]]


def random_player(rng: random.Random) -> Player:
    def _play(state: GameState) -> Tuple[int, int]:
        return rng.choice(state.board.empty_cells())
    return _play


def engine_player(timings: List[float] | None = None) -> Player:
    """Engine player for whichever mark is to move; appends seconds per move to timings."""
    def _play(state: GameState) -> Tuple[int, int]:
        t0 = time.perf_counter()
        move = best_move_for(state.board, state.turns_passed, state.current_player)
        if timings is not None:
            timings.append(time.perf_counter() - t0)
        if move is None:
            raise RuntimeError("engine asked to move on a full board")
        return move
    return _play


def play_game(x_player: Player, o_player: Player) -> GameResult:
    state = GameState()
    players = {Mark.X: x_player, Mark.O: o_player}
    while not state.game_over:
        mark = state.current_player
        row, column = players[mark](state)
        outcome = state.attempt_move(row, column, mark)
        if not outcome.accepted:
            raise RuntimeError(f"{mark.symbol} player chose illegal move ({row}, {column})")
    return state.result


@dataclass
class MatchSummary:
    games: int
    engine_mark: Mark
    wins: int = 0
    draws: int = 0
    losses: int = 0
    move_times: List[float] = field(default_factory=list)

    @property
    def mean_move_seconds(self) -> float:
        return statistics.fmean(self.move_times) if self.move_times else 0.0

    def as_metrics(self) -> dict:
        return {
            "wins": float(self.wins),
            "draws": float(self.draws),
            "losses": float(self.losses),
            "win_rate": self.wins / self.games if self.games else 0.0,
            "mean_move_s": self.mean_move_seconds,
        }


def run_matches(games: int, seed: int = 0, engine_mark: Mark = Mark.X) -> MatchSummary:
    """Engine against a seeded random player. Same seed, same games."""
    if games < 0:
        raise ValueError(f"games must be >= 0, got {games}")
    if engine_mark not in (Mark.X, Mark.O):
        raise ValueError(f"engine must play X or O, got {engine_mark!r}")
    rng = random.Random(seed)
    summary = MatchSummary(games=games, engine_mark=engine_mark)
    engine = engine_player(summary.move_times)
    opponent = random_player(rng)
    for i in range(games):
        if engine_mark is Mark.X:
            result = play_game(engine, opponent)
        else:
            result = play_game(opponent, engine)
        if result.is_draw:
            summary.draws += 1
        elif result.winner is engine_mark:
            summary.wins += 1
        else:
            summary.losses += 1
        logging.debug("game %d: winner=%s", i, result.winner.symbol)
    logging.info("match games=%d engine=%s wins=%d draws=%d losses=%d",
                 games, engine_mark.symbol, summary.wins, summary.draws, summary.losses)
    return summary
