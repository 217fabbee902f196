"""tictactoe package.

Game state machine, minimax engine, a human-vs-computer session and a
simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, GameResult, Mark, WinInfo, WinType
from .engine import select_move
from .session import Session
from .state import GameState, MoveOutcome

__all__ = [
    "Board",
    "GameResult",
    "GameState",
    "Mark",
    "MoveOutcome",
    "Session",
    "WinInfo",
    "WinType",
    "select_move",
]
