from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .baselines import run_matches
from .board import Board, Mark, find_winner, is_valid_state, side_to_move
from .config import load_settings
from .session import Session, best_move_for
from .tactics import blocking_moves, fork_moves, immediate_winning_moves
from .tracking import log_metrics, log_params, maybe_mlflow_run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe against a minimax engine")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_play = sub.add_parser("play", help="Play an interactive game on the terminal")
    p_play.add_argument(
        "--human",
        type=Mark.parse,
        default=None,
        help="Mark the human plays, X or O (default: $TTT_HUMAN_MARK or X)",
    )

    p_move = sub.add_parser("move", help="Print the engine's move for the side to move")
    p_move.add_argument("--board", required=True, help="Board string, e.g., 100020000 (0=empty,1=X,2=O)")

    p_tac = sub.add_parser("tactics", help="List immediate wins, blocks and forks for side-to-move")
    p_tac.add_argument("--board", required=True, help="Board string, e.g., 100020000")

    p_match = sub.add_parser("match", help="Play the engine against a seeded random opponent")
    p_match.add_argument("--games", type=int, default=10, help="Number of games (default: 10)")
    p_match.add_argument("--seed", type=int, default=0, help="Seed for the random opponent")
    p_match.add_argument(
        "--engine-mark", type=Mark.parse, default=Mark.X, help="Mark the engine plays, X or O (default: X)"
    )
    p_match.add_argument(
        "--tracking",
        choices=["none", "mlflow"],
        default=None,
        help="Experiment tracking backend (default: $TTT_TRACKING or none)",
    )
    p_match.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for tracking logs (default: $TTT_LOG_DIR or ./runs)",
    )
    return p


def _parse_board(raw: str) -> Optional[Board]:
    try:
        board = Board.deserialize(raw)
    except ValueError as exc:
        logging.error("%s", exc)
        return None
    if not is_valid_state(board):
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def _fmt(moves) -> str:
    return ' '.join(f"{r},{c}" for r, c in moves) or '-'


def _read_move(stdin: TextIO) -> Optional[tuple]:
    """Next 'row column' pair from stdin; None at end of input."""
    for line in stdin:
        parts = line.replace(',', ' ').split()
        if not parts:
            continue
        if parts[0].lower() in ('q', 'quit'):
            return None
        try:
            row, column = (int(x) for x in parts[:2])
            return row, column
        except ValueError:
            print("Enter a move as: row column (0-2 each), or q to quit")
    return None


def play(human: Mark, stdin: TextIO = sys.stdin) -> int:
    session = Session(human)
    state = session.state
    print(f"You are {human.symbol}. Enter moves as: row column")
    while not state.game_over:
        if session.is_computer_turn():
            reply = session.computer_move()
            print(f"Computer plays {reply.row} {reply.column}")
            continue
        print(state.board.render())
        move = _read_move(stdin)
        if move is None:
            logging.info("Game abandoned")
            return 0
        if not session.human_move(*move).accepted:
            print("Illegal move, try again")
    print(state.board.render())
    result = state.result
    if result.is_draw:
        print("Tie!")
    else:
        print(f"Winner: {result.winner.symbol} ({result.win.kind.value} {result.win.cells()})")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe"))
        except Exception:
            print("unknown")
        return 0

    try:
        settings = load_settings()
    except ValueError as exc:
        logging.error("%s", exc)
        return 2

    if ns.cmd == "play":
        return play(ns.human or settings.human_mark)

    if ns.cmd == "move":
        board = _parse_board(ns.board)
        if board is None:
            return 2
        mark = side_to_move(board)
        winner, _ = find_winner(board)
        move = None if winner is not Mark.EMPTY else best_move_for(board, board.filled(), mark)
        if move is None:
            logging.info("to_move=%s move=none", mark.symbol)
        else:
            logging.info("to_move=%s move=%d,%d", mark.symbol, *move)
        return 0

    if ns.cmd == "tactics":
        board = _parse_board(ns.board)
        if board is None:
            return 2
        mark = side_to_move(board)
        logging.info(
            "to_move=%s wins=%s blocks=%s forks=%s",
            mark.symbol,
            _fmt(immediate_winning_moves(board, mark)),
            _fmt(blocking_moves(board, mark)),
            _fmt(fork_moves(board, mark)),
        )
        return 0

    if ns.cmd == "match":
        if ns.games < 0:
            logging.error("--games must be non-negative: %s", ns.games)
            return 2
        tracking = ns.tracking or settings.tracking
        log_dir = ns.log_dir or settings.log_dir
        with maybe_mlflow_run(tracking == "mlflow", run_name="match", log_dir=log_dir) as tracked:
            if tracked:
                log_params({"games": ns.games, "seed": ns.seed, "engine_mark": ns.engine_mark.symbol})
            summary = run_matches(ns.games, seed=ns.seed, engine_mark=ns.engine_mark)
            if tracked:
                log_metrics(summary.as_metrics())
        logging.info(
            "wins=%d draws=%d losses=%d mean_move_s=%.4f",
            summary.wins, summary.draws, summary.losses, summary.mean_move_seconds,
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
