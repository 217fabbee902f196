#!/usr/bin/env python3
from __future__ import annotations

import math
import statistics as stats
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from tictactoe.board import Board
from tictactoe.engine import SearchStats, select_move
from tictactoe.tracking import log_metrics, log_params, maybe_mlflow_run

# Positions timed on every repeat: empty board, after two moves, mid-game.
POSITIONS = ["000000000", "100020000", "120010020"]


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 5
    tracking: str = "none"  # or "mlflow"
    log_dir: Path = Path("runs")


def main() -> int:
    cfg = Config()
    with maybe_mlflow_run(cfg.tracking == "mlflow", run_name="benchmarks", log_dir=cfg.log_dir) as tracked:
        if tracked:
            log_params({"repeats": cfg.repeats})
        metrics = {}
        for raw in POSITIONS:
            board = Board.deserialize(raw)
            times: List[float] = []
            nodes = 0
            for _ in range(cfg.repeats):
                search = SearchStats()
                t0 = time.perf_counter()
                select_move(board, board.filled(), search)
                times.append(time.perf_counter() - t0)
                nodes = search.nodes
            m, h = ci95(times)
            metrics[f"select_{raw}_mean_s"] = m
            metrics[f"select_{raw}_ci95_half_s"] = h
            print(f"{raw}: mean={m:.4f}s ± {h:.4f}s (95% CI) nodes={nodes}")
        if tracked:
            log_metrics(metrics)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
