"""Environment-first settings for the CLI.

Each setting reads a TTT_* variable and falls back to a fixed default;
command-line flags override both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .board import Mark


def human_mark() -> Mark:
    """Mark the human plays in `ttt play` (TTT_HUMAN_MARK, default X)."""
    return Mark.parse(os.getenv("TTT_HUMAN_MARK", "X"))


def log_dir() -> Path:
    p = os.getenv("TTT_LOG_DIR")
    return Path(p) if p else Path.cwd() / "runs"


def tracking_backend() -> str:
    backend = os.getenv("TTT_TRACKING", "none").strip().lower()
    if backend not in ("none", "mlflow"):
        raise ValueError(f"TTT_TRACKING must be 'none' or 'mlflow', got {backend!r}")
    return backend


@dataclass
class Settings:
    human_mark: Mark
    log_dir: Path
    tracking: str


def load_settings() -> Settings:
    return Settings(
        human_mark=human_mark(),
        log_dir=log_dir(),
        tracking=tracking_backend(),
    )
