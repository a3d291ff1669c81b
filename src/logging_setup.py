"""Logging configuration for the task tracker.

The screen is cleared and redrawn after every command, so console logging
is limited to warnings and above. Full logs go to a file when one is given.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.WARNING, log_file: str | Path | None = None) -> None:
    """Configure the root logger. Call once, before the REPL starts."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)
    else:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(max(level, logging.WARNING))
        ch.setFormatter(fmt)
        root.addHandler(ch)

    logging.captureWarnings(True)
