"""Tests for logging_setup module."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from logging_setup import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_file_handler_gets_debug(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tasks.log"
    setup_logging("debug", log_file)
    logging.getLogger("task_store").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "DEBUG task_store: hello file" in log_file.read_text()


def test_console_handler_is_warning_or_above() -> None:
    setup_logging(logging.DEBUG)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].level == logging.WARNING


def test_unknown_level_name_falls_back_to_warning() -> None:
    setup_logging("chatty")
    assert logging.getLogger().level == logging.WARNING


def test_repeated_setup_does_not_duplicate_handlers() -> None:
    setup_logging()
    setup_logging()
    assert len(logging.getLogger().handlers) == 1
