"""Shared fixtures for task tracker tests."""

from __future__ import annotations

import os
from datetime import datetime, timedelta

# theme reads the environment at import time; keep rendered output plain
os.environ["NO_COLOR"] = "1"
os.environ.pop("FORCE_COLOR", None)

import pytest

from cli import CLI
from task_store import TaskStore


@pytest.fixture
def now() -> datetime:
    """A fixed reference time for date-dependent tests."""
    return datetime(2026, 10, 18, 12, 0)


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def populated_store(now: datetime) -> TaskStore:
    """Store with the buy milk / plan trip / pay rent scenario."""
    s = TaskStore()
    s.add("Buy milk", now + timedelta(days=1))
    s.add("Plan trip", None)
    s.add("Pay rent", now)
    return s


@pytest.fixture
def cli(store: TaskStore) -> CLI:
    return CLI(store, alt_screen=False)
