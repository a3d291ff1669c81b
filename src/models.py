"""Data models for the terminal task tracker.

Exposes the Task dataclass held by the store and the Draft view state
owned by the CLI. Tasks are memory-only; nothing here is serialized.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

@dataclass
class Task:
    """A single to-do item.

    Fields:
        id: Integer id from the store's counter (never reused after deletion).
        title: Non-empty, single-line title.
        due_date: Optional deadline; None means "no deadline".
        is_completed: Flipped by toggle, the only mutation after creation.
        created_at: ISO timestamp when the task was created.
    """
    id: int
    title: str
    due_date: Optional[datetime] = None
    is_completed: bool = False
    created_at: Optional[str] = None

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, title={self.title}, due_date={self.due_date}, done={self.is_completed})"


@dataclass
class Draft:
    """Pending input for the next add: title text and due date selection.

    Reset after every successful add so the next prompt starts empty.
    """
    title: str = ""
    due_date: Optional[datetime] = None

    def reset(self) -> None:
        self.title = ""
        self.due_date = None
