"""Task store: holds the task collection, id management, and task mutation.

The underlying list keeps insertion order only; display order is always
recomputed by sort_by_due_date. Position-based deletion resolves positions
against that sorted view, never against storage order.
"""
from datetime import datetime, timedelta
from typing import Iterable, Iterator, List, Optional, Sequence
import logging

from models import Task

logger = logging.getLogger(__name__)

DUE_SOON_WINDOW = timedelta(hours=24)


def sort_by_due_date(tasks: Iterable[Task]) -> List[Task]:
    """Return tasks ordered for display.

    Dated tasks come first in ascending due date; undated tasks follow in
    their original relative order (sorted() is stable, no secondary key).
    """
    return sorted(tasks, key=lambda t: (0, t.due_date) if t.due_date is not None else (1,))


def is_due_soon(task: Task, now: Optional[datetime] = None) -> bool:
    """True for an open task due less than 24 hours from now (overdue included)."""
    if task.due_date is None or task.is_completed:
        return False
    now = now or datetime.now()
    return task.due_date - now < DUE_SOON_WINDOW


class TaskStore:
    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._next_id: int = 1

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # -------------------- queries --------------------
    @property
    def tasks(self) -> List[Task]:
        """Insertion-order copy of the collection."""
        return list(self._tasks)

    def sorted_tasks(self) -> List[Task]:
        return sort_by_due_date(self._tasks)

    def get(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # -------------------- task operations --------------------
    def add(self, title: str, due_date: Optional[datetime] = None) -> Optional[Task]:
        """Create and append a task; an empty title is ignored and returns None."""
        if not title or not title.strip():
            logger.debug("Ignoring add with empty title")
            return None
        task = Task(
            id=self._allocate_id(),
            title=title.strip(),
            due_date=due_date,
            created_at=datetime.now().isoformat(),
        )
        self._tasks.append(task)
        logger.debug("Added task %d %r (due %s)", task.id, task.title, task.due_date)
        return task

    def toggle_completion(self, task_id: int) -> bool:
        task = self.get(task_id)
        if task is None:
            logger.debug("Toggle ignored: task id %s not found", task_id)
            return False
        task.is_completed = not task.is_completed
        logger.debug("Task %d completed=%s", task.id, task.is_completed)
        return True

    def delete(self, task_id: int) -> bool:
        task = self.get(task_id)
        if task is None:
            logger.debug("Delete ignored: task id %s not found", task_id)
            return False
        self._tasks.remove(task)
        logger.debug("Deleted task %d %r", task.id, task.title)
        return True

    def delete_at(self, positions: Iterable[int], snapshot: Optional[Sequence[Task]] = None) -> List[Task]:
        """Remove tasks at positions of the sorted view (0-based).

        All positions are resolved to ids against a single snapshot before
        anything is removed: the one given (what the user was shown) or a
        fresh sorted_tasks(). Out-of-range positions are skipped.
        """
        if snapshot is None:
            snapshot = self.sorted_tasks()
        doomed: List[Task] = []
        for pos in sorted(set(positions)):
            if 0 <= pos < len(snapshot):
                doomed.append(snapshot[pos])
            else:
                logger.debug("Delete ignored: position %s out of range (%d tasks)", pos, len(snapshot))
        return [task for task in doomed if self.delete(task.id)]

    def clear_completed(self) -> List[Task]:
        done = [t for t in self._tasks if t.is_completed]
        for task in done:
            self.delete(task.id)
        return done

    def __str__(self) -> str:
        done = sum(1 for t in self._tasks if t.is_completed)
        return f'Tasks: {len(self._tasks)} total, {done} completed'
