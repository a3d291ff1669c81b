"""Rendering of the sorted task list.

Each row shows its 1-based display position (the number the CLI commands
take), a completion box, the title wrapped to the terminal width, the due
date, and a star for open tasks due within a day.
"""
from datetime import datetime
from typing import List, Optional, Sequence, Tuple
import shutil

from models import Task
from dates import format_due
from task_store import is_due_soon
from theme import color, HEADER_COLOR, ROW_COLOR, EMPTY_COLOR, DUE_COLOR, DONE_COLOR, C_PENDING, C_DUE_SOON, BOLD

TITLE = "Task Tracker"
MIN_WIDTH = 32  # fits "99. [ ] " plus a due date with its star
CHECKED = "[✓]"
UNCHECKED = "[ ]"
STAR = "★"


def display(tasks: Sequence[Task], now: Optional[datetime] = None) -> None:
    term_width = shutil.get_terminal_size((80, 24)).columns
    for line in render_list(tasks, term_width, now):
        print(line)


def render_list(tasks: Sequence[Task], width: int, now: Optional[datetime] = None) -> List[str]:
    """Lines for the header plus every task, in the order given."""
    width = max(MIN_WIDTH, width)
    now = now or datetime.now()
    lines = [color(TITLE, HEADER_COLOR, BOLD), color('-' * width, HEADER_COLOR)]
    if not tasks:
        lines.append(color('(no tasks)', EMPTY_COLOR))
        return lines
    for row, task in enumerate(tasks, start=1):
        lines.extend(_wrap_task(row, task, width, now))
    return lines


def _task_segments(row: int, task: Task, now: datetime) -> Tuple[str, str, str, str]:
    box = CHECKED if task.is_completed else UNCHECKED
    prefix = f"{row}. {box} "
    prefix_colored = color(f"{row}.", ROW_COLOR) + ' ' + box + ' '
    title_col = DONE_COLOR if task.is_completed else C_PENDING
    suffix = ''
    if task.due_date is not None:
        suffix = f" (due {format_due(task.due_date)})"
        if is_due_soon(task, now):
            suffix += f" {STAR}"
    return prefix, prefix_colored, title_col, suffix


def _color_suffix(suffix: str, task: Task) -> str:
    if suffix.endswith(STAR):
        return color(suffix, C_DUE_SOON)
    return color(suffix, DONE_COLOR if task.is_completed else DUE_COLOR)


def _split_long(word: str, limit: int) -> List[str]:
    """Hard-split a word that cannot fit on one line."""
    return [word[i:i + limit] for i in range(0, len(word), limit)]


def _wrap_task(row: int, task: Task, width: int, now: datetime) -> List[str]:
    prefix, prefix_colored, title_col, suffix = _task_segments(row, task, now)
    limit = max(1, width - len(prefix))
    lines_raw: List[str] = []
    current = ''
    for word in task.title.split():
        for w in _split_long(word, limit):
            candidate = w if not current else current + ' ' + w
            if len(candidate) <= limit or not current:
                current = candidate
            else:
                lines_raw.append(current)
                current = w
    if current:
        lines_raw.append(current)
    if not lines_raw:
        lines_raw.append('<untitled>')
    # due suffix joins the last line when it fits, otherwise gets its own
    suffix_own_line = bool(suffix) and len(lines_raw[-1]) + len(suffix) > limit
    colored_suffix = _color_suffix(suffix.strip() if suffix_own_line else suffix, task) if suffix else ''
    indent = ' ' * len(prefix)
    out: List[str] = []
    for idx, raw_line in enumerate(lines_raw):
        lead = prefix_colored if idx == 0 else indent
        text = lead + color(raw_line, title_col)
        if idx == len(lines_raw) - 1 and suffix and not suffix_own_line:
            text += colored_suffix
        out.append(text)
    if suffix_own_line:
        out.append(indent + colored_suffix)
    return out
