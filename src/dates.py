"""Due date parsing and formatting for the CLI.

Accepted input: "today", "tomorrow", or an ISO date / date-time such as
"2026-10-19" or "2026-10-19 14:30". Date-only input means the start of
that day.
"""
from datetime import datetime, timedelta
from typing import Optional

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"

_RELATIVE_DAYS = {"today": 0, "tomorrow": 1}


def parse_due(text: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Return the parsed datetime, or None when the text is not a due date."""
    raw = text.strip().lower()
    if not raw:
        return None
    if raw in _RELATIVE_DAYS:
        now = now or datetime.now()
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        return start + timedelta(days=_RELATIVE_DAYS[raw])
    try:
        parsed = datetime.fromisoformat(raw.upper())
    except ValueError:
        return None
    # store local naive times; aware and naive values do not compare
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_due(due: datetime) -> str:
    return due.strftime(DISPLAY_FORMAT)
