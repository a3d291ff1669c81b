"""Command-line interface loop for the task tracker.

Row numbers typed by the user refer to the list exactly as it was last
drawn. They are resolved against that snapshot, so a command always hits
the task the user saw at that row.
"""
from typing import List, Optional
import logging

from models import Draft, Task
from task_store import TaskStore
from dates import parse_due
import task_view

logger = logging.getLogger(__name__)

DUE_HINT = "today, tomorrow, YYYY-MM-DD [HH:MM]"


# --- terminal control helpers ---
# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home); 3J first
# is more reliable in some terminals.
def _clear_screen() -> None:
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _enter_alt_screen() -> None:
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    print("\033[?1049l", end="", flush=True)


class CLI:
    def __init__(self, store: TaskStore, alt_screen: bool = True):
        self.store: TaskStore = store
        self.alt_screen: bool = alt_screen
        self.draft: Draft = Draft()
        self._snapshot: List[Task] = []
        self._message: Optional[str] = None

    def run(self) -> None:
        """Main REPL loop; the list is cleared and redrawn each cycle.

        Uses the terminal's alternate screen (if enabled) so prior renders
        do not remain in scrollback history.
        """
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                self._redraw()
                line = input("\n: ").strip()
                if not line:
                    continue
                lower = line.lower()
                if lower == 'help':
                    _clear_screen()
                    self._help()
                    input("\nPress Enter to return to the list...")
                    continue
                if lower in ('exit', 'quit'):
                    exit_message = "Goodbye."
                    break
                self.handle_command(line)
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                print(exit_message)

    def _redraw(self) -> None:
        _clear_screen()
        task_view.display(self.refresh())
        if self._message:
            print(f"\n{self._message}")
            self._message = None

    def refresh(self) -> List[Task]:
        """Take the sorted snapshot that row numbers are resolved against."""
        self._snapshot = self.store.sorted_tasks()
        return self._snapshot

    @property
    def message(self) -> Optional[str]:
        """Feedback from the last command, shown under the next redraw."""
        return self._message

    def _say(self, message: str) -> None:
        self._message = message

    # -------------------- command dispatch --------------------
    def handle_command(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        cmd = tokens[0].lower()
        if cmd == 'add':
            self._cmd_add(line)
        elif cmd in ('done', 'toggle'):
            self._cmd_toggle(tokens)
        elif cmd == 'rm':
            self._cmd_rm(tokens)
        elif cmd == 'clear':
            removed = self.store.clear_completed()
            self._say(f"Cleared {len(removed)} completed task(s).")
        else:
            logger.debug("Unknown command %r", line)
            self._say("Unknown command. Type 'help' for instructions.")

    # ---- individual command helpers ----
    def _cmd_add(self, line: str) -> None:
        parts = line.split(None, 1)
        rest = parts[1] if len(parts) > 1 else ''
        if not rest.strip():
            self._add()
            return
        title, due_text = rest, ''
        # only " @ <due>" marks a due date; "bob@example.com" stays in the title
        at = rest.rfind('@')
        if at >= 0 and (at + 1 == len(rest) or rest[at + 1].isspace()):
            title, due_text = rest[:at], rest[at + 1:]
        due = None
        if due_text.strip():
            due = parse_due(due_text)
            if due is None:
                self._say(f"Invalid due date. Use {DUE_HINT}.")
                return
        self.draft.title = title.strip()
        self.draft.due_date = due
        self._submit_draft()

    def _submit_draft(self) -> None:
        task = self.store.add(self.draft.title, self.draft.due_date)
        if task is None:
            self._say("Title required.")
            return
        self.draft.reset()

    def _row_to_position(self, raw: str) -> Optional[int]:
        raw = raw.rstrip('.')
        if not (raw.isascii() and raw.isdigit()):
            return None
        pos = int(raw) - 1
        if pos < 0 or pos >= len(self._snapshot):
            return None
        return pos

    def _cmd_toggle(self, tokens: List[str]) -> None:
        if len(tokens) != 2:
            self._say("Usage: done <row>")
            return
        pos = self._row_to_position(tokens[1])
        if pos is None:
            self._say(f"No task at row {tokens[1]}.")
            return
        self.store.toggle_completion(self._snapshot[pos].id)

    def _cmd_rm(self, tokens: List[str]) -> None:
        if len(tokens) < 2:
            self._say("Usage: rm <row> [<row> ...]")
            return
        positions: List[int] = []
        for raw in tokens[1:]:
            pos = self._row_to_position(raw)
            if pos is None:
                self._say(f"No task at row {raw}.")
                return
            positions.append(pos)
        removed = self.store.delete_at(positions, self._snapshot)
        self._say(f"Removed {len(removed)} task(s).")

    # -------------------- user-interactive flows --------------------
    def _help(self) -> None:
        print("Commands:")
        print("  add                       Add a new task (prompts for title and due date)")
        print("  add <title> [@ <due>]     Shorthand add (e.g., add pay rent @ today)")
        print("  done <row>                Toggle completion of the task at that row")
        print("  rm <row> [<row> ...]      Remove the task(s) at those rows")
        print("  clear                     Remove all completed tasks")
        print("  help                      Show this help (press Enter to return)")
        print("  exit                      Exit (tasks are not saved)")
        print(f"\nDue dates: {DUE_HINT}")

    def _add(self) -> None:
        hint = f" [{self.draft.title}]" if self.draft.title else ''
        title = input(f"Enter task title{hint}: ").strip()
        if title:
            self.draft.title = title
        if not self.draft.title:
            self._say("Title required.")
            return
        due_text = input(f"Due date ({DUE_HINT}, blank for none): ").strip()
        if due_text:
            due = parse_due(due_text)
            if due is None:
                self._say(f"Invalid due date. Use {DUE_HINT}.")
                return
            self.draft.due_date = due
        else:
            self.draft.due_date = None
        self._submit_draft()
