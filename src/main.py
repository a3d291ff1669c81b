"""Main entry point for the terminal task tracker."""
import logging
from typing import Optional

import click

from task_store import TaskStore
from cli import CLI
from logging_setup import setup_logging

__version__ = "0.1.0"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="task-tracker")
@click.option(
    "--alt-screen/--no-alt-screen",
    default=True,
    envvar="TASKS_ALT_SCREEN",
    show_default=True,
    help="Draw in the terminal's alternate screen buffer.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="TASKS_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    envvar="TASKS_LOG_FILE",
    help="Write logs to this file instead of stderr.",
)
def main(alt_screen: bool, log_level: str, log_file: Optional[str]) -> None:
    """Task Tracker - a single-screen, in-memory to-do list.

    \b
    Type 'help' at the prompt for commands. Tasks live only for the
    session; nothing is written to disk.
    """
    setup_logging(log_level, log_file)
    logger.info("Starting task tracker (alt_screen=%s)", alt_screen)
    CLI(TaskStore(), alt_screen=alt_screen).run()


if __name__ == "__main__":
    main()
