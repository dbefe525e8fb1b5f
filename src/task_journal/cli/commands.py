# src/task_journal/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..tasks.task_models import Task
from ..tasks.task_store import Emit, add_task, complete_task, list_tasks

CommandHandler = Callable[[Path, list[str], Emit], int]

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Bad command-line arguments for a known command."""


class CommandRegistry:
    """Subcommand registry used by the CLI entrypoint (add, done, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        journal_path: Path,
        command: str | None,
        args: list[str],
        emit: Emit = print,
    ) -> int:
        """
        Run one command against the journal at `journal_path`.

        Returns the process exit code. Store errors (OSError, JournalError)
        and UsageError propagate to the caller.
        """
        if not command:
            raise UsageError("No command given. Use 'help' to list available commands.")

        name = command.lower()
        handler = self._handlers.get(name)
        if not handler:
            raise UsageError(f"Unknown command: {name}. Use 'help' to list available commands.")

        logger.debug("Running command %s args=%s journal=%s", name, args, journal_path)
        return handler(journal_path, args, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_position(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise UsageError(f"Task position must be a number, got {raw!r}.") from None


def cmd_help(journal_path: Path, args: list[str], emit: Emit) -> int:
    emit(registry.build_help())
    return 0


def cmd_add(journal_path: Path, args: list[str], emit: Emit) -> int:
    """
    add <text...>  -> append a new task; words are joined with single spaces
    """
    if not args:
        raise UsageError("Usage: add <text>")
    add_task(journal_path, Task.new(" ".join(args)))
    return 0


def cmd_done(journal_path: Path, args: list[str], emit: Emit) -> int:
    """
    done <position>  -> remove the task with that number in the current listing
    """
    if len(args) != 1:
        raise UsageError("Usage: done <position>")
    complete_task(journal_path, parse_position(args[0]))
    return 0


def cmd_list(journal_path: Path, args: list[str], emit: Emit) -> int:
    if args:
        raise UsageError("Usage: list")
    list_tasks(journal_path, emit)
    return 0


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h"])
registry.register("add", cmd_add, help_text="Add a task: add <text>.")
registry.register(
    "done", cmd_done, help_text="Complete (remove) a task: done <position>.", aliases=["complete"]
)
registry.register("list", cmd_list, help_text="List tasks with their positions.", aliases=["ls"])
