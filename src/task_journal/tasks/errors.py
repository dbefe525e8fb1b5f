# src/task_journal/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class JournalError(Exception):
    """Base class for journal errors that are not plain OS errors."""


class JournalDecodeError(JournalError, ValueError):
    """The journal file has content, but it is not a list of tasks."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} ({self.path})"
        super().__init__(message)


class InvalidTaskPosition(JournalError, ValueError):
    """A 1-based task position is zero or past the end of the journal."""

    def __init__(self, position: int, total: int) -> None:
        self.position = position
        self.total = total
        super().__init__("Invalid Task ID")
