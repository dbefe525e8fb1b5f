# src/task_journal/tasks/task_store.py

"""
JSON file task store.

Every operation is one read-modify-write cycle against the journal file:
open -> decode the whole list -> mutate -> write the whole list back.
Nothing is cached between calls; a task's number is its 1-based position
in the list as decoded by that call.

Writes go to a sibling "<name>.tmp" file which then replaces the journal
with os.replace, so the journal is either the old list or the new one.
A symlinked journal is resolved first, so the link survives and its
target is the file that gets replaced.
There is no locking: two processes writing at once can lose an update.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import IO

from .errors import InvalidTaskPosition, JournalDecodeError
from .task_models import Task

logger = logging.getLogger(__name__)

EMPTY_NOTICE = "Task list is empty!"

Emit = Callable[[str], None]


def _handle_path(fh: IO[str]) -> str | None:
    name = getattr(fh, "name", None)
    return name if isinstance(name, str) else None


def collect_tasks(fh: IO[str]) -> list[Task]:
    """
    Decode the whole file behind `fh` into a list of tasks.

    The handle is rewound before and after reading, so a caller can write
    from the start right away. Empty (or whitespace-only) content is an
    empty journal, anything else that is not a JSON list of task objects
    raises JournalDecodeError.
    """
    path = _handle_path(fh)

    fh.seek(0)
    try:
        raw = fh.read()
    except UnicodeDecodeError as exc:
        raise JournalDecodeError("journal is not valid UTF-8", path=path) from exc
    fh.seek(0)

    if not raw.strip():
        logger.debug("Journal %s is empty", path)
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise JournalDecodeError(f"invalid JSON: {exc}", path=path) from exc
    except RecursionError as exc:
        raise JournalDecodeError("JSON nested too deeply", path=path) from exc

    if not isinstance(data, list):
        raise JournalDecodeError(
            f"expected a JSON array of tasks, got {type(data).__name__}", path=path
        )

    tasks: list[Task] = []
    for i, item in enumerate(data, start=1):
        try:
            tasks.append(Task.from_dict(item))
        except JournalDecodeError as exc:
            raise JournalDecodeError(f"task {i}: {exc}", path=path) from exc

    logger.debug("Decoded %d task(s) from %s", len(tasks), path)
    return tasks


def _write_tasks(path: Path, tasks: Iterable[Task]) -> None:
    payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        with contextlib.suppress(OSError):
            # Keep the journal's permissions; the temp file got the umask default.
            shutil.copymode(path, tmp)
        os.replace(tmp, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise


def load_tasks(journal_path: str | Path) -> list[Task]:
    """Read-only decode of the journal. A missing file raises FileNotFoundError."""
    with Path(journal_path).open("r", encoding="utf-8") as fh:
        return collect_tasks(fh)


def add_task(journal_path: str | Path, task: Task) -> None:
    """Append `task` to the journal, creating the file if it does not exist."""
    path = Path(journal_path).resolve()

    # "a+" creates the file and fails early if it is not writable.
    with path.open("a+", encoding="utf-8") as fh:
        tasks = collect_tasks(fh)

    tasks.append(task)
    _write_tasks(path, tasks)
    logger.info("Added task %d to %s", len(tasks), path)


def complete_task(journal_path: str | Path, task_position: int) -> Task:
    """
    Remove the task at 1-based `task_position` and return it.

    The journal must already exist. An out-of-range position raises
    InvalidTaskPosition and leaves the file untouched.
    """
    path = Path(journal_path).resolve()

    with path.open("r+", encoding="utf-8") as fh:
        tasks = collect_tasks(fh)

    if task_position < 1 or task_position > len(tasks):
        logger.debug(
            "Rejected position %s for %s (%d task(s))", task_position, path, len(tasks)
        )
        raise InvalidTaskPosition(task_position, len(tasks))

    done = tasks.pop(task_position - 1)
    _write_tasks(path, tasks)
    logger.info("Completed task %d in %s (%d left)", task_position, path, len(tasks))
    return done


def format_listing(tasks: Iterable[Task]) -> list[str]:
    lines = [f"{n}: {task.display()}" for n, task in enumerate(tasks, start=1)]
    return lines or [EMPTY_NOTICE]


def list_tasks(journal_path: str | Path, emit: Emit = print) -> None:
    """Emit one numbered line per task, or the empty notice."""
    for line in format_listing(load_tasks(journal_path)):
        emit(line)
