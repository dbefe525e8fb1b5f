# src/task_journal/tasks/__init__.py

from .errors import InvalidTaskPosition, JournalDecodeError, JournalError
from .task_models import Task
from .task_store import (
    EMPTY_NOTICE,
    add_task,
    collect_tasks,
    complete_task,
    format_listing,
    list_tasks,
    load_tasks,
)

__all__ = [
    "EMPTY_NOTICE",
    "InvalidTaskPosition",
    "JournalDecodeError",
    "JournalError",
    "Task",
    "add_task",
    "collect_tasks",
    "complete_task",
    "format_listing",
    "list_tasks",
    "load_tasks",
]
