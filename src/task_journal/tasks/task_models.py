# src/task_journal/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from .errors import JournalDecodeError

# Width of the text column in listings. Longer text is not cut.
TEXT_WIDTH = 50
DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(slots=True)
class Task:
    """
    One journal entry.

    Notes:
    - created_at is always timezone-aware UTC with whole seconds, which is what
      the JSON file can hold (integer Unix seconds).
    - There is no id field: a task is addressed by its position in the journal.
    """

    text: str
    created_at: datetime

    @classmethod
    def new(cls, text: str) -> Task:
        return cls(text=text, created_at=datetime.now(UTC).replace(microsecond=0))

    def display(self) -> str:
        local = self.created_at.astimezone()
        return f"{self.text:<{TEXT_WIDTH}} [{local.strftime(DISPLAY_TIME_FORMAT)}]"

    def __str__(self) -> str:
        return self.display()

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "created_at": int(self.created_at.timestamp())}

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        if not isinstance(data, dict):
            raise JournalDecodeError(f"expected a task object, got {type(data).__name__}")

        text = data.get("text")
        if not isinstance(text, str):
            raise JournalDecodeError("task field 'text' must be a string")

        ts = data.get("created_at")
        # bool is an int subclass; true/false are not timestamps.
        if isinstance(ts, bool) or not isinstance(ts, int):
            raise JournalDecodeError("task field 'created_at' must be an integer timestamp")

        try:
            created_at = datetime.fromtimestamp(ts, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise JournalDecodeError(f"task timestamp out of range: {ts}") from exc

        return cls(text=text, created_at=created_at)
