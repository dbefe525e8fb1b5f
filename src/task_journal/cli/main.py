# src/task_journal/cli/main.py

"""
CLI entrypoint.

Initializes logging, resolves the journal path, then runs one command:
- add <text>      append a task
- done <position> remove a task by its listed number
- list            print the numbered task list

Exit codes: 0 on success, 1 on I/O or decode failure, 2 on bad usage
or an invalid task position.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import InvalidTaskPosition, JournalDecodeError
from ..tasks.task_store import Emit
from .commands import UsageError, registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser(prog: str = "journal") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Personal task journal.")
    parser.add_argument(
        "-j",
        "--journal",
        type=Path,
        default=None,
        help="Journal file to use (default: JOURNAL_PATH or <data_dir>/tasks.json).",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Console log level (default: JOURNAL_LOG_LEVEL or WARNING).",
    )
    parser.add_argument("command", nargs="?", help="add | done | list | help")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments.")
    return parser


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    emit: Emit = print,
) -> int:
    if settings is None:
        settings = get_settings()

    ns = build_parser(settings.app_name).parse_args(argv)

    level_name = (ns.log_level or settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    try:
        setup_logging(
            log_dir=settings.data_dir,
            console_level=console_level,
            log_to_file=settings.log_file_enabled,
        )

        journal_path: Path = ns.journal
        if journal_path is None:
            journal_path = settings.journal_path
            journal_path.parent.mkdir(parents=True, exist_ok=True)

        return registry.handle(journal_path, ns.command, list(ns.args), emit)

    except (UsageError, InvalidTaskPosition) as exc:
        _error(str(exc))
        return EXIT_USAGE
    except JournalDecodeError as exc:
        logger.debug("Journal decode failed", exc_info=True)
        _error(f"Journal file is corrupt: {exc}")
        return EXIT_FAILURE
    except OSError as exc:
        logger.debug("Journal I/O failed", exc_info=True)
        _error(str(exc))
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
