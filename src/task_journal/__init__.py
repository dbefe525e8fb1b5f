# src/task_journal/__init__.py

"""Personal task journal backed by a single JSON file."""

__version__ = "0.1.0"
