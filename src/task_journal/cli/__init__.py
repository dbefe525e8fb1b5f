# src/task_journal/cli/__init__.py
