# src/todo_tracker/cli/__init__.py
