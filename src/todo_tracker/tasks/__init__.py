# src/todo_tracker/tasks/__init__.py
