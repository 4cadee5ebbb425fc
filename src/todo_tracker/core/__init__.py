# src/todo_tracker/core/__init__.py
