# src/todo_tracker/__init__.py

"""Personal task tracker for the terminal."""

__version__ = "0.1.0"
