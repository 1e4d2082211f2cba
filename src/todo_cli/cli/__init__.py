"""Command-line surface for todo-cli."""

from todo_cli.cli.app import app, main

__all__ = ["app", "main"]
