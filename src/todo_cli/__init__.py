"""todo-cli - a personal task tracker for the terminal.

Tasks are short text entries with an id and a done flag, stored as a
JSON array in the user's data directory:

- `todo_cli.tasks`: task model, JSON store and command processor
- `todo_cli.cli`: typer command-line application
- `todo_cli.config`: settings (TODO_* environment variables)
"""

from todo_cli.config import TodoSettings, get_settings, reload_settings, set_settings
from todo_cli.errors import InvalidInputError, StorageError, TaskNotFoundError, TodoError
from todo_cli.tasks import (
    Command,
    CommandKind,
    CommandProcessor,
    CommandResult,
    Task,
    TaskStore,
)

__all__ = [
    # Tasks
    "Task",
    "TaskStore",
    "Command",
    "CommandKind",
    "CommandProcessor",
    "CommandResult",
    # Errors
    "TodoError",
    "StorageError",
    "TaskNotFoundError",
    "InvalidInputError",
    # Settings
    "TodoSettings",
    "get_settings",
    "set_settings",
    "reload_settings",
]

__version__ = "0.1.0"
