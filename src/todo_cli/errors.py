"""Error types for todo-cli.

Every error carries a human-readable message; the CLI prints it as
``Error: <message>`` on stderr and exits with status 1.
"""

from pathlib import Path


class TodoError(Exception):
    """Base class for all todo-cli errors."""

    pass


class StorageError(TodoError):
    """Raised when the task file cannot be read, parsed or written.

    A missing task file is not an error; the store treats it as an
    empty collection.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TaskNotFoundError(TodoError):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task #{task_id} not found.")
        self.task_id = task_id


class InvalidInputError(TodoError):
    """Raised for unusable user input (empty description, bad id)."""

    pass
