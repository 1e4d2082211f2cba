"""Task storage and command processing.

Example:
    >>> store = TaskStore(settings.tasks_file)
    >>> processor = CommandProcessor(store)
    >>> processor.execute(Command.done(3))
"""

from todo_cli.tasks.models import Task, find_task, next_id
from todo_cli.tasks.processor import (
    Command,
    CommandKind,
    CommandProcessor,
    CommandResult,
    parse_task_id,
)
from todo_cli.tasks.store import TaskStore

__all__ = [
    "Task",
    "TaskStore",
    "Command",
    "CommandKind",
    "CommandProcessor",
    "CommandResult",
    "find_task",
    "next_id",
    "parse_task_id",
]
