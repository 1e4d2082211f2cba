"""Command processing for the task collection.

A `Command` is one of a fixed set of kinds. `CommandProcessor.execute`
loads the collection, applies the command, saves if it mutated anything
and returns a `CommandResult` instead of raising, so callers only have
to check ``result.ok``.

Example:
    >>> processor = CommandProcessor(TaskStore(settings.tasks_file))
    >>> result = processor.execute(Command.add(["Buy", "milk"]))
    >>> result.lines
    ['[+] Added #1: Buy milk']
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from todo_cli.errors import InvalidInputError, TaskNotFoundError, TodoError
from todo_cli.logging import get_logger
from todo_cli.tasks.models import Task, find_task, is_utf8_encodable, next_id
from todo_cli.tasks.store import TaskStore

logger = get_logger(__name__)

NO_TASKS_MESSAGE = "No tasks found."


class CommandKind(Enum):
    """The commands the processor understands."""

    ADD = "add"
    LIST = "list"
    DONE = "done"
    REMOVE = "remove"
    CLEAR = "clear"

    @property
    def mutates(self) -> bool:
        """Whether the command changes the collection (and must save)."""
        return self is not CommandKind.LIST


@dataclass(frozen=True)
class Command:
    """A single user command.

    Use the constructors rather than building instances directly.
    """

    kind: CommandKind
    description: str = ""
    task_id: int | None = None

    @classmethod
    def add(cls, words: Iterable[str]) -> "Command":
        """Add a task; words are joined with single spaces."""
        return cls(CommandKind.ADD, description=" ".join(words).strip())

    @classmethod
    def list(cls) -> "Command":
        return cls(CommandKind.LIST)

    @classmethod
    def done(cls, task_id: int) -> "Command":
        return cls(CommandKind.DONE, task_id=task_id)

    @classmethod
    def remove(cls, task_id: int) -> "Command":
        return cls(CommandKind.REMOVE, task_id=task_id)

    @classmethod
    def clear(cls) -> "Command":
        return cls(CommandKind.CLEAR)


@dataclass
class CommandResult:
    """Outcome of one command: output lines on success, an error otherwise."""

    ok: bool
    lines: list[str] = field(default_factory=list)
    error: TodoError | None = None

    @classmethod
    def success(cls, *lines: str) -> "CommandResult":
        return cls(ok=True, lines=list(lines))

    @classmethod
    def failure(cls, error: TodoError) -> "CommandResult":
        return cls(ok=False, error=error)

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def parse_task_id(raw: str) -> int:
    """Convert a command-line id to a positive integer.

    Ids are assigned from 1, so ``0`` is rejected here as invalid input
    rather than looked up and reported as not found.

    Raises:
        InvalidInputError: If the value is not a positive integer.
    """
    text = raw.strip()
    if not (text.isascii() and text.isdigit()) or int(text) < 1:
        raise InvalidInputError(f"Invalid task id: {raw!r} (expected a positive integer)")
    return int(text)


class CommandProcessor:
    """Applies one command to the stored task collection."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    @property
    def store(self) -> TaskStore:
        return self._store

    def execute(self, command: Command) -> CommandResult:
        """Run a command end to end: load, apply, save.

        Nothing is saved unless the command succeeds, so a failed command
        leaves the task file as it was.
        """
        log = logger.bind(command=command.kind.value)
        try:
            tasks = self._store.load()
            lines = self._apply(command, tasks)
            if command.kind.mutates:
                self._store.save(tasks)
        except TodoError as e:
            log.debug("command.failed", error=str(e), error_type=type(e).__name__)
            return CommandResult.failure(e)
        log.debug("command.succeeded", count=len(tasks))
        return CommandResult.success(*lines)

    def _apply(self, command: Command, tasks: list[Task]) -> list[str]:
        """Mutate ``tasks`` in place and return the confirmation lines."""
        if command.kind is CommandKind.ADD:
            return self._add(tasks, command.description)
        if command.kind is CommandKind.LIST:
            return self._list(tasks)
        if command.kind is CommandKind.DONE:
            return self._done(tasks, self._require_id(command))
        if command.kind is CommandKind.REMOVE:
            return self._remove(tasks, self._require_id(command))
        if command.kind is CommandKind.CLEAR:
            return self._clear(tasks)
        raise ValueError(f"Unknown command kind: {command.kind!r}")

    @staticmethod
    def _require_id(command: Command) -> int:
        if command.task_id is None:
            raise InvalidInputError(f"'{command.kind.value}' needs a task id")
        return command.task_id

    def _add(self, tasks: list[Task], description: str) -> list[str]:
        description = description.strip()
        if not description:
            raise InvalidInputError("Task description cannot be empty.")
        if not is_utf8_encodable(description):
            raise InvalidInputError("Task description contains characters that are not valid UTF-8.")
        task = Task(id=next_id(tasks), description=description)
        tasks.append(task)
        return [f"[+] Added #{task.id}: {task.description}"]

    def _list(self, tasks: list[Task]) -> list[str]:
        if not tasks:
            return [NO_TASKS_MESSAGE]
        return [task.render() for task in tasks]

    def _done(self, tasks: list[Task], task_id: int) -> list[str]:
        task = find_task(tasks, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        task.done = True
        return [f"[✓] Marked #{task_id} done."]

    def _remove(self, tasks: list[Task], task_id: int) -> list[str]:
        task = find_task(tasks, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        tasks.remove(task)
        return [f"[-] Removed #{task_id}."]

    def _clear(self, tasks: list[Task]) -> list[str]:
        tasks.clear()
        return ["[!] All tasks cleared."]
