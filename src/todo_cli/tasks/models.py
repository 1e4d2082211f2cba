"""Task record and id assignment."""

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass
class Task:
    """A single to-do entry."""

    id: int
    description: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "done": self.done,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """Build a Task from a persisted record.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"task record must be an object, got {type(data).__name__}")
        for key in ("id", "description", "done"):
            if key not in data:
                raise ValueError(f"task record is missing '{key}'")

        task_id = data["id"]
        # bool is an int subclass; true/false are not valid ids
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 1:
            raise ValueError(f"task id must be a positive integer, got {task_id!r}")
        if not isinstance(data["description"], str):
            raise ValueError(f"task #{task_id} description must be a string")
        if not is_utf8_encodable(data["description"]):
            raise ValueError(f"task #{task_id} description is not valid UTF-8 text")
        if not isinstance(data["done"], bool):
            raise ValueError(f"task #{task_id} done flag must be true or false")

        return cls(id=task_id, description=data["description"], done=data["done"])

    def render(self) -> str:
        """Format the task as a single list line, e.g. ``[x] 3: Buy milk``."""
        mark = "[x]" if self.done else "[ ]"
        return f"{mark} {self.id}: {self.description}"


def is_utf8_encodable(text: str) -> bool:
    """Whether text can be written as UTF-8 (no lone surrogates)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def next_id(tasks: Iterable[Task]) -> int:
    """Return the id for a new task: highest existing id plus one."""
    return max((task.id for task in tasks), default=0) + 1


def find_task(tasks: Iterable[Task], task_id: int) -> Task | None:
    """Return the task with the given id, or None."""
    for task in tasks:
        if task.id == task_id:
            return task
    return None
