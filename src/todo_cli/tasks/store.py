"""File-based task store.

The whole collection lives in one JSON array on disk. Loading a missing
file yields an empty collection; saving always rewrites the full file
through a temporary file and an atomic rename, so a crash mid-write
leaves the previous contents in place.
"""

import json
from pathlib import Path
from typing import Any

from todo_cli.errors import StorageError
from todo_cli.logging import get_logger
from todo_cli.tasks.models import Task

logger = get_logger(__name__)


def atomic_write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write JSON data to a file atomically.

    Writes to a temporary file first, then renames to the target path.
    The temporary file is removed if anything fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp_path.write_text(
            json.dumps(data, indent=indent, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class TaskStore:
    """Persistent task collection backed by a JSON file.

    Example:
        >>> store = TaskStore(settings.tasks_file)
        >>> tasks = store.load()
        >>> tasks.append(Task(id=1, description="Buy milk"))
        >>> store.save(tasks)
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Backing JSON file."""
        return self._path

    def load(self) -> list[Task]:
        """Load the task collection.

        Returns:
            Tasks in stored order; empty if the file does not exist.

        Raises:
            StorageError: If the file cannot be read or holds malformed data.
        """
        if not self._path.exists():
            logger.debug("tasks.missing", path=str(self._path))
            return []

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(
                f"Cannot parse {self._path}: {e}", path=self._path
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(
                f"Cannot read {self._path}: {e}", path=self._path
            ) from e

        if not isinstance(data, list):
            raise StorageError(
                f"Cannot parse {self._path}: expected a list of tasks",
                path=self._path,
            )

        tasks: list[Task] = []
        seen: set[int] = set()
        for record in data:
            try:
                task = Task.from_dict(record)
            except ValueError as e:
                raise StorageError(f"Cannot parse {self._path}: {e}", path=self._path) from e
            if task.id in seen:
                raise StorageError(
                    f"Cannot parse {self._path}: duplicate task id {task.id}",
                    path=self._path,
                )
            seen.add(task.id)
            tasks.append(task)

        logger.debug("tasks.loaded", path=str(self._path), count=len(tasks))
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Overwrite the backing file with the full collection.

        Creates the containing directory on first write.

        Raises:
            StorageError: If the file cannot be written.
        """
        try:
            atomic_write_json(self._path, [task.to_dict() for task in tasks])
        except (OSError, UnicodeEncodeError) as e:
            raise StorageError(f"Cannot write {self._path}: {e}", path=self._path) from e
        logger.debug("tasks.saved", path=str(self._path), count=len(tasks))
