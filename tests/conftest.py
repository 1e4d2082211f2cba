"""Shared test fixtures for todo-cli tests.

Provides:
- MockContext for isolating tests from global settings and TODO_* env vars
- Temporary data directory, store and processor fixtures
"""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from todo_cli.config import TodoSettings, reload_settings, set_settings
from todo_cli.logging import configure_logging
from todo_cli.tasks import CommandProcessor, TaskStore


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Clearing TODO_* environment variables
    - Pointing the global settings at a temporary data directory
    - Cleaning up after tests

    Usage:
        with MockContext() as ctx:
            settings = ctx.settings
            tasks_file = ctx.tasks_file
    """

    def __init__(self, **settings_kwargs):
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: TodoSettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()

        for var in [name for name in os.environ if name.startswith("TODO_")]:
            self._original_env[var] = os.environ.pop(var)

        # Data dir is a child of the temp dir so tests can check it gets created
        self._settings = TodoSettings(
            data_dir=Path(self._temp_dir.name) / "data",
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        os.environ.update(self._original_env)
        reload_settings()
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> TodoSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def data_dir(self) -> Path:
        return self.settings.data_dir

    @property
    def tasks_file(self) -> Path:
        return self.settings.tasks_file


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Reset logging to the default level so loggers never hold a stale stream."""
    configure_logging()


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated settings context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    """Path to a task file whose directory does not exist yet."""
    return tmp_path / "data" / "tasks.json"


@pytest.fixture
def store(tasks_file: Path) -> TaskStore:
    return TaskStore(tasks_file)


@pytest.fixture
def processor(store: TaskStore) -> CommandProcessor:
    return CommandProcessor(store)
