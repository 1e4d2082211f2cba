"""Path resolution for the task file.

The data directory follows the operating system's convention for
per-user application data (XDG on Linux, ``Application Support`` on
macOS, ``AppData`` on Windows).
"""

from pathlib import Path

import platformdirs

DEFAULT_APP_NAME = "todo"
DEFAULT_APP_AUTHOR = "bocaletto-luca"
TASKS_FILENAME = "tasks.json"


def default_data_dir(
    app_name: str = DEFAULT_APP_NAME,
    app_author: str = DEFAULT_APP_AUTHOR,
) -> Path:
    """Return the per-user data directory for an application.

    Pure function of the application identifier; nothing is created.
    """
    return Path(platformdirs.user_data_dir(app_name, app_author))


def default_config_dir(
    app_name: str = DEFAULT_APP_NAME,
    app_author: str = DEFAULT_APP_AUTHOR,
) -> Path:
    """Return the per-user config directory for an application."""
    return Path(platformdirs.user_config_dir(app_name, app_author))


class PathResolver:
    """Resolves storage locations under a data directory."""

    def __init__(self, data_dir: Path, tasks_filename: str = TASKS_FILENAME) -> None:
        self._data_dir = data_dir
        self._tasks_filename = tasks_filename

    @property
    def data_dir(self) -> Path:
        """Base data directory."""
        return self._data_dir

    @property
    def tasks_file(self) -> Path:
        """JSON file holding the task collection."""
        return self._data_dir / self._tasks_filename
