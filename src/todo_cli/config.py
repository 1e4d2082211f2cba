"""Configuration for todo-cli.

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TODO_* prefix)
    3. User config (<user config dir>/settings.json)
    4. .env file
    5. Default values

Usage:
    settings = get_settings()
    store = TaskStore(settings.tasks_file)
"""

from pathlib import Path
from typing import Literal, Tuple, Type

from pydantic import Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from todo_cli.resolvers import (
    DEFAULT_APP_AUTHOR,
    DEFAULT_APP_NAME,
    TASKS_FILENAME,
    PathResolver,
    default_config_dir,
    default_data_dir,
)

__all__ = [
    "TodoSettings",
    "get_settings",
    "set_settings",
    "reload_settings",
]


def _get_json_config_source(
    settings_cls: Type[BaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists.

    Args:
        settings_cls: The settings class
        json_file: Path to JSON config file

    Returns:
        JsonConfigSettingsSource if file exists, None otherwise
    """
    if not json_file.exists():
        return None

    from pydantic_settings import JsonConfigSettingsSource

    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class TodoSettings(BaseSettings):
    """Settings for the todo command-line tool.

    Every field can be overridden with a ``TODO_``-prefixed environment
    variable, e.g. ``TODO_DATA_DIR=/tmp/todo`` or ``TODO_LOG_LEVEL=debug``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application identity (drives the OS data directory)
    app_name: str = Field(
        default=DEFAULT_APP_NAME,
        title="App Name",
        description="Application identifier used for the default data directory",
    )
    app_author: str = Field(
        default=DEFAULT_APP_AUTHOR,
        title="App Author",
        description="Application author used for the default data directory (Windows)",
    )

    # Storage
    data_dir: Path | None = Field(
        default=None,
        title="Data Directory",
        description="Directory holding the task file; defaults to the OS data directory for app_name",
    )
    tasks_filename: str = Field(
        default=TASKS_FILENAME,
        title="Tasks Filename",
        description="Name of the JSON file inside the data directory",
    )

    # Logging configuration
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for humans, json for machines)",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Expand ~ in paths."""
        if v is None:
            return None
        if isinstance(v, str):
            return Path(v).expanduser()
        return v.expanduser()

    @model_validator(mode="after")
    def default_data_dir_from_identity(self) -> "TodoSettings":
        """Resolve an unset data_dir from app_name and app_author."""
        if self.data_dir is None:
            self.data_dir = default_data_dir(self.app_name, self.app_author)
        return self

    @field_validator("tasks_filename")
    @classmethod
    def plain_filename(cls, v: str) -> str:
        """Reject empty names and names containing a directory part."""
        if not v or Path(v).name != v:
            raise ValueError("tasks_filename must be a plain file name")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Layer the user JSON config between environment and .env file.

        The config file is located with the class-level app_name and
        app_author defaults, since it is read before any other source.

        Note: the JSON source is only included if the file exists.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        user_json = _get_json_config_source(
            settings_cls,
            default_config_dir(
                cls.model_fields["app_name"].default,
                cls.model_fields["app_author"].default,
            )
            / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)

    @property
    def paths(self) -> PathResolver:
        """Path resolver rooted at the configured data directory."""
        return PathResolver(self.data_dir, self.tasks_filename)

    @property
    def tasks_file(self) -> Path:
        """Path of the JSON task file."""
        return self.paths.tasks_file


# Global settings instance holder
_settings_instance: TodoSettings | None = None


def get_settings() -> TodoSettings:
    """Get the current settings instance.

    Creates a fresh TodoSettings on first access.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = TodoSettings()
    return _settings_instance


def set_settings(settings: TodoSettings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally
    """
    global _settings_instance
    _settings_instance = settings


def reload_settings() -> TodoSettings:
    """Drop the cached instance and load settings again.

    Returns:
        Fresh TodoSettings instance
    """
    global _settings_instance
    _settings_instance = None
    return get_settings()
