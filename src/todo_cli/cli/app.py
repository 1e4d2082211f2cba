"""Command-line interface for todo-cli.

Each subcommand maps onto one processor command:

    todo add Buy groceries
    todo list
    todo done 3
    todo remove 2
    todo clear

Confirmations go to stdout; errors go to stderr as ``Error: ...`` and
the process exits with status 1.
"""

from typing import NoReturn

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from todo_cli import __version__
from todo_cli.config import get_settings
from todo_cli.errors import TodoError
from todo_cli.logging import configure_logging, get_logger
from todo_cli.tasks import (
    Command,
    CommandProcessor,
    CommandResult,
    TaskStore,
    parse_task_id,
)

app = typer.Typer(
    name="todo",
    help="Simple to-do list for the terminal.",
    add_completion=False,
    no_args_is_help=True,
)

err_console = Console(stderr=True, highlight=False)

logger = get_logger(__name__)


def print_line(line: str) -> None:
    """Print one line of normal output exactly as given."""
    typer.echo(line)


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    err_console.print(Text(f"Error: {message}", style="bold red"), soft_wrap=True)


def _fail(error: TodoError) -> NoReturn:
    print_error(str(error))
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        print_line(f"todo {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging on stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Simple to-do list for the terminal."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    configure_logging(settings, verbose=verbose)
    logger.debug("cli.start", tasks_file=str(settings.tasks_file))
    ctx.obj = CommandProcessor(TaskStore(settings.tasks_file))


def _run(ctx: typer.Context, command: Command) -> None:
    processor: CommandProcessor = ctx.obj
    result: CommandResult = processor.execute(command)
    if not result.ok:
        _fail(result.error)
    for line in result.lines:
        print_line(line)


@app.command()
def add(
    ctx: typer.Context,
    words: list[str] = typer.Argument(
        ...,
        metavar="TEXT...",
        help="Task description; words are joined with spaces",
    ),
) -> None:
    """Add a new task."""
    _run(ctx, Command.add(words))


@app.command(name="list")
def list_tasks(ctx: typer.Context) -> None:
    """List all tasks."""
    _run(ctx, Command.list())


@app.command()
def done(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., metavar="ID", help="Id of the task to mark done"),
) -> None:
    """Mark a task done."""
    try:
        command = Command.done(parse_task_id(task_id))
    except TodoError as e:
        _fail(e)
    _run(ctx, command)


@app.command()
def remove(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., metavar="ID", help="Id of the task to remove"),
) -> None:
    """Remove a task."""
    try:
        command = Command.remove(parse_task_id(task_id))
    except TodoError as e:
        _fail(e)
    _run(ctx, command)


@app.command()
def clear(ctx: typer.Context) -> None:
    """Clear all tasks."""
    _run(ctx, Command.clear())


def main(argv: list[str] | None = None) -> int:
    """Console-script entry point.

    Runs the typer app outside click's standalone mode so that usage
    errors exit with status 1 like every other failure.

    Returns:
        Process exit status.
    """
    try:
        result = app(args=argv, prog_name="todo", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        print_error("Aborted.")
        return 1
    return result if isinstance(result, int) else 0
