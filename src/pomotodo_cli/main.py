"""Main entry point for Pomotodo CLI."""

from pathlib import Path
from typing import Optional

import typer

from pomotodo_cli import __version__
from pomotodo_cli.commands import config as config_commands
from pomotodo_cli.config import Config, get_config_manager
from pomotodo_cli.models.app_state import AppController
from pomotodo_cli.models.exceptions import StorageError
from pomotodo_cli.storage import TaskFile, default_data_file
from pomotodo_cli.ui.formatters import format_error, format_output, tasks_to_rows
from pomotodo_cli.utils.console import get_console
from pomotodo_cli.utils.exit_codes import ERROR_STORAGE
from pomotodo_cli.utils.logger import get_logger, set_level
from pomotodo_cli.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="pomotodo",
    cls=SuggestingGroup,
    help="Terminal task list with a Pomodoro focus timer",
)

app.add_typer(config_commands.app, name="config", help="Configuration management")


def resolve_data_file(config: Config, override: Optional[Path] = None) -> Path:
    """Pick the task file: CLI option, then config, then the default location."""
    if override is not None:
        return override.expanduser()
    if config.storage.data_file:
        return Path(config.storage.data_file).expanduser()
    return default_data_file()


def run_tui(config: Config, data_file: Path) -> None:
    """Load tasks, run the interactive app and save on the way out."""
    from pomotodo_cli.ui.app import PomotodoApp

    logger = get_logger()
    set_level(config.logging.level)

    controller = AppController(
        TaskFile(data_file),
        work_duration=config.timer.work_ticks,
        break_duration=config.timer.break_ticks,
        notice_ticks=config.ui.notice_ticks,
    )
    try:
        controller.load()
    except StorageError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_STORAGE)

    logger.info("Starting TUI with %s", data_file)
    PomotodoApp(controller, tick_seconds=config.timer.tick_seconds).run()

    if not controller.shutdown():
        format_error(f"Could not save tasks to {data_file}")
        raise typer.Exit(ERROR_STORAGE)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None, "--data-file", "-f", help="Task file to use instead of the default"
    ),
    profile: str = typer.Option("default", "--profile", help="Configuration profile"),
) -> None:
    """Run the interactive task list (default) or a sub-command."""
    config = get_config_manager(profile).config
    ctx.obj = {"config": config, "data_file": resolve_data_file(config, data_file)}

    if ctx.invoked_subcommand is None:
        run_tui(config, ctx.obj["data_file"])


@app.command("list")
def list_tasks(
    ctx: typer.Context,
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
) -> None:
    """Print the saved tasks without starting the timer UI."""
    try:
        tasks = TaskFile(ctx.obj["data_file"]).load()
    except StorageError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_STORAGE)

    if not tasks:
        get_console().print("[yellow]No tasks found[/yellow]")
        return
    format_output(tasks_to_rows(tasks), output)


@app.command()
def version() -> None:
    """Show version information."""
    get_console().print(f"[bold]Pomotodo CLI[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
