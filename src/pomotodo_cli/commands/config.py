"""Configuration management commands."""

from typing import Optional

import typer

from pomotodo_cli.config import get_config_manager
from pomotodo_cli.ui.formatters import format_error, format_output, format_success
from pomotodo_cli.utils.console import get_console
from pomotodo_cli.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS

app = typer.Typer(help="Configuration management commands")


def parse_value(value: str) -> str | int | float | bool | None:
    """Convert a command-line string into the most likely config type."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("none", "null"):
        return None
    if value.isdigit():
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


@app.command("view")
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    try:
        config_manager = get_config_manager(profile)
        format_output(config_manager.config.model_dump(), output)
    except Exception as e:
        format_error(f"Failed to view config: {str(e)}")
        raise typer.Exit(ERROR_GENERAL)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_minutes)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    config_manager = get_config_manager(profile)
    value = config_manager.get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not set")
        raise typer.Exit(ERROR_INVALID_ARGS)
    get_console().print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_minutes)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    try:
        parsed_value = parse_value(value)
        get_config_manager(profile).set(key, parsed_value)
        format_success(f"Configuration '{key}' set to '{parsed_value}'")
    except Exception as e:
        format_error(f"Failed to set config: {str(e)}")
        raise typer.Exit(ERROR_INVALID_ARGS)


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_manager(profile).reset(key)
    except Exception as e:
        format_error(f"Failed to reset config: {str(e)}")
        raise typer.Exit(ERROR_INVALID_ARGS)

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
