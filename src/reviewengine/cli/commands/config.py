"""config subcommand — inspect and persist analysis thresholds."""

from __future__ import annotations

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from reviewengine.config.keys import CONFIG_KEYS
from reviewengine.config.manager import (
    get_config,
    project_config_path,
    resolve_config_source,
    set_config,
    unset_config,
    user_config_path,
)

config_app = typer.Typer(
    name="config",
    help="Inspect and persist analysis thresholds.",
    no_args_is_help=True,
)


def _fail(exc: Exception) -> typer.Exit:
    # KeyError wraps its message in quotes
    message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
    rprint(f"[red]Error: {message}[/red]")
    return typer.Exit(code=1)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Config key to set"),
    value: str = typer.Argument(help="Value to set"),
    project: bool = typer.Option(
        False, "--project", help="Use .reviewengine.toml in --cwd"
    ),
    cwd: str = typer.Option(".", "--cwd", help="Project root"),
) -> None:
    """Validate and persist a config value."""
    try:
        path = set_config(key, value, project=project, cwd=cwd)
    except (KeyError, ValueError) as exc:
        raise _fail(exc) from exc

    layer = "project" if project else "user"
    rprint(f"Set {key} = {value} ({layer} config)")
    rprint(f"[dim]{path}[/dim]")


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(help="Config key to remove"),
    project: bool = typer.Option(
        False, "--project", help="Use .reviewengine.toml in --cwd"
    ),
    cwd: str = typer.Option(".", "--cwd", help="Project root"),
) -> None:
    """Remove a key from one config file so lower layers apply again."""
    try:
        removed = unset_config(key, project=project, cwd=cwd)
    except KeyError as exc:
        raise _fail(exc) from exc

    layer = "project" if project else "user"
    if removed:
        rprint(f"Removed {key} from {layer} config")
    else:
        rprint(f"[dim]{key} is not set in {layer} config[/dim]")


@config_app.command("get")
def config_get(
    key: str = typer.Argument(help="Config key to read"),
    cwd: str = typer.Option(".", "--cwd", help="Project root"),
) -> None:
    """Show the resolved value of a config key and where it comes from."""
    try:
        val = get_config(key, cwd=cwd)
        source = resolve_config_source(key, cwd=cwd)
    except KeyError as exc:
        raise _fail(exc) from exc

    rprint(f"{key} = {val}  ({source})")


@config_app.command("list")
def config_list(
    cwd: str = typer.Option(".", "--cwd", help="Project root"),
) -> None:
    """Show every config key with its resolved value and source."""
    table = Table(show_header=True)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="green", no_wrap=True)
    table.add_column("Source", no_wrap=True)
    table.add_column("Description", style="dim")

    for name in sorted(CONFIG_KEYS):
        val = get_config(name, cwd=cwd)
        table.add_row(
            name,
            "(not set)" if val is None else str(val),
            resolve_config_source(name, cwd=cwd),
            CONFIG_KEYS[name].description,
        )
    Console().print(table)


@config_app.command("path")
def config_path(
    cwd: str = typer.Option(".", "--cwd", help="Project root"),
) -> None:
    """Show config file locations and whether they exist."""
    for label, path in (("User", user_config_path()), ("Project", project_config_path(cwd))):
        status = "[green]exists[/green]" if path.is_file() else "[dim]not found[/dim]"
        rprint(f"  {label + ':':<8} {path}  {status}")
