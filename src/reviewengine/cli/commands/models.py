"""models subcommand — inspect AI models and provider health."""

from __future__ import annotations

import asyncio
import json

import typer
from rich import print as rprint

from reviewengine.config.settings import Settings
from reviewengine.engine import ReviewEngine, build_engine
from reviewengine.logging import setup_logging

models_app = typer.Typer(
    name="models",
    help="Inspect AI models and provider health.",
    no_args_is_help=True,
)


def _engine(cwd: str) -> ReviewEngine:
    settings = Settings()
    setup_logging(settings)
    return build_engine(settings, cwd)


@models_app.command("list")
def models_list(
    cwd: str = typer.Option(".", "--cwd", help="Working directory"),
) -> None:
    """List the model ids available for AI enrichment."""
    engine = _engine(cwd)
    registry = engine.orchestrator.registry
    if not registry.kinds:
        rprint("[yellow]No provider configured; showing default model ids.[/yellow]")
    for model_id in engine.list_available_models():
        rprint(f"  {model_id}")


@models_app.command("info")
def models_info(
    model_id: str = typer.Argument(help="Model id to describe"),
    cwd: str = typer.Option(".", "--cwd", help="Working directory"),
) -> None:
    """Show metadata for a configured model."""
    info = _engine(cwd).get_model_info(model_id)
    if info is None:
        rprint(f"[red]Error: model {model_id!r} is not configured[/red]")
        raise typer.Exit(code=1)
    typer.echo(json.dumps(info.model_dump(mode="json"), indent=2))


@models_app.command("health")
def models_health(
    cwd: str = typer.Option(".", "--cwd", help="Working directory"),
) -> None:
    """Probe every configured provider."""
    engine = _engine(cwd)
    healthy = asyncio.run(_check(engine))
    if healthy:
        rprint("[green]Providers healthy[/green]")
        return
    rprint("[red]One or more providers are unhealthy[/red]")
    raise typer.Exit(code=1)


async def _check(engine: ReviewEngine) -> bool:
    try:
        return await engine.check_providers_healthy()
    finally:
        await engine.close()
