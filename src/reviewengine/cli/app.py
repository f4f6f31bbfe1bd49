"""Typer CLI application definition for reviewengine."""

from __future__ import annotations

import typer

from reviewengine.cli.commands.analyze import analyze
from reviewengine.cli.commands.config import config_app
from reviewengine.cli.commands.models import models_app

app = typer.Typer(
    name="reviewengine",
    help="Heuristic code review with optional AI narratives",
    no_args_is_help=True,
)

app.command("analyze")(analyze)
app.add_typer(models_app, name="models")
app.add_typer(config_app, name="config")
