"""analyze command — score local files and print their reports."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from reviewengine.analysis.models import FileResult, Review, Severity
from reviewengine.config.settings import Settings
from reviewengine.engine import ReviewEngine, build_engine
from reviewengine.logging import setup_logging
from reviewengine.providers.errors import UnsupportedModelError

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.INFO: "cyan",
    Severity.WARNING: "yellow",
    Severity.ERROR: "dark_orange",
    Severity.CRITICAL: "red",
}


def _score_color(score: float) -> str:
    if score >= 80:
        return "bright_green"
    if score >= 60:
        return "yellow"
    return "red"


def _read(path: Path) -> str | None:
    """File text, or ``None`` when unreadable (analyzed as an empty file)."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        rprint(f"[yellow]Warning: cannot read {path}: {exc}[/yellow]")
        return None


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _display_terminal(review: Review, verbose: bool) -> None:
    console = Console()
    for result in review.files:
        _display_file(console, result, verbose)

    header = Text("Review score: ", style="bold")
    header.append(f"{review.score:.1f}", style=f"bold {_score_color(review.score)}")
    header.append(f"  Files: {len(review.files)}", style="dim")
    header.append(f"  Issues: {review.total_issues}", style="dim")
    console.print(Panel(header, expand=False))


def _display_file(console: Console, result: FileResult, verbose: bool) -> None:
    header = Text(result.path, style="bold")
    header.append("  Score: ", style="dim")
    header.append(f"{result.score:.1f}", style=f"bold {_score_color(result.score)}")
    header.append(
        f"  Checkouts: {result.checkout_count}/{result.return_count}", style="dim"
    )
    header.append(f"  Complexity: {result.complexity_score}", style="dim")
    console.print(Panel(header, expand=False))

    if not result.issues:
        console.print("  No issues found.", style="dim")
    for issue in result.issues:
        color = _SEVERITY_COLORS.get(issue.severity, "dim")
        line = f" (line {issue.line_number})" if issue.line_number else ""
        console.print(
            f"  [{color}]{escape(f'[{issue.severity.value}]')}[/{color}] "
            f"[bold white]{escape(issue.title)}[/bold white]{line}"
        )
        if verbose:
            console.print(f"    {issue.description}", markup=False)
            if issue.suggestion:
                console.print(f"    -> {issue.suggestion}", style="cyan", markup=False)

    if result.ai_narrative is not None:
        console.rule("AI Analysis", style="dim")
        console.print(result.ai_narrative, markup=False)


def _display_markdown(engine: ReviewEngine, review: Review, summary: bool) -> None:
    for result in review.files:
        typer.echo(engine.render_report(result))
    if summary:
        typer.echo(engine.render_review_summary(review))


async def _enrich(
    engine: ReviewEngine,
    review: Review,
    contents: dict[str, str | None],
    model: str | None,
) -> None:
    try:
        for index, result in enumerate(review.files):
            code = contents.get(result.path) or ""
            review.files[index] = await engine.enrich_with_ai(
                result, code, result.path, model
            )
    finally:
        await engine.close()


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


def analyze(
    paths: list[Path] = typer.Argument(help="Source files to analyze"),
    ai: bool = typer.Option(False, "--ai", help="Attach an AI narrative to each file"),
    model: str | None = typer.Option(None, "--model", help="Model id for --ai"),
    output: str = typer.Option(
        "terminal", "--output", "-o", help="Output mode: terminal, json, or markdown"
    ),
    summary: bool = typer.Option(
        False, "--summary", help="Append the review summary (markdown output)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show issue details"),
    commit: str = typer.Option("local", "--commit", help="Commit id for the review"),
    repository: str = typer.Option(".", "--repository", help="Repository name"),
    author: str = typer.Option("unknown", "--author", help="Change author"),
    cwd: str = typer.Option(".", "--cwd", help="Directory holding .reviewengine.toml"),
) -> None:
    """Analyze source files and report issues and scores."""
    if output not in ("terminal", "json", "markdown"):
        rprint(f"[red]Unknown output mode: {output}[/red]")
        raise typer.Exit(code=1)

    settings = Settings()
    setup_logging(settings)
    engine = build_engine(settings, cwd)

    contents = {str(p): _read(p) for p in paths}
    review = engine.analyze_review(
        contents.items(), commit_sha=commit, repository=repository, author=author
    )

    if ai:
        try:
            asyncio.run(_enrich(engine, review, contents, model))
        except UnsupportedModelError as exc:
            rprint(f"[red]Error: {exc}[/red]")
            raise typer.Exit(code=1) from exc

    match output:
        case "json":
            typer.echo(json.dumps(review.to_dict(), indent=2))
        case "markdown":
            _display_markdown(engine, review, summary)
        case _:
            _display_terminal(review, verbose)
