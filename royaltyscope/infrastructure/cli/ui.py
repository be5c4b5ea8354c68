"""UI helpers for CLI interaction.

This module provides reusable UI components and helpers for the CLI,
keeping the presentation logic separate from business logic.
"""

from collections.abc import Callable
import functools
import json
from typing import Any, ParamSpec, TypeVar

from rich.console import Console
from rich.table import Table
import typer

from royaltyscope.config import get_logger
from royaltyscope.domain.matching import MatchResult, MatchType
from royaltyscope.domain.matching.algorithms import describe_confidence
from royaltyscope.domain.pipeline import CatalogPipelineResult, ConfidenceTier

# Initialize consoles and logger; errors go to stderr
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


MATCH_TYPE_STYLES = {
    MatchType.EXACT: "bold green",
    MatchType.HIGH: "green",
    MatchType.MEDIUM: "yellow",
    MatchType.LOW: "red",
}

CONFIDENCE_TIER_STYLES = {
    ConfidenceTier.HIGH: "green",
    ConfidenceTier.MEDIUM: "yellow",
    ConfidenceTier.LOW: "red",
}


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    This decorator wraps a command function to:
    1. Provide consistent error handling using Typer's Exit mechanism
    2. Log errors using Loguru with proper context
    3. Display user-friendly error messages with Rich

    Args:
        func: The command function to wrap

    Returns:
        Wrapped function with integrated error handling
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except typer.Exit:
                raise

            except typer.Abort:
                logger.info(f"Operation {operation} aborted by user")
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                err_console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def print_json(payload: Any) -> None:
    """Write a JSON document to stdout without Rich markup."""
    typer.echo(json.dumps(payload, indent=2, default=str))


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def display_match_results(title: str, matches: list[MatchResult]) -> None:
    """Render ranked match candidates as a table."""
    if not matches:
        console.print(f"[yellow]No catalog matches for[/yellow] {title}")
        return

    table = Table(title=f"Matches for {title}", show_header=True)
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("Work ID", style="cyan")
    table.add_column("Title")
    table.add_column("Confidence", justify="right")
    table.add_column("Tier")
    table.add_column("Signals", style="dim")

    for rank, match in enumerate(matches, start=1):
        factors = match.factors
        signals = [
            name
            for name, present in (
                ("iswc", factors.iswc_match),
                ("aka", factors.aka_match),
                ("writer", factors.writer_match),
            )
            if present
        ]
        style = MATCH_TYPE_STYLES[match.match_type]
        table.add_row(
            str(rank),
            match.work.id,
            match.work.title,
            f"{match.confidence:.2f}",
            f"[{style}]{match.match_type}[/{style}]",
            ", ".join(signals) or "-",
        )

    console.print(table)
    console.print(f"[dim]Top candidate: {describe_confidence(matches[0].confidence)}[/dim]")


def display_pipeline_result(result: CatalogPipelineResult) -> None:
    """Render a catalog pipeline estimate: per-song table and summary."""
    table = Table(title="Song Pipeline", show_header=True)
    table.add_column("Song", style="cyan")
    table.add_column("R0 / month", justify="right")
    table.add_column("k", justify="right")
    table.add_column("Collectability", justify="right")
    table.add_column("Pipeline", justify="right", style="bold")
    table.add_column("Confidence")

    for song in result.song_results:
        style = CONFIDENCE_TIER_STYLES[song.confidence]
        table.add_row(
            song.title or song.song_id,
            format_currency(song.monthly_net_r0),
            f"{song.k:.2f}",
            f"{song.collectability:.0%}",
            format_currency(song.collectible_pipeline),
            f"[{style}]{song.confidence}[/{style}]",
        )

    if result.song_results:
        console.print(table)

    summary = Table(title="Catalog Pipeline", show_header=False)
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", justify="right")
    summary.add_row("Low", format_currency(result.scenario.low))
    summary.add_row("Base", format_currency(result.scenario.base))
    summary.add_row("High", format_currency(result.scenario.high))
    summary.add_row("Performance", format_currency(result.breakdown.performance))
    summary.add_row("Mechanical", format_currency(result.breakdown.mechanical))
    summary.add_row("Sync", format_currency(result.breakdown.sync))
    summary.add_row("Confidence", f"{result.confidence_score}/100")
    console.print(summary)
