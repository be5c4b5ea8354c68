"""Song matching and statement reconciliation commands."""

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.table import Table
import typer

from royaltyscope.application.use_cases import (
    ReconcileStatementCommand,
    ReconcileStatementUseCase,
)
from royaltyscope.config import get_logger, settings
from royaltyscope.domain.matching import SongRecord, batch_key, find_potential_matches
from royaltyscope.infrastructure.cli.ui import (
    command_error_handler,
    display_match_results,
    format_currency,
    print_json,
)
from royaltyscope.infrastructure.mappers import (
    catalog_work_from_dict,
    load_json_records,
    map_records,
    song_record_from_dict,
)

console = Console()
logger = get_logger(__name__)

CatalogOption = Annotated[
    Path,
    typer.Option(
        "--catalog",
        "-c",
        help="JSON array of catalog works",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]
FormatOption = Annotated[
    str, typer.Option("--format", "-f", help="Output format (table, json)")
]


def register_match_commands(app: typer.Typer) -> None:
    """Register matching commands with the Typer app."""
    app.command(
        name="match",
        help="Rank catalog works for a single reported song",
        rich_help_panel="🔎 Matching",
    )(match)
    app.command(
        name="reconcile",
        help="Link every song on a statement to the catalog",
        rich_help_panel="🔎 Matching",
    )(reconcile)


@command_error_handler
def match(
    title: Annotated[str, typer.Argument(help="Reported song title")],
    artist: Annotated[str, typer.Argument(help="Reported performer or writer")],
    catalog: CatalogOption,
    iswc: Annotated[
        str | None, typer.Option("--iswc", help="Reported ISWC, if known")
    ] = None,
    min_confidence: Annotated[
        float | None,
        typer.Option(
            "--min-confidence",
            min=0.0,
            max=1.0,
            help="Confidence floor (defaults to the review floor setting)",
        ),
    ] = None,
    output_format: FormatOption = "table",
) -> None:
    """Rank catalog works for a single reported song."""
    works = map_records(load_json_records(catalog), catalog_work_from_dict)
    song = SongRecord(title=title, artist=artist, iswc=iswc)
    floor = (
        min_confidence
        if min_confidence is not None
        else settings.matching.review_min_confidence
    )

    matches = find_potential_matches(song, works, floor)
    logger.info(f"Found {len(matches)} candidates for '{title}' at floor {floor}")

    if output_format == "json":
        print_json([result.as_dict() for result in matches])
    else:
        display_match_results(title, matches)


@command_error_handler
def reconcile(
    statement: Annotated[
        Path,
        typer.Argument(
            help="JSON array of reported songs",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    catalog: CatalogOption,
    min_confidence: Annotated[
        float | None,
        typer.Option(
            "--min-confidence",
            min=0.0,
            max=1.0,
            help="Automatic link floor (defaults to the auto-link setting)",
        ),
    ] = None,
    output_format: FormatOption = "table",
) -> None:
    """Link every song on a statement to the catalog."""
    songs = map_records(load_json_records(statement), song_record_from_dict)
    works = map_records(load_json_records(catalog), catalog_work_from_dict)

    auto_link = (
        min_confidence
        if min_confidence is not None
        else settings.matching.auto_link_min_confidence
    )
    command = ReconcileStatementCommand(
        songs=songs,
        catalog=works,
        min_confidence=auto_link,
        review_floor=min(settings.matching.review_min_confidence, auto_link),
    )
    result = ReconcileStatementUseCase().execute(command)

    if output_format == "json":
        print_json(result.as_dict())
        return

    table = Table(title="Statement Reconciliation", show_header=True)
    table.add_column("Reported", style="cyan")
    table.add_column("Work")
    table.add_column("Confidence", justify="right")
    table.add_column("Tier")

    for song in songs:
        key = batch_key(song)
        best = result.matches.get(key)
        if best is None:
            candidates = len(result.review_candidates.get(key, []))
            table.add_row(
                song.title,
                f"[yellow]needs review ({candidates} candidates)[/yellow]",
                "-",
                "-",
            )
        else:
            table.add_row(
                song.title,
                f"{best.work.id} {best.work.title}",
                f"{best.confidence:.2f}",
                str(best.match_type),
            )

    console.print(table)
    console.print(
        f"[bold]{result.matched_count}/{result.song_count}[/bold] linked, "
        f"matched gross {format_currency(result.matched_gross)}"
    )
