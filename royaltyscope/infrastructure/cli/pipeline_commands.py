"""Pipeline valuation commands."""

from pathlib import Path
from typing import Annotated

from rich.console import Console
import typer

from royaltyscope.application.use_cases import (
    EstimatePipelineCommand,
    EstimatePipelineUseCase,
)
from royaltyscope.config import get_logger, settings
from royaltyscope.domain.pipeline import validate_pipeline_config
from royaltyscope.infrastructure.cli.ui import (
    command_error_handler,
    display_pipeline_result,
    print_json,
)
from royaltyscope.infrastructure.mappers import (
    load_json_records,
    map_records,
    song_meta_from_dict,
)

console = Console()
logger = get_logger(__name__)


def register_pipeline_commands(app: typer.Typer) -> None:
    """Register valuation commands with the Typer app."""
    app.command(
        name="pipeline",
        help="Estimate the uncollected royalty pipeline for a catalog",
        rich_help_panel="💰 Valuation",
    )(pipeline)
    app.command(
        name="check-config",
        help="Validate the configured pipeline options",
        rich_help_panel="💰 Valuation",
    )(check_config)


@command_error_handler
def pipeline(
    songs_file: Annotated[
        Path,
        typer.Argument(
            help="JSON array of song metadata records",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    chunk_size: Annotated[
        int | None,
        typer.Option("--chunk-size", min=1, help="Value songs in chunks of this size"),
    ] = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format (table, json)")
    ] = "table",
) -> None:
    """Estimate the uncollected royalty pipeline for a catalog."""
    songs = map_records(load_json_records(songs_file), song_meta_from_dict)
    command = EstimatePipelineCommand(
        songs=songs,
        config=settings.pipeline.to_pipeline_config(),
        chunk_size=chunk_size,
    )
    result = EstimatePipelineUseCase().execute(command)

    if output_format == "json":
        print_json(result.as_dict())
    else:
        display_pipeline_result(result)


@command_error_handler
def check_config() -> None:
    """Validate the configured pipeline options."""
    problems = validate_pipeline_config(settings.pipeline.to_pipeline_config())
    if not problems:
        console.print("[green]✓ Pipeline configuration is valid[/green]")
        return

    for problem in problems:
        console.print(f"[red]✗[/red] {problem}")
    raise typer.Exit(code=1)
