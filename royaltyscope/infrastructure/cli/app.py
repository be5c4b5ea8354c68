"""royaltyscope CLI - Main application entry point and app structure."""

from typing import Annotated

from rich.console import Console
import typer

from royaltyscope import __version__
from royaltyscope.config import get_logger, log_startup_info, setup_loguru_logger
from royaltyscope.infrastructure.cli.match_commands import register_match_commands
from royaltyscope.infrastructure.cli.pipeline_commands import (
    register_pipeline_commands,
)

VERSION = __version__

console = Console(width=80)
logger = get_logger(__name__)

app = typer.Typer(
    help=f"🎼 royaltyscope v{VERSION} - Catalog matching and royalty pipeline estimates",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

register_match_commands(app)
register_pipeline_commands(app)


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(
        f"[bold bright_blue]🎼 royaltyscope[/bold bright_blue] [dim]v{VERSION}[/dim]"
    )


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize royaltyscope CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    setup_loguru_logger(verbose)
    log_startup_info()


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
