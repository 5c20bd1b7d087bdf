"""Main CLI interface for YouTube Insights."""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from youtube_insights import __version__
from youtube_insights.application.services.analysis_service import normalize_handle
from youtube_insights.application.use_cases.validate_config import ValidateConfigUseCase
from youtube_insights.cli.display import (
    display_batch_summary,
    display_channel_report,
    display_error_summary,
    display_success_message,
)
from youtube_insights.domain.exceptions import (
    ChannelNotFoundError,
    ConfigurationError,
    RateLimitError,
    TransportUnavailableError,
    YouTubeInsightsError,
)
from youtube_insights.infrastructure.container import (
    create_container,
    get_analysis_service,
    get_batch_orchestrator,
    get_configuration_provider,
    get_report_writer,
)
from youtube_insights.infrastructure.logging_setup import configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="YouTube Insights")
@click.option(
    "--config",
    "-c",
    type=click.Path(path_type=Path),
    default="config/config.yml",
    help="Path to configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def cli(ctx: click.Context, config: Path, verbose: bool) -> None:
    """
    YouTube Insights - Analyze a channel's recent uploads.

    Ranks recent videos, summarizes what the best performers have in common,
    and suggests titles for the next upload. Analyze one channel, or every
    channel listed in a markdown file.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose

    if verbose:
        console.print(f"[dim]Using configuration: {escape(str(config))}[/dim]")


def _load_container(ctx: click.Context) -> Any:
    """Create the container and configure logging from it."""
    container = create_container(ctx.obj["config_path"])
    config_provider = get_configuration_provider(container)
    configure_logging(config_provider.get_logging_config(), verbose=ctx.obj["verbose"])
    return container


def _fail(message: str, error: Exception, tip: str | None = None) -> None:
    console.print(f"[red]❌ {message}:[/red] {escape(str(error))}")
    if tip:
        console.print(f"\n[yellow]💡 Tip:[/yellow] {tip}")
    sys.exit(1)


@cli.command()
@click.argument("handle")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Markdown report file (defaults to the configured single-report name)",
)
@click.option("--no-report", is_flag=True, help="Skip writing the markdown report")
@click.pass_context
def analyze(ctx: click.Context, handle: str, output: Path | None, no_report: bool) -> None:
    """Analyze a single channel by HANDLE (with or without the leading @)."""
    verbose = ctx.obj["verbose"]
    started = time.monotonic()

    try:
        container = _load_container(ctx)
        analysis_service = get_analysis_service(container)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task(f"Analyzing @{normalize_handle(handle)}...", total=None)
            result = asyncio.run(analysis_service.analyze_channel(handle))
            progress.update(task, description="Analysis complete!")

        display_channel_report(result, console)

        report_note = ""
        if not no_report:
            path = get_report_writer(container).write_channel_report(result, output)
            report_note = f" Report saved to {path}"

        elapsed = time.monotonic() - started
        display_success_message(f"Analysis complete in {elapsed:.1f}s!{report_note}", console)

    except ConfigurationError as e:
        _fail("Configuration Error", e)
    except ChannelNotFoundError as e:
        _fail("Channel Not Found", e, "Check the channel handle and try again.")
    except RateLimitError as e:
        _fail("Rate Limited", e, "The API quota may be exhausted; try again later.")
    except TransportUnavailableError as e:
        _fail("Network Error", e, "Check your internet connection.")
    except YouTubeInsightsError as e:
        _fail("Error", e)
    except Exception as e:
        console.print(f"[red]❌ Unexpected Error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)


@cli.command()
@click.option(
    "--channels-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Markdown channel list (defaults to the configured file)",
)
@click.option("--no-report", is_flag=True, help="Skip writing the markdown reports")
@click.pass_context
def batch(ctx: click.Context, channels_file: Path | None, no_report: bool) -> None:
    """Analyze every channel listed in the markdown channel list."""
    verbose = ctx.obj["verbose"]
    started = time.monotonic()

    try:
        container = _load_container(ctx)
        orchestrator = get_batch_orchestrator(container, channels_file)

        channels = orchestrator.channel_list_provider.get_channels()
        console.print(f"[cyan]📋 Found {len(channels)} channels to analyze[/cyan]")

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Analyzing channels...", total=None)
            result = asyncio.run(orchestrator.run(channels))
            progress.update(task, description="Batch analysis complete!")

        display_batch_summary(result, len(channels), console)

        if not no_report:
            paths = get_report_writer(container).write_batch_reports(result)
            console.print(f"\n📄 Batch report saved to {escape(str(paths[0]))}")
            console.print(f"📁 Individual reports saved for {len(paths) - 1} channels")

        elapsed = time.monotonic() - started
        display_success_message(f"Batch analysis complete in {elapsed:.1f}s!", console)

    except ConfigurationError as e:
        _fail("Configuration Error", e)
    except YouTubeInsightsError as e:
        _fail("Batch processing failed", e)
    except Exception as e:
        console.print(f"[red]❌ Unexpected Error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate configuration before spending API quota."""
    try:
        container = _load_container(ctx)
        errors = ValidateConfigUseCase(get_configuration_provider(container)).execute()
    except ConfigurationError as e:
        _fail("Configuration Error", e)
        return

    if errors:
        display_error_summary(errors, console)
        sys.exit(1)

    display_success_message("Configuration is valid!", console)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
