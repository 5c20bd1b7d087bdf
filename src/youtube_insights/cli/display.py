"""Rich console rendering of analysis results."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from youtube_insights.domain.analysis.rounding import format_view_count, round_half_up
from youtube_insights.domain.models.analysis import ChannelAnalysisResult
from youtube_insights.domain.models.processing import BatchRunResult

console = Console()


def _bullets(entries: tuple[str, ...]) -> str:
    if not entries:
        return "[dim]Nothing notable[/dim]"
    return "\n".join(f"• {escape(entry)}" for entry in entries)


def display_channel_report(result: ChannelAnalysisResult, out: Console | None = None) -> None:
    """Display the analysis of one channel."""
    out = out or console
    channel = result.channel
    insights = result.insights
    recommendations = result.recommendations

    out.print(Panel(
        f"[bold]🎥 YouTube Channel Analysis: {escape(channel.display_name)}[/bold]\n"
        f"📊 Analyzed {len(result.videos)} recent videos • "
        f"{channel.subscriber_count:,} subscribers\n"
        f"📅 Analysis generated on {result.analyzed_at.strftime('%B %d, %Y %I:%M %p')}",
        border_style="blue",
    ))

    out.print("\n[bold cyan]🔍 KEY INSIGHTS[/bold cyan]\n")
    out.print("[bold]📈 Performance Patterns:[/bold]")
    out.print(_bullets(insights.performance_patterns))
    out.print("\n[bold]🎯 Content Themes:[/bold]")
    out.print(_bullets(insights.content_themes))
    out.print("\n[bold]📊 Optimization Opportunities:[/bold]")
    out.print(_bullets(insights.optimization_opportunities))

    out.print("\n[bold cyan]💡 YOUR NEXT VIDEO[/bold cyan]\n")
    out.print("Based on your top performers, consider these title ideas:")
    for index, suggestion in enumerate(recommendations.title_suggestions, start=1):
        out.print(f'{index}. "{escape(suggestion)}"')
    out.print(f"\n[bold]💯 Success Formula:[/bold] {escape(recommendations.success_formula)}")

    table = Table(title=f"🏆 Top {len(insights.top_videos)} Videos by Views")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="cyan", max_width=50)
    table.add_column("Views", justify="right", style="green")
    table.add_column("Duration", justify="right")
    table.add_column("Published", style="dim")
    table.add_column("Link", style="blue")

    for index, video in enumerate(insights.top_videos, start=1):
        published = video.published_at.strftime("%Y-%m-%d") if video.published_at else "-"
        table.add_row(
            str(index),
            escape(video.title),
            format_view_count(video.views),
            video.duration.display,
            published,
            video.url,
        )

    out.print()
    out.print(table)


def display_batch_summary(batch: BatchRunResult, total: int, out: Console | None = None) -> None:
    """Display the per-channel outcome and aggregate statistics of a batch run."""
    out = out or console

    table = Table(title="📊 Batch Results")
    table.add_column("Channel", style="cyan")
    table.add_column("Subscribers", justify="right")
    table.add_column("Videos", justify="right")
    table.add_column("Avg Views", justify="right", style="green")
    table.add_column("Status", justify="center")

    for result in batch.succeeded:
        table.add_row(
            escape(f"{result.channel.display_name} (@{result.handle})"),
            f"{result.channel.subscriber_count:,}",
            str(len(result.videos)),
            format_view_count(result.insights.average_views),
            "[green]✅ Analyzed[/green]",
        )
    for failure in batch.failed:
        table.add_row(escape(f"@{failure.handle}"), "-", "-", "-", f"[red]❌ {escape(failure.reason)}[/red]")

    out.print(table)

    aggregate = batch.aggregate
    if aggregate is not None:
        out.print("\n[bold]📈 Overall Summary:[/bold]")
        out.print(f"👥 Total subscribers: {aggregate.total_subscribers:,}")
        out.print(f"👀 Average views per video: {round_half_up(aggregate.mean_average_views):,}")
        out.print(f"📺 Total videos analyzed: {aggregate.total_videos_analyzed}")

    out.print(f"\n📊 Successfully analyzed {len(batch.succeeded)}/{total} channels")
    if batch.failed:
        out.print(f"[yellow]⚠️  {len(batch.failed)} channels failed[/yellow]")
        for failure in batch.failed:
            out.print(f"• {escape(str(failure))}")


def display_error_summary(errors: list[str], out: Console | None = None) -> None:
    """Display configuration or processing errors."""
    if not errors:
        return

    (out or console).print(Panel(
        "\n".join(f"• {escape(error)}" for error in errors),
        title="[red]❌ Errors Found[/red]",
        border_style="red"
    ))


def display_success_message(message: str, out: Console | None = None) -> None:
    """Display a success message."""
    (out or console).print(Panel(
        f"[green]{message}[/green]",
        title="[green]✅ Success[/green]",
        border_style="green"
    ))
