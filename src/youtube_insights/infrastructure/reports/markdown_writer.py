"""Markdown report rendering and file output."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from youtube_insights.domain.analysis.rounding import format_view_count, round_half_up
from youtube_insights.domain.models.analysis import ChannelAnalysisResult
from youtube_insights.domain.models.processing import BatchRunResult
from youtube_insights.domain.models.video import VideoRecord
from youtube_insights.infrastructure.config.models import ReportSettings

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%B %d, %Y %I:%M %p"


def _format_date(video: VideoRecord) -> str:
    return video.published_at.strftime("%Y-%m-%d") if video.published_at else "Unknown"


def render_channel_report(result: ChannelAnalysisResult, generated_at: datetime | None = None) -> str:
    """Render the full markdown report for one channel."""
    generated_at = generated_at or datetime.now()
    channel = result.channel
    insights = result.insights
    recommendations = result.recommendations

    lines = [
        f"# YouTube Channel Analysis: {channel.display_name}",
        "",
        f"**Analysis Date:** {generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"**Channel:** @{result.handle}",
        f"**Subscribers:** {channel.subscriber_count:,}",
        f"**Total Videos:** {channel.total_video_count:,}",
        "",
        "## Top Recent Videos",
        "",
    ]

    ranked = sorted(result.videos, key=lambda v: v.views, reverse=True)
    for index, video in enumerate(ranked, start=1):
        lines += [
            f"### {index}. {video.title}",
            f"- **Views:** {video.views:,}",
            f"- **Duration:** {video.duration.display}",
            f"- **Link:** {video.url}",
            f"- **Published:** {_format_date(video)}",
            "",
        ]

    for heading, entries in (
        ("Performance Patterns", insights.performance_patterns),
        ("Content Themes", insights.content_themes),
        ("Optimization Opportunities", insights.optimization_opportunities),
    ):
        lines += [f"## {heading}", ""]
        lines += [f"- {entry}" for entry in entries]
        lines.append("")

    lines += ["## Content Recommendations", ""]
    lines += [
        f'{index}. "{suggestion}"'
        for index, suggestion in enumerate(recommendations.title_suggestions, start=1)
    ]
    lines += [
        "",
        f"**Success Formula:** {recommendations.success_formula}",
        "",
        "---",
        "*Generated by YouTube Insights*",
    ]
    return "\n".join(lines)


def render_batch_report(batch: BatchRunResult, generated_at: datetime | None = None) -> str:
    """Render the cross-channel markdown report for a batch run."""
    generated_at = generated_at or datetime.now()

    lines = [
        "# YouTube Batch Analysis Report",
        "",
        f"**Analysis Date:** {generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"**Channels Analyzed:** {len(batch.succeeded)}",
        f"**Channels Failed:** {len(batch.failed)}",
        "",
    ]

    aggregate = batch.aggregate
    if aggregate is not None:
        lines += [
            "## Summary Statistics",
            "",
            f"- **Total Subscribers:** {aggregate.total_subscribers:,}",
            f"- **Average Views per Video:** {round_half_up(aggregate.mean_average_views):,}",
            f"- **Total Videos Analyzed:** {aggregate.total_videos_analyzed}",
            "",
        ]

    lines += ["## Channel Reports", ""]
    for result in batch.succeeded:
        lines += [
            f"### {result.channel.display_name}",
            f"- **Handle:** @{result.handle}",
            f"- **Subscribers:** {result.channel.subscriber_count:,}",
            f"- **Avg Views:** {round_half_up(result.insights.average_views):,}",
        ]
        top = result.top_video
        if top is not None:
            lines.append(f"- **Top Video:** {top.title} ({format_view_count(top.views)} views)")
        lines.append("")

    if batch.failed:
        lines += ["## Failed Channels", ""]
        lines += [f"- **@{failure.handle}:** {failure.reason} - {failure.detail}" for failure in batch.failed]
        lines.append("")

    lines += ["---", "*Generated by YouTube Insights - Batch Mode*"]
    return "\n".join(lines)


class MarkdownReportWriter:
    """Writes channel and batch reports to the configured output directory."""

    def __init__(self, settings: ReportSettings | None = None) -> None:
        self.settings = settings or ReportSettings()
        self.output_dir = Path(self.settings.output_dir)

    def _write(self, filename: str | Path, content: str) -> Path:
        path = Path(filename)
        if not path.is_absolute():
            path = self.output_dir / path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Report saved to {path}")
        return path

    def write_channel_report(
        self, result: ChannelAnalysisResult, filename: str | Path | None = None
    ) -> Path:
        """Write a single-channel report; defaults to the single-report file name."""
        return self._write(
            filename or self.settings.single_report_filename,
            render_channel_report(result),
        )

    def write_batch_reports(self, batch: BatchRunResult) -> list[Path]:
        """
        Write the batch report followed by one report per successful channel.

        A handle listed more than once gets a single report, from its last run.
        """
        paths = [self._write(self.settings.batch_report_filename, render_batch_report(batch))]
        latest = {result.handle: result for result in batch.succeeded}
        for result in latest.values():
            filename = self.settings.channel_report_pattern.format(handle=result.handle)
            paths.append(self._write(filename, render_channel_report(result)))
        return paths
