"""Report writers."""

from youtube_insights.infrastructure.reports.markdown_writer import MarkdownReportWriter

__all__ = ["MarkdownReportWriter"]
