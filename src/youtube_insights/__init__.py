"""YouTube Insights - Channel performance analysis and content recommendations."""

__version__ = "0.1.0"
__description__ = "Analyze a YouTube channel's recent uploads and suggest what to make next"

from youtube_insights.domain.models import (
    BatchRunResult,
    ChannelAnalysisResult,
    ChannelSummary,
    VideoRecord,
)

__all__ = ["BatchRunResult", "ChannelAnalysisResult", "ChannelSummary", "VideoRecord"]
