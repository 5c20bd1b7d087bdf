"""YouTube API integration implementations."""

from youtube_insights.infrastructure.youtube.channel_data_source import YouTubeChannelDataSource
from youtube_insights.infrastructure.youtube.client import YouTubeServiceFactory
from youtube_insights.infrastructure.youtube.retry import RetryPolicy

__all__ = [
    "RetryPolicy",
    "YouTubeChannelDataSource",
    "YouTubeServiceFactory",
]
