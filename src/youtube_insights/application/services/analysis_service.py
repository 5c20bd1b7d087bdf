"""Single-channel analysis service."""

from __future__ import annotations

import logging

from youtube_insights.domain.analysis.insights import InsightComposer
from youtube_insights.domain.analysis.pipeline import analyze_videos, normalize_videos
from youtube_insights.domain.analysis.recommendations import RecommendationGenerator
from youtube_insights.domain.analysis.stats import Clock, utc_now
from youtube_insights.domain.exceptions import EmptyVideoSetError
from youtube_insights.domain.models.analysis import ChannelAnalysisResult
from youtube_insights.domain.services.channel_data_source import ChannelDataSource

logger = logging.getLogger(__name__)


def normalize_handle(handle: str) -> str:
    """Strip whitespace and a leading ``@`` from a channel handle."""
    return handle.strip().lstrip("@").strip()


class ChannelAnalysisService:
    """
    Runs the full analysis for one channel.

    Fetches channel context and recent uploads from the data source, builds
    the filtered video set once, and hands it to the pure analysis engine.
    Errors are not caught here; callers decide whether to abort or isolate.
    """

    def __init__(
        self,
        data_source: ChannelDataSource,
        max_videos: int = 20,
        top_videos_count: int = 10,
        recent_window_days: int = 30,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialize the analysis service.

        Args:
            data_source: Source of channel context and upload metadata
            max_videos: Number of recent uploads to fetch
            top_videos_count: Number of top videos ranked and averaged
            recent_window_days: Window for the recent upload count
            clock: Source of "now" for the recent upload count
        """
        self.data_source = data_source
        self.max_videos = max_videos
        self.clock = clock
        self.composer = InsightComposer(
            clock=clock,
            top_videos_count=top_videos_count,
            recent_window_days=recent_window_days,
        )
        self.generator = RecommendationGenerator()

    async def analyze_channel(self, handle: str) -> ChannelAnalysisResult:
        """
        Analyze one channel by handle.

        Raises:
            ChannelNotFoundError: If the handle matches no channel
            EmptyVideoSetError: If no uploads have view statistics
            RateLimitError: If the API quota stays exhausted after retries
            TransportUnavailableError: If the API cannot be reached
            APIError: If the API call fails otherwise
        """
        handle = normalize_handle(handle)

        logger.info(f"Finding channel: @{handle}")
        channel_id = await self.data_source.resolve_channel_id(handle)

        logger.info(f"Getting channel info for @{handle}")
        channel = await self.data_source.get_channel_summary(channel_id, handle)

        logger.info(f"Fetching up to {self.max_videos} recent videos from {channel.display_name}")
        raw_videos = await self.data_source.get_recent_uploads(channel, self.max_videos)

        videos = normalize_videos(raw_videos)
        if not videos:
            raise EmptyVideoSetError(handle)

        logger.info(f"Analyzing {len(videos)} videos from {channel.display_name}")
        return analyze_videos(
            handle,
            channel,
            videos,
            clock=self.clock,
            composer=self.composer,
            generator=self.generator,
        )
