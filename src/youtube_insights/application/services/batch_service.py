"""Sequential multi-channel analysis with per-channel failure isolation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from youtube_insights.application.services.analysis_service import ChannelAnalysisService
from youtube_insights.domain.exceptions import YouTubeInsightsError
from youtube_insights.domain.models.channel import ChannelEntry
from youtube_insights.domain.models.processing import BatchRunResult, BatchState, ChannelFailure
from youtube_insights.domain.services.channel_list_provider import ChannelListProvider

logger = logging.getLogger(__name__)

UNEXPECTED_FAILURE = "UnexpectedError"


class BatchOrchestrator:
    """
    Runs single-channel analysis over a channel list.

    Channels are processed one at a time, never concurrently, with a pacing
    delay between them so the shared API quota is spent evenly. A failed
    channel is recorded with its failure kind and the run moves on; the
    batch succeeds once every channel has been attempted.
    """

    def __init__(
        self,
        analysis_service: ChannelAnalysisService,
        channel_list_provider: ChannelListProvider | None = None,
        pacing_seconds: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize the batch orchestrator.

        Args:
            analysis_service: Service analyzing a single channel
            channel_list_provider: Source of the channel list when none is passed to run()
            pacing_seconds: Delay between consecutive channels
            sleep: Awaitable used for pacing
        """
        self.analysis_service = analysis_service
        self.channel_list_provider = channel_list_provider
        self.pacing_seconds = pacing_seconds
        self._sleep = sleep
        self.state: BatchState | None = None

    def _transition(self, state: BatchState) -> None:
        self.state = state
        logger.debug(f"Batch state: {state.value}")

    async def run(self, channels: Sequence[ChannelEntry] | None = None) -> BatchRunResult:
        """
        Analyze every channel in the list.

        Args:
            channels: Channels to analyze; loaded from the provider when omitted

        Returns:
            BatchRunResult with successes and failures in list order

        Raises:
            ConfigurationError: If the channel list cannot be loaded
        """
        result = BatchRunResult()

        self._transition(BatchState.LOADING)
        if channels is None:
            if self.channel_list_provider is None:
                raise ValueError("No channel list given and no channel list provider configured")
            channels = self.channel_list_provider.get_channels()
        channels = list(channels)
        logger.info(f"Found {len(channels)} channels to analyze")

        self._transition(BatchState.PROCESSING)
        for index, entry in enumerate(channels, start=1):
            logger.info(f"[{index}/{len(channels)}] Analyzing @{entry.handle}")
            await self._process_entry(entry, result)

            if index < len(channels) and self.pacing_seconds > 0:
                await self._sleep(self.pacing_seconds)

        self._transition(BatchState.AGGREGATING)
        aggregate = result.aggregate
        if aggregate is not None:
            logger.info(
                f"Aggregated {aggregate.channel_count} channels: "
                f"{aggregate.total_videos_analyzed} videos, "
                f"{aggregate.total_subscribers} subscribers"
            )
        result.complete()

        self._transition(BatchState.DONE)
        logger.info(
            f"Batch analysis complete: {len(result.succeeded)}/{len(channels)} channels succeeded"
        )
        return result

    async def _process_entry(self, entry: ChannelEntry, result: BatchRunResult) -> None:
        """Analyze one entry, recording the outcome in ``result``."""
        try:
            analysis = await self.analysis_service.analyze_channel(entry.handle)
        except YouTubeInsightsError as e:
            logger.error(f"@{entry.handle} failed: {e.failure_kind}: {e}")
            result.add_failure(ChannelFailure(entry.handle, e.failure_kind, str(e)))
        except Exception as e:
            logger.exception(f"Unexpected error analyzing @{entry.handle}")
            result.add_failure(ChannelFailure(entry.handle, UNEXPECTED_FAILURE, str(e)))
        else:
            result.add_success(analysis)
            logger.info(f"@{entry.handle} complete")
