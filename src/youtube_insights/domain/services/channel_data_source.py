"""Abstract base class for the channel data source."""

from abc import ABC, abstractmethod

from youtube_insights.domain.models.channel import ChannelSummary
from youtube_insights.domain.models.video import RawVideoRecord


class ChannelDataSource(ABC):
    """
    Abstract source of channel context and upload metadata.

    Implementations own all network access, API keys and rate-limit
    handling. The analysis engine only sees the records they return and
    the domain exceptions they raise.
    """

    @abstractmethod
    async def resolve_channel_id(self, handle: str) -> str:
        """
        Look up the channel ID for a human handle.

        Args:
            handle: Channel handle without the leading ``@``

        Returns:
            The stable channel ID

        Raises:
            ChannelNotFoundError: If the handle matches no channel
            RateLimitError: If the API quota is exhausted
            TransportUnavailableError: If the API cannot be reached
            APIError: If the API call fails otherwise
        """
        pass

    @abstractmethod
    async def get_channel_summary(self, channel_id: str, handle: str) -> ChannelSummary:
        """
        Retrieve channel-level context.

        Args:
            channel_id: Stable channel ID
            handle: Handle the channel was looked up by

        Returns:
            Channel summary including subscriber and video counts

        Raises:
            ChannelNotFoundError: If the channel doesn't exist
            APIError: If the API call fails
        """
        pass

    @abstractmethod
    async def get_recent_uploads(
        self, channel: ChannelSummary, max_results: int = 20
    ) -> list[RawVideoRecord]:
        """
        Retrieve the most recent uploads of a channel.

        Args:
            channel: Channel to retrieve uploads for
            max_results: Maximum number of videos to retrieve

        Returns:
            Raw video records, newest first

        Raises:
            ChannelNotFoundError: If the uploads playlist is missing
            APIError: If the API call fails
        """
        pass
