"""Abstract base class for batch channel lists."""

from abc import ABC, abstractmethod

from youtube_insights.domain.models.channel import ChannelEntry


class ChannelListProvider(ABC):
    """Source of the ordered channel list processed by a batch run."""

    @abstractmethod
    def get_channels(self) -> list[ChannelEntry]:
        """
        Get the channels to analyze, in list order.

        Duplicates are kept and processed independently.

        Raises:
            ConfigurationError: If the list cannot be loaded
        """
        pass
