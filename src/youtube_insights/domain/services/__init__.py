"""Abstract base classes for domain services."""

from youtube_insights.domain.services.channel_data_source import ChannelDataSource
from youtube_insights.domain.services.channel_list_provider import ChannelListProvider
from youtube_insights.domain.services.configuration_provider import (
    ConfigurationProvider,
)

__all__ = [
    "ChannelDataSource",
    "ChannelListProvider",
    "ConfigurationProvider",
]
