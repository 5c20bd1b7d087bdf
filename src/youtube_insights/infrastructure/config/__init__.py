"""Configuration providers and models."""

from youtube_insights.infrastructure.config.channel_list import MarkdownChannelListProvider
from youtube_insights.infrastructure.config.models import AppConfig, RetrySettings
from youtube_insights.infrastructure.config.yaml_provider import YamlConfigurationProvider

__all__ = [
    "AppConfig",
    "MarkdownChannelListProvider",
    "RetrySettings",
    "YamlConfigurationProvider",
]
