"""Dependency injection container configuration."""

from __future__ import annotations

from pathlib import Path

from dependency_injector import containers, providers

from youtube_insights.application.services.analysis_service import ChannelAnalysisService
from youtube_insights.application.services.batch_service import BatchOrchestrator
from youtube_insights.domain.services.channel_data_source import ChannelDataSource
from youtube_insights.domain.services.channel_list_provider import ChannelListProvider
from youtube_insights.domain.services.configuration_provider import ConfigurationProvider
from youtube_insights.infrastructure.config.channel_list import MarkdownChannelListProvider
from youtube_insights.infrastructure.config.yaml_provider import YamlConfigurationProvider
from youtube_insights.infrastructure.reports.markdown_writer import MarkdownReportWriter
from youtube_insights.infrastructure.youtube.channel_data_source import YouTubeChannelDataSource
from youtube_insights.infrastructure.youtube.client import YouTubeServiceFactory
from youtube_insights.infrastructure.youtube.retry import RetryPolicy


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container for the YouTube Insights application.

    Holds the configuration provider; services are assembled by the getter
    functions below from its settings.
    """

    # Configuration
    config_file_path = providers.Configuration()

    # Configuration Provider
    configuration_provider = providers.Singleton(
        YamlConfigurationProvider,
        config_path=config_file_path,
    )


def create_container(config_path: str | Path) -> Container:
    """
    Create and configure the dependency injection container.

    Args:
        config_path: Path to the configuration file

    Returns:
        Configured container instance

    Raises:
        ConfigurationError: If the configuration cannot be loaded
    """
    container = Container()
    container.config_file_path.override(str(config_path))
    # Load eagerly so configuration problems surface before any work starts.
    container.configuration_provider()
    return container


def get_configuration_provider(container: Container) -> ConfigurationProvider:
    """Get the configuration provider from the container."""
    return container.configuration_provider()


def get_retry_policy(container: Container) -> RetryPolicy:
    """Get the retry policy for API calls."""
    config_provider = get_configuration_provider(container)
    return RetryPolicy.from_settings(config_provider.get_retry_settings())


def get_channel_data_source(container: Container) -> ChannelDataSource:
    """Get the YouTube channel data source."""
    config_provider = get_configuration_provider(container)
    service_factory = YouTubeServiceFactory(config_provider.get_api_key())
    return YouTubeChannelDataSource(service_factory, get_retry_policy(container))


def get_analysis_service(container: Container) -> ChannelAnalysisService:
    """Get the single-channel analysis service."""
    config_provider = get_configuration_provider(container)
    return ChannelAnalysisService(
        data_source=get_channel_data_source(container),
        max_videos=config_provider.get_max_videos_per_channel(),
        top_videos_count=config_provider.get_top_videos_count(),
        recent_window_days=config_provider.get_recent_window_days(),
    )


def get_channel_list_provider(
    container: Container, channels_file: str | Path | None = None
) -> ChannelListProvider:
    """Get the batch channel list provider, optionally overriding the file."""
    config_provider = get_configuration_provider(container)
    return MarkdownChannelListProvider(channels_file or config_provider.get_channels_file())


def get_batch_orchestrator(
    container: Container, channels_file: str | Path | None = None
) -> BatchOrchestrator:
    """Get the batch orchestrator."""
    config_provider = get_configuration_provider(container)
    return BatchOrchestrator(
        analysis_service=get_analysis_service(container),
        channel_list_provider=get_channel_list_provider(container, channels_file),
        pacing_seconds=config_provider.get_pacing_seconds(),
    )


def get_report_writer(container: Container) -> MarkdownReportWriter:
    """Get the markdown report writer."""
    config_provider = get_configuration_provider(container)
    return MarkdownReportWriter(config_provider.get_report_settings())
