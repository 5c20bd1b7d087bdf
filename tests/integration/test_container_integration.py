"""Integration tests for the dependency injection container."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from youtube_insights.application.services.analysis_service import ChannelAnalysisService
from youtube_insights.application.services.batch_service import BatchOrchestrator
from youtube_insights.domain.exceptions import ConfigurationError
from youtube_insights.infrastructure.config.channel_list import MarkdownChannelListProvider
from youtube_insights.infrastructure.config.yaml_provider import YamlConfigurationProvider
from youtube_insights.infrastructure.container import (
    Container,
    create_container,
    get_analysis_service,
    get_batch_orchestrator,
    get_channel_data_source,
    get_configuration_provider,
    get_report_writer,
    get_retry_policy,
)
from youtube_insights.infrastructure.reports.markdown_writer import MarkdownReportWriter
from youtube_insights.infrastructure.youtube.channel_data_source import YouTubeChannelDataSource


class TestContainerIntegration:
    """Integration tests for the DI container."""

    def test_create_container(self, temp_config_file: Path) -> None:
        """Test container creation with a valid configuration."""
        container = create_container(temp_config_file)

        assert isinstance(container, Container)
        assert isinstance(get_configuration_provider(container), YamlConfigurationProvider)

    def test_configuration_provider_is_singleton(self, temp_config_file: Path) -> None:
        """Test the configuration is loaded once per container."""
        container = create_container(temp_config_file)

        assert get_configuration_provider(container) is get_configuration_provider(container)

    def test_create_container_missing_file(self, tmp_path: Path) -> None:
        """Test container creation fails eagerly for a missing file."""
        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            create_container(tmp_path / "nonexistent.yml")

    def test_services_wired_from_configuration(self, temp_config_file: Path) -> None:
        """Test services receive their settings from the configuration."""
        container = create_container(temp_config_file)

        retry_policy = get_retry_policy(container)
        data_source = get_channel_data_source(container)
        service = get_analysis_service(container)

        assert retry_policy.max_retries == 2
        assert isinstance(data_source, YouTubeChannelDataSource)
        assert data_source.service_factory.api_key == "test-api-key"
        assert isinstance(service, ChannelAnalysisService)
        assert service.max_videos == 20

    def test_batch_orchestrator_channels_override(self, temp_config_file: Path, tmp_path: Path) -> None:
        """Test the channel list file can be overridden per run."""
        container = create_container(temp_config_file)

        orchestrator = get_batch_orchestrator(container, tmp_path / "other.md")

        assert isinstance(orchestrator, BatchOrchestrator)
        assert orchestrator.pacing_seconds == 0.5
        assert isinstance(orchestrator.channel_list_provider, MarkdownChannelListProvider)
        assert orchestrator.channel_list_provider.path == tmp_path / "other.md"

    def test_report_writer(self, temp_config_file: Path) -> None:
        """Test the report writer uses the configured directory."""
        writer = get_report_writer(create_container(temp_config_file))

        assert isinstance(writer, MarkdownReportWriter)
        assert writer.output_dir == Path("reports")

    def test_data_source_requires_api_key(
        self, tmp_path: Path, sample_config_data: dict[str, Any]
    ) -> None:
        """Test wiring the data source without a key fails with a configuration error."""
        sample_config_data["youtube_api"]["api_key"] = None
        path = tmp_path / "config.yml"
        path.write_text(yaml.dump(sample_config_data), encoding="utf-8")
        container = create_container(path)

        with pytest.raises(ConfigurationError, match="API key"):
            get_channel_data_source(container)
