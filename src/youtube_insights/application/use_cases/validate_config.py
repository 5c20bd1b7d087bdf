"""Use case for validating application configuration."""

from __future__ import annotations

from pathlib import Path

from youtube_insights.domain.exceptions import ConfigurationError
from youtube_insights.domain.services.configuration_provider import ConfigurationProvider


class ValidateConfigUseCase:
    """
    Use case for validating the application configuration.

    Checks the settings a run depends on before any API quota is spent.
    """

    def __init__(self, config_provider: ConfigurationProvider) -> None:
        """
        Initialize the validation use case.

        Args:
            config_provider: Configuration provider to validate
        """
        self.config_provider = config_provider

    def execute(self, require_channel_list: bool = True) -> list[str]:
        """
        Execute configuration validation.

        Args:
            require_channel_list: Whether a missing batch channel list is an error

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: list[str] = []

        try:
            self.config_provider.get_api_key()
        except ConfigurationError as e:
            errors.append(str(e))

        max_videos = self.config_provider.get_max_videos_per_channel()
        if max_videos < 1 or max_videos > 50:
            errors.append(f"Invalid max videos per channel: {max_videos} (must be 1-50)")

        window = self.config_provider.get_recent_window_days()
        if window < 1:
            errors.append(f"Invalid recent window: {window} days (must be at least 1)")

        if require_channel_list:
            channels_file = Path(self.config_provider.get_channels_file())
            if not channels_file.exists():
                errors.append(f"Channel list not found: {channels_file}")

        report_dir = Path(self.config_provider.get_report_settings().output_dir)
        if report_dir.exists() and not report_dir.is_dir():
            errors.append(f"Report output path is not a directory: {report_dir}")

        return errors
