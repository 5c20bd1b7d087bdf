"""YAML-based configuration provider implementation."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from youtube_insights.domain.exceptions import ConfigurationError
from youtube_insights.domain.services.configuration_provider import ConfigurationProvider
from youtube_insights.infrastructure.config.models import (
    AppConfig,
    LoggingConfig,
    ReportSettings,
    RetrySettings,
)

# ${VAR_NAME} or ${VAR_NAME:default}
_ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


class YamlConfigurationProvider(ConfigurationProvider):
    """
    Configuration provider that loads settings from YAML files.

    Values may reference environment variables, and a ``.env`` file in the
    working directory is loaded first so ``YOUTUBE_API_KEY`` can live there.
    """

    def __init__(self, config_path: str | Path, load_env_file: bool = True) -> None:
        """
        Initialize the YAML configuration provider.

        Args:
            config_path: Path to the YAML configuration file
            load_env_file: Whether to load a ``.env`` file before substitution

        Raises:
            ConfigurationError: If the configuration file cannot be loaded or is invalid
        """
        self.config_path = Path(config_path)
        self.load_env_file = load_env_file
        self._config: AppConfig | None = None
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate configuration from YAML file."""
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        if self.load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in configuration file: {e}", e) from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}", e) from e

        if raw_config is None:
            raise ConfigurationError("Configuration file is empty")
        if not isinstance(raw_config, dict):
            raise ConfigurationError("Configuration file must contain a mapping")

        raw_config = self._substitute_env_vars(raw_config)

        try:
            self._config = AppConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}", e) from e

    def _substitute_env_vars(self, obj: Any) -> Any:
        """Recursively substitute environment variables in configuration."""
        if isinstance(obj, dict):
            return {key: self._substitute_env_vars(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [self._substitute_env_vars(item) for item in obj]
        elif isinstance(obj, str):
            return self._substitute_string_env_vars(obj)
        else:
            return obj

    def _substitute_string_env_vars(self, value: str) -> str:
        """Substitute environment variables in a string value."""

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.getenv(var_name, default_value)

        return _ENV_VAR_PATTERN.sub(replace_var, value)

    @property
    def config(self) -> AppConfig:
        """Get the loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded")
        return self._config

    def get_api_key(self) -> str:
        """Get the YouTube Data API key."""
        api_key = self.config.youtube_api.api_key
        if not api_key:
            raise ConfigurationError(
                "YouTube API key is not configured. Set YOUTUBE_API_KEY in the "
                "environment or a .env file."
            )
        return api_key

    def get_max_videos_per_channel(self) -> int:
        """Get the number of recent uploads analyzed per channel."""
        return self.config.analysis.max_videos_per_channel

    def get_recent_window_days(self) -> int:
        """Get the window, in days, used to count recent uploads."""
        return self.config.analysis.recent_window_days

    def get_top_videos_count(self) -> int:
        """Get how many top videos are ranked and averaged."""
        return self.config.analysis.top_videos_count

    def get_channels_file(self) -> str:
        """Get the path of the markdown channel list."""
        return self.config.batch.channels_file

    def get_pacing_seconds(self) -> float:
        """Get the delay between channels in a batch run."""
        return self.config.batch.pacing_seconds

    def get_report_settings(self) -> ReportSettings:
        """Get report output settings."""
        return self.config.reports

    def get_retry_settings(self) -> RetrySettings:
        """Get retry configuration for API operations."""
        return self.config.retry_settings

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging

    def reload(self) -> None:
        """Reload configuration from source."""
        self._config = None
        self._load_config()
