"""Abstract source of application settings."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigurationProvider(ABC):
    """
    Settings consumed by the analysis services, the batch runner and the
    report writer. Implementations validate on load and raise
    ConfigurationError for anything unusable.
    """

    @abstractmethod
    def get_api_key(self) -> str:
        """
        Get the YouTube Data API key.

        Raises:
            ConfigurationError: If no API key is configured
        """
        pass

    @abstractmethod
    def get_max_videos_per_channel(self) -> int:
        """Get the number of recent uploads analyzed per channel."""
        pass

    @abstractmethod
    def get_recent_window_days(self) -> int:
        """Get the window, in days, used to count recent uploads."""
        pass

    @abstractmethod
    def get_top_videos_count(self) -> int:
        """Get how many top videos are ranked and averaged."""
        pass

    @abstractmethod
    def get_channels_file(self) -> str:
        """Get the path of the markdown channel list used by batch runs."""
        pass

    @abstractmethod
    def get_pacing_seconds(self) -> float:
        """Get the delay between channels in a batch run."""
        pass

    @abstractmethod
    def get_report_settings(self) -> Any:
        """Get report output settings (directory and file names)."""
        pass

    @abstractmethod
    def get_retry_settings(self) -> Any:
        """
        Get retry configuration for API operations.

        Returns:
            Retry settings (max_retries, base_delay, max_delay)
        """
        pass

    @abstractmethod
    def get_logging_config(self) -> Any:
        """
        Get logging configuration.

        Returns:
            Logging settings (level, format, file handler options)
        """
        pass

    @abstractmethod
    def reload(self) -> None:
        """
        Reload configuration from source.

        Raises:
            ConfigurationError: If configuration cannot be reloaded or is invalid
        """
        pass
