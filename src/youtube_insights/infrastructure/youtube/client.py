"""YouTube Data API service construction."""

from __future__ import annotations

import logging

from googleapiclient.discovery import Resource, build

from youtube_insights.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class YouTubeServiceFactory:
    """
    Builds and caches a YouTube Data API v3 service authorised by API key.

    Only public data is read, so no OAuth flow is involved.
    """

    def __init__(self, api_key: str | None) -> None:
        self.api_key = api_key
        self._service: Resource | None = None

    def get_service(self) -> Resource:
        """
        Get the YouTube Data API service instance.

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not self.api_key:
            raise ConfigurationError(
                "YouTube API key is not configured. Set YOUTUBE_API_KEY in the "
                "environment or a .env file."
            )

        if self._service is None:
            logger.debug("Building YouTube Data API v3 service")
            self._service = build("youtube", "v3", developerKey=self.api_key, cache_discovery=False)

        return self._service
