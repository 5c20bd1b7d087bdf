"""Domain-specific exceptions for the YouTube Insights application."""

from typing import Optional


class YouTubeInsightsError(Exception):
    """Base exception for all YouTube Insights errors."""

    failure_kind = "Error"

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(YouTubeInsightsError):
    """Raised when there are configuration-related errors."""

    failure_kind = "ConfigurationError"


class APIError(YouTubeInsightsError):
    """Raised when YouTube API calls fail."""

    failure_kind = "APIError"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code


class AuthenticationError(APIError):
    """Raised when the API key is rejected."""

    failure_kind = "AuthenticationFailed"

    def __init__(
        self,
        message: str = "YouTube API key rejected",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, 403, cause)


class RateLimitError(APIError):
    """Raised when YouTube API quota or rate limits are exceeded."""

    failure_kind = "RateLimited"

    def __init__(
        self,
        message: str = "YouTube API rate limit exceeded",
        status_code: Optional[int] = 429,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, status_code, cause)


class TransportUnavailableError(APIError):
    """Raised when the YouTube API cannot be reached at the network level."""

    failure_kind = "TransportUnavailable"

    def __init__(
        self,
        message: str = "YouTube API is unreachable",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, None, cause)


class ChannelNotFoundError(YouTubeInsightsError):
    """Raised when a channel handle or ID matches no channel."""

    failure_kind = "ChannelNotFound"

    def __init__(self, channel: str, cause: Optional[Exception] = None) -> None:
        message = f"Channel not found: {channel}"
        super().__init__(message, cause)
        self.channel = channel


class AnalysisError(YouTubeInsightsError):
    """Raised when the analysis engine cannot produce a result."""

    failure_kind = "AnalysisError"


class EmptyVideoSetError(AnalysisError):
    """Raised when no videos with recorded views are left to analyze."""

    failure_kind = "EmptyVideoSet"

    def __init__(self, channel: Optional[str] = None) -> None:
        if channel:
            message = f"No videos with view statistics to analyze for channel: {channel}"
        else:
            message = "Cannot compute statistics over an empty video set"
        super().__init__(message)
        self.channel = channel
