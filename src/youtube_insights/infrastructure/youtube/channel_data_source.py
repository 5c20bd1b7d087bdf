"""YouTube Data API implementation of the channel data source."""

from __future__ import annotations

import json
import logging
from typing import Any

import httplib2
from googleapiclient.errors import HttpError

from youtube_insights.domain.analysis.pipeline import parse_count
from youtube_insights.domain.exceptions import (
    APIError,
    AuthenticationError,
    ChannelNotFoundError,
    RateLimitError,
    TransportUnavailableError,
)
from youtube_insights.domain.models.channel import ChannelSummary
from youtube_insights.domain.models.video import RawVideoRecord
from youtube_insights.domain.services.channel_data_source import ChannelDataSource
from youtube_insights.infrastructure.youtube.client import YouTubeServiceFactory
from youtube_insights.infrastructure.youtube.retry import RetryPolicy

logger = logging.getLogger(__name__)

RATE_LIMIT_REASONS = frozenset(
    {"quotaExceeded", "rateLimitExceeded", "userRateLimitExceeded", "dailyLimitExceeded"}
)
AUTH_REASONS = frozenset({"keyInvalid", "keyExpired", "accessNotConfigured", "forbidden"})

# The API accepts at most 50 results per page and 50 IDs per videos.list call.
MAX_PAGE_SIZE = 50


def _error_reasons(error: HttpError) -> set[str]:
    """Collect the ``reason`` codes reported in an API error payload."""
    content = error.content or b""
    text = content.decode("utf-8", errors="replace") if isinstance(content, bytes) else str(content)

    reasons: set[str] = set()
    try:
        payload = json.loads(text)
        for item in payload.get("error", {}).get("errors", []):
            if "reason" in item:
                reasons.add(item["reason"])
    except (ValueError, AttributeError, TypeError):
        pass

    # Some payloads only carry the reason inside the message text.
    for reason in RATE_LIMIT_REASONS | AUTH_REASONS:
        if reason in text:
            reasons.add(reason)
    return reasons


def map_http_error(error: HttpError, resource: str) -> APIError | ChannelNotFoundError:
    """Translate a YouTube API HTTP error into a domain exception."""
    status = int(getattr(error.resp, "status", 0) or 0)
    reasons = _error_reasons(error)

    if status == 404:
        return ChannelNotFoundError(resource, error)
    if status == 429 or reasons & RATE_LIMIT_REASONS:
        return RateLimitError(f"YouTube API quota or rate limit exceeded ({status})", status, error)
    if status == 403 or reasons & AUTH_REASONS:
        return AuthenticationError(f"YouTube API rejected the request: {error}", error)
    return APIError(f"YouTube API error: {error}", status or None, error)


class YouTubeChannelDataSource(ChannelDataSource):
    """
    YouTube Data API v3 implementation of the channel data source.

    Every request is executed through the injected retry policy, so
    rate-limit handling lives in one place instead of at each call site.
    """

    def __init__(self, service_factory: YouTubeServiceFactory, retry_policy: RetryPolicy) -> None:
        """
        Initialize the YouTube channel data source.

        Args:
            service_factory: Builds the API service from the configured key
            retry_policy: Policy applied to every API request
        """
        self.service_factory = service_factory
        self.retry_policy = retry_policy

    async def _execute(self, request: Any, resource: str, description: str) -> dict[str, Any]:
        """Execute an API request with error mapping and retries."""

        def run() -> dict[str, Any]:
            try:
                return request.execute()
            except HttpError as e:
                raise map_http_error(e, resource) from e
            except (httplib2.HttpLib2Error, OSError) as e:
                raise TransportUnavailableError(
                    f"Network error while contacting YouTube API: {e}", e
                ) from e

        return await self.retry_policy.call(run, description)

    async def resolve_channel_id(self, handle: str) -> str:
        """Look up the channel ID for a handle via channel search."""
        service = self.service_factory.get_service()
        request = service.search().list(
            part="snippet",
            q=handle,
            type="channel",
            maxResults=1,
        )
        response = await self._execute(request, handle, f"channel search for @{handle}")

        items = response.get("items") or []
        if not items:
            raise ChannelNotFoundError(handle)

        channel_id = items[0]["snippet"]["channelId"]
        logger.debug(f"Resolved @{handle} to {channel_id}")
        return channel_id

    async def get_channel_summary(self, channel_id: str, handle: str) -> ChannelSummary:
        """Retrieve channel title, statistics and uploads playlist."""
        service = self.service_factory.get_service()
        request = service.channels().list(
            part="snippet,contentDetails,statistics",
            id=channel_id,
        )
        response = await self._execute(request, channel_id, f"channel info for @{handle}")

        items = response.get("items") or []
        if not items:
            raise ChannelNotFoundError(channel_id)

        item = items[0]
        snippet = item.get("snippet", {})
        statistics = item.get("statistics", {})
        uploads = item.get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")

        return ChannelSummary(
            channel_id=channel_id,
            handle=handle,
            display_name=snippet.get("title", handle),
            subscriber_count=parse_count(statistics.get("subscriberCount")),
            total_video_count=parse_count(statistics.get("videoCount")),
            uploads_playlist_id=uploads,
        )

    async def get_recent_uploads(
        self, channel: ChannelSummary, max_results: int = 20
    ) -> list[RawVideoRecord]:
        """Retrieve the newest uploads with statistics and durations."""
        if not channel.uploads_playlist_id:
            raise ChannelNotFoundError(channel.handle)

        service = self.service_factory.get_service()
        playlist_request = service.playlistItems().list(
            part="snippet",
            playlistId=channel.uploads_playlist_id,
            maxResults=min(max_results, MAX_PAGE_SIZE),
        )
        playlist_response = await self._execute(
            playlist_request, channel.uploads_playlist_id, f"uploads of @{channel.handle}"
        )

        video_ids = [
            item["snippet"]["resourceId"]["videoId"]
            for item in playlist_response.get("items", [])
        ][:max_results]
        if not video_ids:
            return []

        videos_request = service.videos().list(
            part="statistics,snippet,contentDetails",
            id=",".join(video_ids),
        )
        videos_response = await self._execute(
            videos_request, channel.handle, f"video details for @{channel.handle}"
        )

        records = []
        for item in videos_response.get("items", []):
            record = self._parse_video_item(item)
            if record:
                records.append(record)

        logger.debug(f"Fetched {len(records)} videos for @{channel.handle}")
        return records

    def _parse_video_item(self, item: dict[str, Any]) -> RawVideoRecord | None:
        """
        Parse a YouTube API video item into a raw record.

        Returns:
            The raw record, or None if required fields are missing
        """
        try:
            snippet = item["snippet"]
            statistics = item.get("statistics", {})
            thumbnails = snippet.get("thumbnails", {})

            return RawVideoRecord(
                video_id=item["id"],
                title=snippet["title"],
                view_count=statistics.get("viewCount"),
                like_count=statistics.get("likeCount"),
                published_at=snippet.get("publishedAt"),
                duration=item.get("contentDetails", {}).get("duration"),
                thumbnail_url=thumbnails.get("medium", {}).get("url"),
            )
        except KeyError as e:
            logger.warning(f"Skipping malformed video item {item.get('id', 'unknown')}: missing {e}")
            return None
