"""Single-channel analysis: raw records in, :class:`ChannelAnalysisResult` out."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from youtube_insights.domain.analysis.duration import parse_duration
from youtube_insights.domain.analysis.insights import InsightComposer
from youtube_insights.domain.analysis.recommendations import RecommendationGenerator
from youtube_insights.domain.analysis.stats import Clock, utc_now
from youtube_insights.domain.exceptions import EmptyVideoSetError
from youtube_insights.domain.models.analysis import ChannelAnalysisResult
from youtube_insights.domain.models.channel import ChannelSummary
from youtube_insights.domain.models.video import RawVideoRecord, VideoRecord

logger = logging.getLogger(__name__)


def parse_count(value: str | int | None) -> int:
    """Parse a count reported as text or number; invalid or negative gives 0."""
    if value is None:
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError):
        return 0
    return max(count, 0)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp (``Z`` suffix accepted) as an aware datetime."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def normalize_video(raw: RawVideoRecord) -> VideoRecord:
    """Convert one raw record into a :class:`VideoRecord`."""
    return VideoRecord(
        video_id=raw.video_id,
        title=raw.title,
        views=parse_count(raw.view_count),
        likes=parse_count(raw.like_count),
        published_at=parse_timestamp(raw.published_at),
        duration=parse_duration(raw.duration),
        thumbnail_url=raw.thumbnail_url,
    )


def normalize_videos(raw_records: Iterable[RawVideoRecord]) -> tuple[VideoRecord, ...]:
    """
    Build the analyzed video set.

    Videos without recorded views are treated as missing statistics and
    dropped; the remaining order is preserved.
    """
    videos = []
    for raw in raw_records:
        video = normalize_video(raw)
        if video.views == 0:
            logger.debug(f"Skipping video without view data: {raw.video_id}")
            continue
        videos.append(video)
    return tuple(videos)


def analyze_videos(
    handle: str,
    channel: ChannelSummary,
    videos: Sequence[VideoRecord],
    clock: Clock = utc_now,
    composer: InsightComposer | None = None,
    generator: RecommendationGenerator | None = None,
) -> ChannelAnalysisResult:
    """
    Run insight composition and recommendation generation over ``videos``.

    Raises:
        EmptyVideoSetError: If there is nothing to analyze
    """
    if not videos:
        raise EmptyVideoSetError(handle)

    videos = tuple(videos)
    composer = composer or InsightComposer(clock=clock)
    generator = generator or RecommendationGenerator()

    insights = composer.compose(videos)
    recommendations = generator.generate(videos, insights)

    return ChannelAnalysisResult(
        handle=handle,
        channel=channel,
        videos=videos,
        insights=insights,
        recommendations=recommendations,
        analyzed_at=clock(),
    )
