"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
import yaml

from youtube_insights.domain.models.analysis import (
    ChannelAnalysisResult,
    InsightSet,
    PatternFlags,
    RecommendationSet,
)
from youtube_insights.domain.models.channel import ChannelSummary
from youtube_insights.domain.models.video import Duration, RawVideoRecord, VideoRecord
from youtube_insights.infrastructure.config.models import AppConfig

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

VideoFactory = Callable[..., VideoRecord]


@pytest.fixture
def fixed_now() -> datetime:
    """The instant every test clock is frozen at."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """A clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def make_video() -> VideoFactory:
    """Factory for video records with sensible defaults."""

    def factory(
        title: str,
        views: int,
        minutes: int = 10,
        seconds: int = 0,
        days_ago: float | None = 60,
        video_id: str | None = None,
        likes: int = 0,
    ) -> VideoRecord:
        return VideoRecord(
            video_id=video_id or f"vid_{abs(hash((title, views))) % 10**8}",
            title=title,
            views=views,
            likes=likes,
            published_at=FIXED_NOW - timedelta(days=days_ago) if days_ago is not None else None,
            duration=Duration(minutes * 60 + seconds),
        )

    return factory


@pytest.fixture
def sample_channel() -> ChannelSummary:
    """Create a sample channel summary for testing."""
    return ChannelSummary(
        channel_id="UCTestChannelID000000001",
        handle="techreviews",
        display_name="Tech Reviews",
        subscriber_count=125000,
        total_video_count=340,
        uploads_playlist_id="UUTestChannelID000000001",
    )


@pytest.fixture
def sample_videos(make_video: VideoFactory) -> list[VideoRecord]:
    """Twelve videos with descending views from 1200 to 100."""
    return [
        make_video(f"Gadget Review Episode {i}", views=i * 100, video_id=f"video_{i:02d}")
        for i in range(12, 0, -1)
    ]


@pytest.fixture
def sample_raw_videos() -> list[RawVideoRecord]:
    """Raw records as a data source would report them."""
    return [
        RawVideoRecord(
            video_id="raw_1",
            title="Phone A vs Phone B: Honest Review!",
            view_count="15000",
            like_count="900",
            published_at="2024-05-28T15:00:00Z",
            duration="PT12M30S",
            thumbnail_url="https://i.ytimg.com/vi/raw_1/mqdefault.jpg",
        ),
        RawVideoRecord(
            video_id="raw_2",
            title="Laptop Review after 6 months",
            view_count=8000,
            like_count=None,
            published_at="2024-05-20T15:00:00Z",
            duration="PT8M5S",
        ),
        RawVideoRecord(
            video_id="raw_3",
            title="Unlisted teaser",
            view_count=None,
            published_at="2024-05-10T15:00:00Z",
            duration="PT45S",
        ),
    ]


@pytest.fixture
def make_analysis_result() -> Callable[..., ChannelAnalysisResult]:
    """Factory for hand-built analysis results."""

    def factory(
        handle: str = "techreviews",
        subscriber_count: int = 125000,
        average_views: float = 5000.0,
        videos: tuple[VideoRecord, ...] = (),
    ) -> ChannelAnalysisResult:
        channel = ChannelSummary(
            channel_id=f"UC{handle}",
            handle=handle,
            display_name=handle.title(),
            subscriber_count=subscriber_count,
            total_video_count=100,
        )
        return ChannelAnalysisResult(
            handle=handle,
            channel=channel,
            videos=videos,
            insights=InsightSet(
                performance_patterns=("Videos around 10 minutes tend to perform well for this channel",),
                content_themes=('Most successful content includes: "review"',),
                optimization_opportunities=(),
                average_views=average_views,
                top_videos=tuple(sorted(videos, key=lambda v: v.views, reverse=True))[:10],
                patterns=PatternFlags(review=True),
            ),
            recommendations=RecommendationSet(
                title_suggestions=(
                    "[New Product/Service]: Everything You Need to Know",
                    "Why Everyone is Talking About [Trending Topic]",
                    "The Truth About [Popular Subject] No One Tells You",
                ),
                success_formula="Focus on honest reviews and maintain 10-minute videos",
            ),
            analyzed_at=FIXED_NOW,
        )

    return factory


@pytest.fixture
def mock_data_source() -> AsyncMock:
    """Create a mock channel data source."""
    mock = AsyncMock()
    mock.resolve_channel_id.return_value = "UCTestChannelID000000001"
    mock.get_recent_uploads.return_value = []
    return mock


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Sample configuration data for testing."""
    return {
        "youtube_api": {"api_key": "test-api-key"},
        "analysis": {
            "max_videos_per_channel": 20,
            "recent_window_days": 30,
            "top_videos_count": 10,
        },
        "batch": {
            "channels_file": "youtube-channels.md",
            "pacing_seconds": 0.5,
        },
        "reports": {
            "output_dir": "reports",
            "single_report_filename": "youtube-research.md",
            "batch_report_filename": "youtube-batch-report.md",
            "channel_report_pattern": "youtube-{handle}-report.md",
        },
        "retry_settings": {
            "max_retries": 2,
            "base_delay": 2.0,
            "max_delay": 300,
        },
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "file_path": None,
            "max_file_size": 10485760,
            "backup_count": 5,
        },
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, sample_config_data: dict[str, Any]) -> Path:
    """Write the sample configuration to a temporary YAML file."""
    path = tmp_path / "config.yml"
    path.write_text(yaml.dump(sample_config_data), encoding="utf-8")
    return path


@pytest.fixture
def app_config(sample_config_data: dict[str, Any]) -> AppConfig:
    """Create an AppConfig instance for testing."""
    return AppConfig(**sample_config_data)
