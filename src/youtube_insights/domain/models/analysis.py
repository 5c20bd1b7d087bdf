"""Analysis result models produced by the insight and recommendation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from youtube_insights.domain.models.channel import ChannelSummary
from youtube_insights.domain.models.video import VideoRecord


@dataclass(frozen=True)
class PatternFlags:
    """Structural title patterns detected among a channel's top videos."""

    comparison: bool = False
    review: bool = False
    first_look: bool = False
    engaging_punctuation: bool = False

    @property
    def detected(self) -> tuple[str, ...]:
        """Names of the detected patterns, in priority order."""
        names = (
            ("comparison", self.comparison),
            ("review", self.review),
            ("first-look", self.first_look),
            ("engaging-punctuation", self.engaging_punctuation),
        )
        return tuple(name for name, flag in names if flag)


@dataclass(frozen=True)
class InsightSet:
    """
    Human-readable insights about a channel plus the scalars they derive from.

    ``top_videos`` always holds ``min(10, len(videos))`` entries sorted by
    descending views, ties kept in their original order.
    """

    performance_patterns: tuple[str, ...] = ()
    content_themes: tuple[str, ...] = ()
    optimization_opportunities: tuple[str, ...] = ()
    average_views: float = 0.0
    top_videos: tuple[VideoRecord, ...] = ()
    patterns: PatternFlags = field(default_factory=PatternFlags)


@dataclass(frozen=True)
class RecommendationSet:
    """Exactly three title suggestions and a one-line success formula."""

    title_suggestions: tuple[str, ...]
    success_formula: str

    def __post_init__(self) -> None:
        if len(self.title_suggestions) != 3:
            raise ValueError(
                f"Expected exactly 3 title suggestions, got {len(self.title_suggestions)}"
            )


@dataclass(frozen=True)
class ChannelAnalysisResult:
    """
    Complete analysis of one channel.

    Created once per channel per run and never mutated afterwards; consumed
    by the renderers and by batch aggregation.
    """

    handle: str
    channel: ChannelSummary
    videos: tuple[VideoRecord, ...]
    insights: InsightSet
    recommendations: RecommendationSet
    analyzed_at: datetime

    @property
    def top_video(self) -> VideoRecord | None:
        """The most viewed video, if any."""
        return self.insights.top_videos[0] if self.insights.top_videos else None

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"{self.channel.display_name} (@{self.handle}): "
            f"{len(self.videos)} videos, avg {self.insights.average_views:.0f} views"
        )
