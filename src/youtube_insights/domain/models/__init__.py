"""Domain models for the YouTube Insights application."""

from youtube_insights.domain.models.analysis import (
    ChannelAnalysisResult,
    InsightSet,
    PatternFlags,
    RecommendationSet,
)
from youtube_insights.domain.models.channel import ChannelEntry, ChannelSummary
from youtube_insights.domain.models.processing import (
    BatchAggregate,
    BatchRunResult,
    BatchState,
    ChannelFailure,
)
from youtube_insights.domain.models.video import Duration, RawVideoRecord, VideoRecord

__all__ = [
    "BatchAggregate",
    "BatchRunResult",
    "BatchState",
    "ChannelAnalysisResult",
    "ChannelEntry",
    "ChannelFailure",
    "ChannelSummary",
    "Duration",
    "InsightSet",
    "PatternFlags",
    "RawVideoRecord",
    "RecommendationSet",
    "VideoRecord",
]
