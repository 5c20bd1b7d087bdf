"""Batch run models for tracking multi-channel analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from youtube_insights.domain.models.analysis import ChannelAnalysisResult


class BatchState(str, Enum):
    """Lifecycle of a batch run."""

    LOADING = "loading"
    PROCESSING = "processing"
    AGGREGATING = "aggregating"
    DONE = "done"


@dataclass(frozen=True)
class ChannelFailure:
    """A channel that could not be analyzed, with the failure kind and detail."""

    handle: str
    reason: str
    detail: str = ""

    def __str__(self) -> str:
        """Human-readable string representation."""
        detail_part = f" - {self.detail}" if self.detail else ""
        return f"@{self.handle}: {self.reason}{detail_part}"


@dataclass(frozen=True)
class BatchAggregate:
    """Cross-channel statistics over the successfully analyzed channels."""

    channel_count: int
    total_subscribers: int
    mean_average_views: float
    total_videos_analyzed: int


@dataclass
class BatchRunResult:
    """
    Result of analyzing a list of channels.

    Built incrementally while the orchestrator works through the list and
    final once every channel has been attempted.
    """

    succeeded: list[ChannelAnalysisResult] = field(default_factory=list)
    failed: list[ChannelFailure] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    @property
    def attempted(self) -> int:
        """Number of channels attempted so far."""
        return len(self.succeeded) + len(self.failed)

    @property
    def has_errors(self) -> bool:
        """Whether any channel failed."""
        return bool(self.failed)

    @property
    def is_completed(self) -> bool:
        """Whether every channel has been attempted."""
        return self.completed_at is not None

    @property
    def processing_time_seconds(self) -> float:
        """Elapsed time of the run, zero until completed."""
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds()

    @property
    def aggregate(self) -> BatchAggregate | None:
        """Summary statistics over ``succeeded``; ``None`` when nothing succeeded."""
        if not self.succeeded:
            return None

        return BatchAggregate(
            channel_count=len(self.succeeded),
            total_subscribers=sum(r.channel.subscriber_count for r in self.succeeded),
            mean_average_views=(
                sum(r.insights.average_views for r in self.succeeded) / len(self.succeeded)
            ),
            total_videos_analyzed=sum(len(r.videos) for r in self.succeeded),
        )

    def add_success(self, result: ChannelAnalysisResult) -> None:
        """Record a successfully analyzed channel."""
        self.succeeded.append(result)

    def add_failure(self, failure: ChannelFailure) -> None:
        """Record a channel that failed."""
        self.failed.append(failure)

    def complete(self) -> None:
        """Mark the batch run as completed."""
        self.completed_at = datetime.now()

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"BatchRunResult(succeeded={len(self.succeeded)}, "
            f"failed={len(self.failed)}, time={self.processing_time_seconds:.1f}s)"
        )
