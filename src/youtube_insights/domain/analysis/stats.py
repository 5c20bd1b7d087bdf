"""Descriptive statistics over a channel's analyzed video set."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone

from youtube_insights.domain.analysis.rounding import round_half_up
from youtube_insights.domain.exceptions import EmptyVideoSetError
from youtube_insights.domain.models.video import VideoRecord

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: the current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def sort_by_views(videos: Sequence[VideoRecord]) -> list[VideoRecord]:
    """Sort videos by descending views, keeping the original order among ties."""
    return sorted(videos, key=lambda v: v.views, reverse=True)


class StatsSummarizer:
    """
    Aggregate statistics over an immutable video set.

    Every figure is a plain descriptive aggregate. The only time-dependent
    figure is :meth:`recent_upload_count`, which measures against the
    injected clock's "now" at evaluation time.
    """

    def __init__(self, videos: Sequence[VideoRecord], clock: Clock = utc_now) -> None:
        self.videos = tuple(videos)
        self.clock = clock
        self._sorted = sort_by_views(self.videos)

    def _require_videos(self) -> None:
        if not self.videos:
            raise EmptyVideoSetError()

    def average_views(self) -> float:
        """Arithmetic mean of views across the set."""
        self._require_videos()
        return sum(v.views for v in self.videos) / len(self.videos)

    def top_videos(self, n: int = 10) -> tuple[VideoRecord, ...]:
        """The ``min(n, len)`` most viewed videos; empty for an empty set."""
        return tuple(self._sorted[:n])

    def top_average_views(self, n: int = 10) -> float:
        """
        Mean views of the top ``n`` videos.

        Sets smaller than ``n`` use every video, so for small channels this
        equals :meth:`average_views`.
        """
        self._require_videos()
        top = self.top_videos(n)
        return sum(v.views for v in top) / len(top)

    def mean_duration_minutes(self) -> float | None:
        """Mean duration in minutes over videos with a non-zero duration."""
        durations = [v.duration.in_minutes for v in self.videos if v.duration_seconds > 0]
        if not durations:
            return None
        return sum(durations) / len(durations)

    def duration_correlation_note(self) -> str | None:
        """Qualitative note about typical video length, if any duration is known."""
        mean_minutes = self.mean_duration_minutes()
        if mean_minutes is None:
            return None
        return (
            f"Videos around {round_half_up(mean_minutes)} minutes "
            "tend to perform well for this channel"
        )

    def recent_upload_count(self, window_days: int = 30, now: datetime | None = None) -> int:
        """Count of videos published within ``window_days`` of now."""
        now = now or self.clock()
        window = timedelta(days=window_days)
        count = 0
        for video in self.videos:
            if video.published_at is None:
                continue
            published_at = video.published_at
            if published_at.tzinfo is None and now.tzinfo is not None:
                published_at = published_at.replace(tzinfo=timezone.utc)
            if now - published_at <= window:
                count += 1
        return count

    def underperformer_count(self, threshold: float = 0.5) -> int:
        """Among the bottom 5 videos by views, how many fall below ``threshold`` x average."""
        cutoff = self.average_views() * threshold
        return sum(1 for v in self._sorted[-5:] if v.views < cutoff)

    def mean_whole_minutes(self) -> int:
        """Half-up rounded mean of whole-minute durations over the full set."""
        self._require_videos()
        return round_half_up(sum(v.duration.minutes for v in self.videos) / len(self.videos))
