"""Video domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Duration:
    """Elapsed playing time of a video, folded into minutes and seconds."""

    total_seconds: int = 0

    def __post_init__(self) -> None:
        if self.total_seconds < 0:
            raise ValueError("Duration cannot be negative")

    @property
    def minutes(self) -> int:
        """Whole minutes, with hours folded in."""
        return self.total_seconds // 60

    @property
    def seconds(self) -> int:
        """Remaining seconds after whole minutes."""
        return self.total_seconds % 60

    @property
    def in_minutes(self) -> float:
        """Duration as fractional minutes."""
        return self.minutes + self.seconds / 60

    @property
    def display(self) -> str:
        """Display form, e.g. ``83:45``."""
        return f"{self.minutes}:{self.seconds:02d}"

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class RawVideoRecord:
    """
    A video as reported by the data source, before normalization.

    Counts may arrive as text or numbers and the duration is still the
    ISO 8601 designator reported by the API (e.g. ``PT4M13S``).
    """

    video_id: str
    title: str
    view_count: str | int | None = None
    like_count: str | int | None = None
    published_at: str | None = None
    duration: str | None = None
    thumbnail_url: str | None = None


@dataclass(frozen=True)
class VideoRecord:
    """
    One published video with the statistics used for analysis.

    This is an immutable domain entity; analysis never mutates it.
    """

    video_id: str
    title: str
    views: int = 0
    likes: int = 0
    published_at: datetime | None = None
    duration: Duration = field(default_factory=Duration)
    thumbnail_url: str | None = None

    def __post_init__(self) -> None:
        """Validate video data after initialization."""
        if not self.video_id:
            raise ValueError("Video ID cannot be empty")
        if self.views < 0:
            raise ValueError("View count cannot be negative")
        if self.likes < 0:
            raise ValueError("Like count cannot be negative")

    @property
    def duration_seconds(self) -> int:
        return self.duration.total_seconds

    @property
    def url(self) -> str:
        """Watch URL for the video."""
        return f"https://youtube.com/watch?v={self.video_id}"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"VideoRecord(id={self.video_id}, title='{self.title[:50]}...', views={self.views})"
