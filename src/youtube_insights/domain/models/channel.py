"""Channel domain models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelSummary:
    """
    Channel-level context reported by the data source.

    Supplied externally; the analysis engine only reads it.
    """

    channel_id: str
    handle: str
    display_name: str
    subscriber_count: int = 0
    total_video_count: int = 0
    uploads_playlist_id: str | None = None

    def __post_init__(self) -> None:
        """Validate channel data after initialization."""
        if not self.channel_id:
            raise ValueError("Channel ID cannot be empty")
        if not self.handle:
            raise ValueError("Channel handle cannot be empty")

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"ChannelSummary(name='{self.display_name}', handle=@{self.handle})"


@dataclass(frozen=True)
class ChannelEntry:
    """One line of the batch channel list: a handle and a free-text description."""

    handle: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.handle:
            raise ValueError("Channel handle cannot be empty")
        if not self.description:
            object.__setattr__(self, "description", self.handle)
