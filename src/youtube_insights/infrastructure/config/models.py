"""Pydantic configuration models for application settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RetrySettings(BaseModel):
    """Configuration for retrying rate-limited API calls."""

    model_config = ConfigDict(extra="forbid")

    max_retries: int = Field(default=2, ge=0, le=10, description="Retries after a rate-limit failure")
    base_delay: float = Field(default=2.0, ge=0.0, le=60.0, description="Delay unit; retry k waits k * base_delay")
    max_delay: float = Field(default=300.0, ge=0.0, description="Maximum delay between retries in seconds")


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string for the file handler"
    )
    file_path: str | None = Field(default=None, description="Log file path (None for console only)")
    max_file_size: int = Field(default=10485760, ge=1024, description="Max log file size in bytes (10MB)")
    backup_count: int = Field(default=5, ge=1, description="Number of backup log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


class AnalysisSettings(BaseModel):
    """Configuration for single-channel analysis."""

    model_config = ConfigDict(extra="forbid")

    max_videos_per_channel: int = Field(default=20, ge=1, le=50, description="Recent uploads analyzed per channel")
    recent_window_days: int = Field(default=30, ge=1, le=365, description="Window for the recent upload count")
    top_videos_count: int = Field(default=10, ge=1, le=50, description="Number of top videos ranked")


class BatchSettings(BaseModel):
    """Configuration for batch runs."""

    model_config = ConfigDict(extra="forbid")

    channels_file: str = Field(default="youtube-channels.md", description="Markdown channel list")
    pacing_seconds: float = Field(default=1.0, ge=0.0, le=60.0, description="Delay between channels")


class ReportSettings(BaseModel):
    """Configuration for markdown report output."""

    model_config = ConfigDict(extra="forbid")

    output_dir: str = Field(default=".", description="Directory reports are written to")
    single_report_filename: str = Field(default="youtube-research.md")
    batch_report_filename: str = Field(default="youtube-batch-report.md")
    channel_report_pattern: str = Field(
        default="youtube-{handle}-report.md",
        description="File name pattern for per-channel reports in batch mode",
    )

    @field_validator("channel_report_pattern")
    @classmethod
    def validate_channel_report_pattern(cls, v: str) -> str:
        """Require the ``{handle}`` placeholder."""
        if "{handle}" not in v:
            raise ValueError("channel_report_pattern must contain '{handle}'")
        return v


class YouTubeAPIConfig(BaseModel):
    """Configuration for YouTube Data API access."""

    model_config = ConfigDict(extra="forbid")

    api_key: str | None = Field(default=None, description="YouTube Data API v3 key")

    @field_validator("api_key")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat an empty substitution as a missing key."""
        if v is not None and not v.strip():
            return None
        return v


class AppConfig(BaseModel):
    """
    Root of the YAML configuration.

    Every section is optional and falls back to its defaults; unknown keys
    are rejected.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    youtube_api: YouTubeAPIConfig = Field(default_factory=YouTubeAPIConfig)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    batch: BatchSettings = Field(default_factory=BatchSettings)
    reports: ReportSettings = Field(default_factory=ReportSettings)

    # Infrastructure settings
    retry_settings: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.model_dump()
