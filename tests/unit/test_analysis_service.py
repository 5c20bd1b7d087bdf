"""Tests for the single-channel analysis service."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from youtube_insights.application.services.analysis_service import (
    ChannelAnalysisService,
    normalize_handle,
)
from youtube_insights.domain.exceptions import ChannelNotFoundError, EmptyVideoSetError
from youtube_insights.domain.models.video import RawVideoRecord


class TestChannelAnalysisService:
    """Tests for ChannelAnalysisService."""

    @pytest.fixture
    def analysis_service(self, mock_data_source: AsyncMock, fixed_clock) -> ChannelAnalysisService:
        """Create an analysis service instance for testing."""
        return ChannelAnalysisService(data_source=mock_data_source, max_videos=20, clock=fixed_clock)

    @pytest.mark.asyncio
    async def test_analyze_channel_success(
        self,
        analysis_service: ChannelAnalysisService,
        mock_data_source: AsyncMock,
        sample_channel,
        sample_raw_videos,
        fixed_now,
    ) -> None:
        """Test a full analysis from handle to result."""
        # Setup mocks
        mock_data_source.get_channel_summary.return_value = sample_channel
        mock_data_source.get_recent_uploads.return_value = sample_raw_videos

        # Execute
        result = await analysis_service.analyze_channel("@techreviews")

        # Verify
        assert result.handle == "techreviews"
        assert result.channel == sample_channel
        assert [v.video_id for v in result.videos] == ["raw_1", "raw_2"]
        assert result.analyzed_at == fixed_now
        assert len(result.recommendations.title_suggestions) == 3

        mock_data_source.resolve_channel_id.assert_called_once_with("techreviews")
        mock_data_source.get_channel_summary.assert_called_once_with(
            "UCTestChannelID000000001", "techreviews"
        )
        mock_data_source.get_recent_uploads.assert_called_once_with(sample_channel, 20)

    @pytest.mark.asyncio
    async def test_analyze_channel_not_found(
        self,
        analysis_service: ChannelAnalysisService,
        mock_data_source: AsyncMock,
    ) -> None:
        """Test lookup failures propagate to the caller."""
        mock_data_source.resolve_channel_id.side_effect = ChannelNotFoundError("nobody")

        with pytest.raises(ChannelNotFoundError):
            await analysis_service.analyze_channel("nobody")

        mock_data_source.get_recent_uploads.assert_not_called()

    @pytest.mark.asyncio
    async def test_analyze_channel_without_view_data(
        self,
        analysis_service: ChannelAnalysisService,
        mock_data_source: AsyncMock,
        sample_channel,
    ) -> None:
        """Test a channel whose uploads all lack views cannot be analyzed."""
        mock_data_source.get_channel_summary.return_value = sample_channel
        mock_data_source.get_recent_uploads.return_value = [
            RawVideoRecord("a", "Premiere soon", view_count=None),
            RawVideoRecord("b", "Members only", view_count="0"),
        ]

        with pytest.raises(EmptyVideoSetError) as exc_info:
            await analysis_service.analyze_channel("techreviews")

        assert exc_info.value.channel == "techreviews"

    @pytest.mark.asyncio
    async def test_analyze_channel_without_uploads(
        self,
        analysis_service: ChannelAnalysisService,
        mock_data_source: AsyncMock,
        sample_channel,
    ) -> None:
        """Test a channel with no uploads cannot be analyzed."""
        mock_data_source.get_channel_summary.return_value = sample_channel
        mock_data_source.get_recent_uploads.return_value = []

        with pytest.raises(EmptyVideoSetError):
            await analysis_service.analyze_channel("techreviews")


@pytest.mark.parametrize(
    ("handle", "expected"),
    [("@mkbhd", "mkbhd"), ("mkbhd", "mkbhd"), ("  @mkbhd ", "mkbhd"), ("@ mkbhd", "mkbhd")],
)
def test_normalize_handle(handle: str, expected: str) -> None:
    """Test whitespace and the leading @ are stripped."""
    assert normalize_handle(handle) == expected
