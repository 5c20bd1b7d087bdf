"""Tests for the rate-limit retry policy."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from youtube_insights.domain.exceptions import RateLimitError, TransportUnavailableError
from youtube_insights.infrastructure.config.models import RetrySettings
from youtube_insights.infrastructure.youtube.retry import RetryPolicy


class TestRetryPolicy:
    """Tests for RetryPolicy."""

    @pytest.fixture
    def mock_sleep(self) -> AsyncMock:
        """Create a sleep that returns immediately."""
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_success_without_retry(self, mock_sleep: AsyncMock) -> None:
        """Test a successful call runs once."""
        operation = Mock(return_value={"items": []})

        result = await RetryPolicy(sleep=mock_sleep).call(operation)

        assert result == {"items": []}
        operation.assert_called_once()
        mock_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rate_limit_retried_with_linear_backoff(self, mock_sleep: AsyncMock) -> None:
        """Test retry k waits k times the base delay."""
        operation = Mock(side_effect=[RateLimitError(), RateLimitError(), "ok"])

        result = await RetryPolicy(max_retries=2, base_delay=2.0, sleep=mock_sleep).call(operation)

        assert result == "ok"
        assert operation.call_count == 3
        assert [c.args[0] for c in mock_sleep.await_args_list] == [2.0, 4.0]

    @pytest.mark.asyncio
    async def test_rate_limit_exhausted(self, mock_sleep: AsyncMock) -> None:
        """Test the last rate-limit error propagates after all retries."""
        operation = Mock(side_effect=RateLimitError("quota exceeded"))

        with pytest.raises(RateLimitError, match="quota exceeded"):
            await RetryPolicy(max_retries=2, sleep=mock_sleep).call(operation)

        assert operation.call_count == 3
        assert mock_sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_other_errors_not_retried(self, mock_sleep: AsyncMock) -> None:
        """Test non rate-limit failures propagate on first occurrence."""
        operation = Mock(side_effect=TransportUnavailableError())

        with pytest.raises(TransportUnavailableError):
            await RetryPolicy(sleep=mock_sleep).call(operation)

        operation.assert_called_once()
        mock_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_zero_retries(self, mock_sleep: AsyncMock) -> None:
        """Test a policy without retries fails immediately."""
        operation = Mock(side_effect=RateLimitError())

        with pytest.raises(RateLimitError):
            await RetryPolicy(max_retries=0, sleep=mock_sleep).call(operation)

        operation.assert_called_once()

    def test_delay_capped(self) -> None:
        """Test backoff never exceeds the maximum delay."""
        policy = RetryPolicy(max_retries=5, base_delay=10.0, max_delay=25.0)

        assert [policy.delay_for(k) for k in range(1, 5)] == [10.0, 20.0, 25.0, 25.0]

    def test_negative_retries_rejected(self) -> None:
        """Test the retry count must not be negative."""
        with pytest.raises(ValueError):
            RetryPolicy(max_retries=-1)

    def test_from_settings(self) -> None:
        """Test building the policy from configuration."""
        policy = RetryPolicy.from_settings(RetrySettings(max_retries=4, base_delay=1.5, max_delay=30))

        assert policy.max_retries == 4
        assert policy.base_delay == 1.5
        assert policy.max_delay == 30.0
