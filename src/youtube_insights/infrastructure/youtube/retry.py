"""Retry policy for rate-limited YouTube API calls."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from youtube_insights.domain.exceptions import RateLimitError
from youtube_insights.infrastructure.config.models import RetrySettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy:
    """
    Bounded retry with linear-growth backoff for rate-limit failures.

    Only :class:`RateLimitError` is retried. Retry ``k`` (1-based) waits
    ``k * base_delay`` seconds, capped at ``max_delay``. Every other error
    propagates on first occurrence.
    """

    def __init__(
        self,
        max_retries: int = 2,
        base_delay: float = 2.0,
        max_delay: float = 300.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls,
        settings: RetrySettings,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> RetryPolicy:
        """Build a policy from configuration."""
        return cls(
            max_retries=settings.max_retries,
            base_delay=settings.base_delay,
            max_delay=settings.max_delay,
            sleep=sleep,
        )

    def delay_for(self, retry: int) -> float:
        """Backoff before the given retry (1-based)."""
        return min(retry * self.base_delay, self.max_delay)

    async def call(self, operation: Callable[[], T], description: str = "API call") -> T:
        """
        Run ``operation``, retrying it after rate-limit failures.

        Raises:
            RateLimitError: If the call is still rate limited after all retries
        """
        retry = 0
        while True:
            try:
                return operation()
            except RateLimitError as e:
                if retry >= self.max_retries:
                    logger.error(f"{description} still rate limited after {retry} retries")
                    raise
                retry += 1
                delay = self.delay_for(retry)
                logger.warning(
                    f"Rate limit hit during {description}, waiting {delay:.1f}s "
                    f"before retry {retry}/{self.max_retries}: {e}"
                )
                await self._sleep(delay)
