"""Rounding helpers shared by the insight and recommendation builders."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity (2.5 -> 3)."""
    return math.floor(value + 0.5)


def format_view_count(count: float | None) -> str:
    """Format a view count in human-readable form (``1.2K``, ``3.4M``)."""
    if count is None:
        return "0"

    count = round_half_up(count)
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M"
    elif count >= 1000:
        return f"{count / 1000:.1f}K"
    return str(count)
