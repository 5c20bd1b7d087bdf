"""Conversion of ISO 8601 video durations (``PT#H#M#S``) into :class:`Duration`."""

from __future__ import annotations

import re

from youtube_insights.domain.models.video import Duration

_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_duration(code: str | None) -> Duration:
    """
    Parse an ISO 8601 duration designator.

    Hours and minutes may be omitted; hours are folded into minutes for
    display. Anything that does not parse yields a zero duration, since
    duration only feeds advisory statistics.

    Args:
        code: Duration such as ``PT1H23M45S`` or ``PT45S``

    Returns:
        The parsed duration, or ``Duration(0)`` for malformed input
    """
    if not code:
        return Duration(0)

    match = _DURATION_PATTERN.fullmatch(code.strip())
    if not match:
        return Duration(0)

    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return Duration(hours * 3600 + minutes * 60 + seconds)
