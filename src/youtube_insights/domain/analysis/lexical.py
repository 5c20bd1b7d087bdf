"""Title keyword frequencies and structural title patterns."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from youtube_insights.domain.analysis.stats import sort_by_views
from youtube_insights.domain.models.analysis import PatternFlags
from youtube_insights.domain.models.video import VideoRecord

_NUMERIC = re.compile(r"[0-9]+")

MIN_TOKEN_LENGTH = 4
MIN_KEYWORD_OCCURRENCES = 2


def tokenize(title: str) -> list[str]:
    """Lower-cased whitespace tokens longer than 3 characters, numbers dropped."""
    return [
        token
        for token in title.lower().split()
        if len(token) >= MIN_TOKEN_LENGTH and not _NUMERIC.fullmatch(token)
    ]


def rank_keywords(titles: Iterable[str], limit: int) -> list[str]:
    """
    Most frequent tokens across titles that occur at least twice.

    Ties keep the order in which the tokens were first seen.
    """
    counts: Counter[str] = Counter()
    for title in titles:
        counts.update(tokenize(title))

    return [
        word
        for word, count in counts.most_common()
        if count >= MIN_KEYWORD_OCCURRENCES
    ][:limit]


class LexicalAnalyzer:
    """Keyword and pattern analysis over the titles of a video set."""

    def __init__(self, videos: Sequence[VideoRecord]) -> None:
        self.videos = tuple(videos)
        self._sorted = sort_by_views(self.videos)

    def common_keywords(self, limit: int = 8) -> list[str]:
        """Frequent keywords across the whole set."""
        return rank_keywords((v.title for v in self.videos), limit)

    def top_keywords(self, limit: int = 5, top_n: int = 10) -> list[str]:
        """Frequent keywords across the ``top_n`` most viewed videos."""
        return rank_keywords((v.title for v in self._sorted[:top_n]), limit)

    def detect_patterns(self, top_n: int = 5) -> PatternFlags:
        """
        Flag structural patterns in the ``top_n`` most viewed titles.

        Plain case-insensitive substring checks; each flag is independent.
        """
        titles = [v.title.lower() for v in self._sorted[:top_n]]
        return PatternFlags(
            comparison=any(" vs " in t for t in titles),
            review=any("review" in t for t in titles),
            first_look=any("first" in t or "new" in t for t in titles),
            engaging_punctuation=any("!" in t or "?" in t for t in titles),
        )
