"""Composition of human-readable insights from statistics and title analysis."""

from __future__ import annotations

from collections.abc import Sequence

from youtube_insights.domain.analysis.lexical import LexicalAnalyzer
from youtube_insights.domain.analysis.rounding import format_view_count, round_half_up
from youtube_insights.domain.analysis.stats import Clock, StatsSummarizer, utc_now
from youtube_insights.domain.exceptions import EmptyVideoSetError
from youtube_insights.domain.models.analysis import InsightSet
from youtube_insights.domain.models.video import VideoRecord

RECENT_UPLOADS_THRESHOLD = 3
STANDOUT_VIDEO_FACTOR = 5
UNDERPERFORMER_THRESHOLD = 3
MIN_VIDEOS_FOR_UNDERPERFORMERS = 10
TUTORIAL_KEYWORDS = ("tutorial", "how")


class InsightComposer:
    """
    Turns a video set into an :class:`InsightSet`.

    Each rule is evaluated on its own and contributes a line only when its
    condition holds; the lists are never padded. Given the same videos and
    the same clock instant, the result is identical field for field.
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        top_videos_count: int = 10,
        recent_window_days: int = 30,
    ) -> None:
        self.clock = clock
        self.top_videos_count = top_videos_count
        self.recent_window_days = recent_window_days

    def compose(self, videos: Sequence[VideoRecord]) -> InsightSet:
        """
        Build the insight set for a non-empty video set.

        Raises:
            EmptyVideoSetError: If ``videos`` is empty
        """
        if not videos:
            raise EmptyVideoSetError()

        stats = StatsSummarizer(videos, clock=self.clock)
        lexical = LexicalAnalyzer(videos)
        common_keywords = lexical.common_keywords()

        return InsightSet(
            performance_patterns=tuple(self._performance_patterns(stats)),
            content_themes=tuple(self._content_themes(common_keywords, lexical)),
            optimization_opportunities=tuple(
                self._optimization_opportunities(stats, common_keywords)
            ),
            average_views=stats.average_views(),
            top_videos=stats.top_videos(self.top_videos_count),
            patterns=lexical.detect_patterns(),
        )

    def _performance_patterns(self, stats: StatsSummarizer) -> list[str]:
        patterns = []

        average = stats.average_views()
        top_average = stats.top_average_views(self.top_videos_count)
        if top_average > average:
            lift = round_half_up((top_average / average - 1) * 100)
            patterns.append(
                f"Top videos average {format_view_count(top_average)} views vs "
                f"{format_view_count(average)} channel average (+{lift}%)"
            )

        duration_note = stats.duration_correlation_note()
        if duration_note:
            patterns.append(duration_note)

        recent = stats.recent_upload_count(self.recent_window_days)
        if recent >= RECENT_UPLOADS_THRESHOLD:
            patterns.append(
                f"Recent upload frequency: {recent} videos in the last "
                f"{self.recent_window_days} days"
            )

        return patterns

    def _content_themes(self, common_keywords: list[str], lexical: LexicalAnalyzer) -> list[str]:
        themes = []

        if common_keywords:
            quoted = '", "'.join(common_keywords[:5])
            themes.append(f'Most successful content includes: "{quoted}"')

        top_keywords = lexical.top_keywords(top_n=self.top_videos_count)
        if top_keywords:
            quoted = '", "'.join(top_keywords)
            themes.append(f'High-performing keywords: "{quoted}"')

        return themes

    def _optimization_opportunities(
        self, stats: StatsSummarizer, common_keywords: list[str]
    ) -> list[str]:
        opportunities = []
        average = stats.average_views()

        best = stats.top_videos(1)[0]
        if best.views > average * STANDOUT_VIDEO_FACTOR:
            opportunities.append(
                f"Consider replicating elements from your top video ({best.title[:50]}...)"
            )

        if len(stats.videos) >= MIN_VIDEOS_FOR_UNDERPERFORMERS:
            underperformers = stats.underperformer_count()
            if underperformers >= UNDERPERFORMER_THRESHOLD:
                opportunities.append(
                    f"{underperformers} recent videos underperformed - "
                    "consider analyzing successful patterns"
                )

        if any(word in common_keywords for word in TUTORIAL_KEYWORDS):
            opportunities.append(
                "Tutorial content detected - ensure clear value proposition in titles"
            )

        return opportunities
