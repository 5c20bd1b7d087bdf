"""Template-driven title suggestions and the one-line success formula."""

from __future__ import annotations

from collections.abc import Sequence

from youtube_insights.domain.analysis.stats import StatsSummarizer
from youtube_insights.domain.exceptions import EmptyVideoSetError
from youtube_insights.domain.models.analysis import InsightSet, RecommendationSet
from youtube_insights.domain.models.video import VideoRecord

SUGGESTION_COUNT = 3

# Only the first template of each pattern is used.
TITLE_TEMPLATES: dict[str, tuple[str, ...]] = {
    "comparison": (
        "[Popular Topic A] vs [Popular Topic B]: The Real Winner",
        "I Tried [Topic A] and [Topic B] for 30 Days - Here's What Happened",
        "[Topic A] vs [Topic B]: Which Should You Choose in 2024?",
    ),
    "review": (
        "[New Product/Service]: Everything You Need to Know",
        "I Used [Product] for [Time Period] - Honest Review",
        "[Product] Review: Worth the Hype?",
    ),
    "first-look": (
        "First Look: [Trending Topic] Changes Everything",
        "I Got Early Access to [New Thing] - Here's My Take",
        "[New Release]: First Impressions After 24 Hours",
    ),
}

GENERIC_TEMPLATES: tuple[str, ...] = (
    "Why Everyone is Talking About [Trending Topic]",
    "The Truth About [Popular Subject] No One Tells You",
    "I Spent [Time Period] Testing [Topic] - Results Will Surprise You",
)

FORMULA_CLAUSES: dict[str, str] = {
    "comparison": "comparison content, ",
    "review": "honest reviews, ",
    "first-look": "trending/new topics, ",
}


class RecommendationGenerator:
    """Maps detected title patterns to suggestions and a success formula."""

    def generate(
        self, videos: Sequence[VideoRecord], insights: InsightSet
    ) -> RecommendationSet:
        """
        Build exactly three suggestions plus the success formula.

        Pattern-derived suggestions come first in priority order
        (comparison, review, first-look); generic templates fill the rest.

        Raises:
            EmptyVideoSetError: If ``videos`` is empty
        """
        if not videos:
            raise EmptyVideoSetError()

        detected = insights.patterns.detected
        suggestions = [
            TITLE_TEMPLATES[pattern][0] for pattern in detected if pattern in TITLE_TEMPLATES
        ][:SUGGESTION_COUNT]
        suggestions.extend(GENERIC_TEMPLATES[: SUGGESTION_COUNT - len(suggestions)])

        return RecommendationSet(
            title_suggestions=tuple(suggestions),
            success_formula=self.success_formula(videos, detected),
        )

    def success_formula(self, videos: Sequence[VideoRecord], detected: Sequence[str]) -> str:
        """Summarize detected patterns and typical length in one sentence."""
        formula = "Focus on "
        for pattern in detected:
            formula += FORMULA_CLAUSES.get(pattern, "")

        minutes = StatsSummarizer(videos).mean_whole_minutes()
        formula += f"maintain {minutes}-minute videos"
        return formula.replace(", maintain", " and maintain")
