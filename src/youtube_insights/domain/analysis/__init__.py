"""Pure analysis engine: statistics, title analysis, insights and recommendations."""

from youtube_insights.domain.analysis.duration import parse_duration
from youtube_insights.domain.analysis.insights import InsightComposer
from youtube_insights.domain.analysis.lexical import LexicalAnalyzer
from youtube_insights.domain.analysis.pipeline import analyze_videos, normalize_videos
from youtube_insights.domain.analysis.recommendations import RecommendationGenerator
from youtube_insights.domain.analysis.stats import StatsSummarizer

__all__ = [
    "InsightComposer",
    "LexicalAnalyzer",
    "RecommendationGenerator",
    "StatsSummarizer",
    "analyze_videos",
    "normalize_videos",
    "parse_duration",
]
