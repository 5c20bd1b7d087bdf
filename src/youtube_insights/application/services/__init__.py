"""Application service implementations."""

from youtube_insights.application.services.analysis_service import ChannelAnalysisService
from youtube_insights.application.services.batch_service import BatchOrchestrator

__all__ = [
    "BatchOrchestrator",
    "ChannelAnalysisService",
]
