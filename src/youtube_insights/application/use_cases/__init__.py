"""Use case implementations for application workflows."""

from youtube_insights.application.use_cases.validate_config import ValidateConfigUseCase

__all__ = [
    "ValidateConfigUseCase",
]
