"""Logging configuration for the command line application."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from youtube_insights.infrastructure.config.models import LoggingConfig


def configure_logging(config: LoggingConfig, verbose: bool = False, console: Console | None = None) -> None:
    """
    Install console and optional rotating file handlers on the package logger.

    Args:
        config: Logging settings
        verbose: Force DEBUG level on the console
        console: Rich console to log to (stderr by default)
    """
    package_logger = logging.getLogger("youtube_insights")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.DEBUG if verbose else config.level)
    package_logger.propagate = False

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(logging.DEBUG if verbose else config.level)
    package_logger.addHandler(console_handler)

    if config.file_path:
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(config.format))
        package_logger.addHandler(file_handler)
