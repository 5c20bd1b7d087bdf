"""Markdown channel list reader for batch runs."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from youtube_insights.domain.exceptions import ConfigurationError
from youtube_insights.domain.models.channel import ChannelEntry
from youtube_insights.domain.services.channel_list_provider import ChannelListProvider

logger = logging.getLogger(__name__)

# "- @handle - Description", with the "@" and the description optional
_ENTRY_PATTERN = re.compile(r"^\s*-\s*@?([^\s-]+)(?:\s*-\s*(.*))?$")

EXAMPLE_CHANNEL_LIST = """# YouTube Channels to Analyze

## Tech Channels
- @mkbhd - Marques Brownlee
- @PeterYangYT - Peter Yang

## Educational
- @3Blue1Brown - Grant Sanderson"""


def parse_channel_list(content: str) -> list[ChannelEntry]:
    """
    Parse channel entries from markdown text.

    Lines that are not list items (headings, prose) are ignored. Order and
    duplicates are preserved.
    """
    channels = []
    for line in content.splitlines():
        match = _ENTRY_PATTERN.match(line.rstrip())
        if match:
            handle, description = match.groups()
            channels.append(ChannelEntry(handle=handle, description=(description or "").strip()))
    return channels


class MarkdownChannelListProvider(ChannelListProvider):
    """Loads the batch channel list from a markdown file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_channels(self) -> list[ChannelEntry]:
        """Read and parse the channel list file."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"{self.path} not found. Create a file with this format:\n\n"
                f"{EXAMPLE_CHANNEL_LIST}",
                e,
            ) from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read channel list {self.path}: {e}", e) from e

        channels = parse_channel_list(content)
        logger.info(f"Loaded {len(channels)} channels from {self.path}")
        return channels
