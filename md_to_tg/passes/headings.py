"""Heading pass mapping Markdown headings to inline tags."""

import re
from dataclasses import dataclass
from typing import Optional

from .base import RewritePass


# Levels 4-6 have no counterpart and never match.
HEADING_RE = re.compile(r"^(#{1,3})[ \t]+(.+)$", re.MULTILINE)


@dataclass
class HeadingConfig:
    """Configuration for heading conversion."""
    # Tag names for heading levels 1, 2 and 3
    level_tags: tuple = ("b", "u", "i")


class HeadingPass(RewritePass):
    """Converts level 1-3 headings into bold, underline and italic lines.

    The chat dialect has no headings, so the level is carried by the tag:
    ``# Title`` becomes ``<b>Title</b>``, ``## Title`` becomes
    ``<u>Title</u>`` and ``### Title`` becomes ``<i>Title</i>``. An extra
    newline follows each converted heading.
    """

    def __init__(self, config: Optional[HeadingConfig] = None):
        """Initialize the heading pass.

        Args:
            config: Configuration options.

        Raises:
            ValueError: If the config does not name exactly three tags.
        """
        self.config = config or HeadingConfig()
        if len(self.config.level_tags) != 3:
            raise ValueError(
                f"Expected 3 heading tags, got {len(self.config.level_tags)}"
            )

    @property
    def name(self) -> str:
        return "heading"

    def apply(self, text: str) -> str:
        return HEADING_RE.sub(self._replace, text)

    def _replace(self, match: re.Match) -> str:
        level = len(match.group(1))
        tag = self.config.level_tags[level - 1]
        content = match.group(2).strip()
        return f"<{tag}>{content}</{tag}>\n"
