"""Line-oriented list and quote passes."""

from dataclasses import dataclass
from typing import Optional

from .base import RewritePass


LIST_MARKERS = ("- ", "* ")
QUOTE_MARKER = "> "


@dataclass
class ListConfig:
    """Configuration for list conversion."""
    # Glyph that replaces the "- " / "* " marker
    bullet: str = "•"
    # Insert a blank line between a list and the line that follows it
    separate_lists: bool = True


class ListPass(RewritePass):
    """Turns ``- item`` and ``* item`` lines into bullet lines.

    Items lose their indentation, so nested lists are flattened. When a
    list is followed by a non-list line, a blank line is inserted between
    them. A list that ends the text gets no trailing blank line.
    """

    def __init__(self, config: Optional[ListConfig] = None):
        """Initialize the list pass.

        Args:
            config: Configuration options.

        Raises:
            ValueError: If the bullet is empty.
        """
        self.config = config or ListConfig()
        if not self.config.bullet:
            raise ValueError("List bullet must be a non-empty string")

    @property
    def name(self) -> str:
        return "list"

    def apply(self, text: str) -> str:
        lines = text.split('\n')
        result_lines = []
        in_list = False

        for line in lines:
            stripped = line.strip()
            if stripped.startswith(LIST_MARKERS):
                in_list = True
                result_lines.append(f"{self.config.bullet} {stripped[2:]}")
                continue

            if in_list:
                in_list = False
                if self.config.separate_lists:
                    result_lines.append('')
            result_lines.append(line)

        return '\n'.join(result_lines)


class QuotePass(RewritePass):
    """Drops the ``> `` marker from quoted lines.

    Each line is handled on its own; nested quotes lose one level only.
    """

    @property
    def name(self) -> str:
        return "quote"

    def apply(self, text: str) -> str:
        lines = text.split('\n')
        result_lines = []
        for line in lines:
            stripped = line.strip()
            if stripped.startswith(QUOTE_MARKER):
                line = stripped[len(QUOTE_MARKER):]
            result_lines.append(line)
        return '\n'.join(result_lines)
