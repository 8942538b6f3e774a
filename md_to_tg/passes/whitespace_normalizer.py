"""Whitespace normalization applied after all rewrite passes."""

import re
from dataclasses import dataclass
from typing import Optional


TRAILING_WHITESPACE_RE = re.compile(r'[ \t]+\n')


@dataclass
class WhitespaceConfig:
    """Configuration for whitespace normalization."""
    # Maximum consecutive blank lines allowed
    max_consecutive_blanks: int = 1


class WhitespaceNormalizer:
    """Collapses excessive newlines and trims trailing whitespace."""

    def __init__(self, config: Optional[WhitespaceConfig] = None):
        """Initialize the normalizer.

        Args:
            config: Whitespace configuration options.

        Raises:
            ValueError: If max_consecutive_blanks is negative.
        """
        self.config = config or WhitespaceConfig()
        max_blanks = self.config.max_consecutive_blanks
        if max_blanks < 0:
            raise ValueError(
                f"max_consecutive_blanks must be >= 0, got {max_blanks}"
            )
        self._newline_run_re = re.compile(r'\n{%d,}' % (max_blanks + 2))
        self._newline_run = '\n' * (max_blanks + 1)

    def normalize(self, text: str) -> str:
        """Collapse 3+ newlines into 2 (one blank line) and trim.

        Trailing spaces and tabs are removed before runs are collapsed, so
        lines holding only whitespace count as blank.

        Args:
            text: Converted text.

        Returns:
            Text with normalized whitespace.
        """
        if not text:
            return ""

        result = TRAILING_WHITESPACE_RE.sub('\n', text)
        result = self._newline_run_re.sub(self._newline_run, result)

        return result.strip()
