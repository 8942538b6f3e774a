"""Bold and italic emphasis pass."""

import re

from .base import RewritePass


BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
ITALIC_RE = re.compile(r"\*(.+?)\*")


class EmphasisPass(RewritePass):
    """Converts ``**bold**`` to ``<b>`` and ``*italic*`` to ``<i>``.

    Bold runs first, otherwise the single-asterisk rule would eat half of
    every double-asterisk pair. Neither rule crosses a newline.
    """

    @property
    def name(self) -> str:
        return "emphasis"

    def apply(self, text: str) -> str:
        text = BOLD_RE.sub(r"<b>\1</b>", text)
        text = ITALIC_RE.sub(r"<i>\1</i>", text)
        return text
