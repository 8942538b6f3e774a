"""Code block and inline code passes."""

import logging
import re
import secrets

from .base import RewritePass


logger = logging.getLogger(__name__)


# Opening fence, optional language tag directly followed by a newline,
# shortest body up to the next fence.
FENCED_CODE_RE = re.compile(r"```(?:([a-zA-Z0-9]+)\n)?(.+?)```", re.DOTALL)

INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")


def _format_fence(match: re.Match) -> str:
    lang = match.group(1) or ""
    code = match.group(2).strip()
    return f"```{lang}\n{code}\n```"


class FencedCodePass(RewritePass):
    """Normalizes fenced code blocks.

    The body is trimmed and the fence is re-emitted on its own lines, with
    the language tag (if any) kept on the opening fence. The body is not
    hidden from later passes; see CodeProtector for that.
    """

    @property
    def name(self) -> str:
        return "fenced_code"

    def apply(self, text: str) -> str:
        return FENCED_CODE_RE.sub(_format_fence, text)


class InlineCodePass(RewritePass):
    """Re-emits single-backtick code spans unchanged."""

    @property
    def name(self) -> str:
        return "inline_code"

    def apply(self, text: str) -> str:
        return INLINE_CODE_RE.sub(r"`\1`", text)


class CodeProtector:
    """Swaps code spans for opaque placeholders and puts them back later.

    Fenced blocks are stashed first, then inline spans in what remains, so
    an inline span may hold a fenced placeholder. Placeholders carry a
    random token that does not occur in the protected text. One protector
    is created per conversion; it must not be shared between calls.
    """

    def __init__(self):
        self._stash: list[str] = []
        self._token = secrets.token_hex(8)

    def __len__(self) -> int:
        return len(self._stash)

    def protect(self, text: str) -> str:
        """Replace fenced blocks and inline code with placeholders.

        Args:
            text: Text after the code passes have run.

        Returns:
            Text with every code span replaced by a placeholder.
        """
        while self._token in text:
            self._token = secrets.token_hex(8)

        text = FENCED_CODE_RE.sub(self._stash_match, text)
        text = INLINE_CODE_RE.sub(self._stash_match, text)
        logger.debug(f"Protected {len(self._stash)} code spans")
        return text

    def restore(self, text: str) -> str:
        """Put the stashed code spans back.

        Later entries may contain earlier placeholders, so they are
        restored newest first.
        """
        for index in reversed(range(len(self._stash))):
            text = text.replace(self._placeholder(index), self._stash[index])
        return text

    def _placeholder(self, index: int) -> str:
        return f"\x00{self._token}:{index}\x00"

    def _stash_match(self, match: re.Match) -> str:
        self._stash.append(match.group(0))
        return self._placeholder(len(self._stash) - 1)
