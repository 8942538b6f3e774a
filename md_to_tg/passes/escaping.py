"""Character escaping helpers and input normalization passes."""

from .base import RewritePass


# Order matters for unescape_entities: "&amp;" goes last so "&amp;lt;"
# only loses one level of escaping.
HTML_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)

ESCAPED_CHARS = ("_", "*", "`", "[")

ZERO_WIDTH_SPACE = "\u200b"


def escape_chars(text: str) -> str:
    """Backslash-escape the characters the target dialect treats specially.

    Each character is replaced independently and in order, so text that is
    already escaped gets escaped again (``\\*`` becomes ``\\\\*``).

    Args:
        text: Literal text.

    Returns:
        Text with ``_``, ``*``, backtick and ``[`` prefixed by a backslash.
    """
    for char in ESCAPED_CHARS:
        text = text.replace(char, "\\" + char)
    return text


def unescape_chars(text: str) -> str:
    """Reverse escape_chars.

    Args:
        text: Escaped text.

    Returns:
        Text with one backslash removed before each escaped character.
    """
    for char in ESCAPED_CHARS:
        text = text.replace("\\" + char, char)
    return text


def strip_zero_width(text: str) -> str:
    return text.replace(ZERO_WIDTH_SPACE, "")


def unescape_entities(text: str) -> str:
    """Turn the three basic HTML entities back into characters."""
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


class ZeroWidthPass(RewritePass):
    """Removes zero-width spaces left behind by copy/paste and LLM output."""

    @property
    def name(self) -> str:
        return "zero_width"

    def apply(self, text: str) -> str:
        return strip_zero_width(text)


class EntityUnescapePass(RewritePass):
    """Unescapes ``&lt;``, ``&gt;`` and ``&amp;``."""

    @property
    def name(self) -> str:
        return "entities"

    def apply(self, text: str) -> str:
        return unescape_entities(text)
