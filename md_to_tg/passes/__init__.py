"""Rewrite passes for Markdown to chat markup conversion."""

from .base import RewritePass
from .blocks import ListConfig, ListPass, QuotePass
from .code import CodeProtector, FencedCodePass, InlineCodePass
from .emphasis import EmphasisPass
from .escaping import (
    EntityUnescapePass,
    ZeroWidthPass,
    escape_chars,
    unescape_chars,
    unescape_entities,
    strip_zero_width,
)
from .headings import HeadingConfig, HeadingPass
from .links import ImagePass, LinkPass
from .whitespace_normalizer import WhitespaceConfig, WhitespaceNormalizer

__all__ = [
    "RewritePass",
    # Input normalization
    "ZeroWidthPass",
    "EntityUnescapePass",
    # Structural passes
    "FencedCodePass",
    "InlineCodePass",
    "CodeProtector",
    "HeadingPass",
    "HeadingConfig",
    "ImagePass",
    "LinkPass",
    "ListPass",
    "ListConfig",
    "QuotePass",
    "EmphasisPass",
    # Post-processing
    "WhitespaceNormalizer",
    "WhitespaceConfig",
    # Helpers
    "escape_chars",
    "unescape_chars",
    "unescape_entities",
    "strip_zero_width",
]
