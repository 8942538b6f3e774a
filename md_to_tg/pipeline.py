"""Conversion pipeline turning Markdown into chat markup."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .passes import (
    CodeProtector,
    EmphasisPass,
    EntityUnescapePass,
    FencedCodePass,
    HeadingConfig,
    HeadingPass,
    ImagePass,
    InlineCodePass,
    LinkPass,
    ListConfig,
    ListPass,
    QuotePass,
    RewritePass,
    WhitespaceConfig,
    WhitespaceNormalizer,
    ZeroWidthPass,
    escape_chars,
    unescape_chars,
)


logger = logging.getLogger(__name__)


@dataclass
class ConverterConfig:
    """Configuration for the conversion pipeline."""
    # Input normalization
    strip_zero_width: bool = True
    unescape_entities: bool = True

    # Structural passes, in the order they run
    format_code: bool = True
    convert_headings: bool = True
    drop_images: bool = True
    convert_links: bool = True
    convert_lists: bool = True
    convert_quotes: bool = True
    convert_emphasis: bool = True

    # Hide code spans from the heading/list/quote/emphasis passes
    protect_code: bool = False

    # Per-pass settings
    heading_config: HeadingConfig = field(default_factory=HeadingConfig)
    list_config: ListConfig = field(default_factory=ListConfig)
    whitespace_config: WhitespaceConfig = field(default_factory=WhitespaceConfig)


class Converter:
    """Converts Markdown into the markup accepted by the chat client.

    Pipeline stages:
    1. Input normalization - Strip zero-width spaces, unescape entities
    2. Code - Normalize fenced blocks and inline code spans
    3. Markup - Headings, images, links, lists, quotes, emphasis
    4. Post-processing - Collapse blank lines, trim whitespace

    A converter keeps no per-call state and can be shared between threads.
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        """Initialize the converter.

        Args:
            config: Pipeline configuration.

        Raises:
            ValueError: If a nested pass configuration is invalid.
        """
        self.config = config or ConverterConfig()
        self._code_passes = tuple(self._build_code_passes())
        self._markup_passes = tuple(self._build_markup_passes())
        self._normalizer = WhitespaceNormalizer(self.config.whitespace_config)
        logger.debug(
            f"Converter ready with passes: {', '.join(p.name for p in self.passes)}"
        )

    @property
    def passes(self) -> tuple[RewritePass, ...]:
        """The enabled passes, in the order pre_process runs them."""
        return self._code_passes + self._markup_passes

    def _build_code_passes(self) -> list[RewritePass]:
        passes = []
        if self.config.strip_zero_width:
            passes.append(ZeroWidthPass())
        if self.config.unescape_entities:
            passes.append(EntityUnescapePass())
        if self.config.format_code:
            passes.append(FencedCodePass())
            passes.append(InlineCodePass())
        return passes

    def _build_markup_passes(self) -> list[RewritePass]:
        passes = []
        if self.config.convert_headings:
            passes.append(HeadingPass(self.config.heading_config))
        if self.config.drop_images:
            passes.append(ImagePass())
        if self.config.convert_links:
            passes.append(LinkPass())
        if self.config.convert_lists:
            passes.append(ListPass(self.config.list_config))
        if self.config.convert_quotes:
            passes.append(QuotePass())
        if self.config.convert_emphasis:
            passes.append(EmphasisPass())
        return passes

    def convert(self, markdown: str) -> str:
        """Run the full conversion pipeline.

        Never raises on content: constructs that do not match any rule,
        such as an unclosed fence or a lone asterisk, are passed through.

        Args:
            markdown: Markdown source text.

        Returns:
            Text in the chat markup dialect.
        """
        return self.post_process(self.pre_process(markdown))

    def pre_process(self, text: str) -> str:
        """Run every enabled rewrite pass in order.

        Args:
            text: Markdown source text.

        Returns:
            Rewritten text, before whitespace normalization.
        """
        for rewrite in self._code_passes:
            text = self._run(rewrite, text)

        protector = None
        if self.config.protect_code:
            protector = CodeProtector()
            text = protector.protect(text)

        for rewrite in self._markup_passes:
            text = self._run(rewrite, text)

        if protector is not None:
            text = protector.restore(text)
        return text

    def post_process(self, text: str) -> str:
        """Collapse runs of blank lines and trim whitespace.

        Args:
            text: Output of pre_process.

        Returns:
            Normalized text.
        """
        return self._normalizer.normalize(text)

    def escape_chars(self, text: str) -> str:
        """Escape literal ``_``, ``*``, backtick and ``[`` characters."""
        return escape_chars(text)

    def unescape_chars(self, text: str) -> str:
        """Remove one backslash before ``_``, ``*``, backtick and ``[``."""
        return unescape_chars(text)

    def _run(self, rewrite: RewritePass, text: str) -> str:
        result = rewrite.apply(text)
        if result != text:
            logger.debug(f"Pass {rewrite.name}: {len(text)} -> {len(result)} chars")
        return result


def convert(markdown: str) -> str:
    """Quick conversion function for simple use cases.

    Args:
        markdown: Markdown source text.

    Returns:
        Text in the chat markup dialect.
    """
    converter = Converter()
    return converter.convert(markdown)
