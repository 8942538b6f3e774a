"""md-to-tg: Markdown to chat client markup conversion."""

from .passes import (
    HeadingConfig,
    ListConfig,
    WhitespaceConfig,
    escape_chars,
    unescape_chars,
)
from .pipeline import Converter, ConverterConfig, convert

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "Converter",
    "ConverterConfig",
    "convert",
    # Pass settings
    "HeadingConfig",
    "ListConfig",
    "WhitespaceConfig",
    # Helpers
    "escape_chars",
    "unescape_chars",
]
