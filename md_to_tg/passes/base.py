"""Abstract base class for rewrite passes.

This module defines the interface that every conversion pass implements,
allowing the pipeline to run an ordered list of pluggable rewrites.
"""

from abc import ABC, abstractmethod


class RewritePass(ABC):
    """Abstract base class for a single string-to-string rewrite.

    Implementations must be total: any input string, including empty or
    malformed Markdown, produces an output string without raising.
    Passes hold configuration only and may be shared between threads.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this pass, used in log messages."""
        pass

    @abstractmethod
    def apply(self, text: str) -> str:
        """Rewrite the text.

        Args:
            text: Output of the previous pass.

        Returns:
            The rewritten text.
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
