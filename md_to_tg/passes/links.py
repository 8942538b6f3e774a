"""Image and link passes."""

import re

from .base import RewritePass


# [text](url) with an optional "title" or 'title' after the url.
_TARGET = r"\(([^\s\)]+)(?:\s[\"']([^\"']*)[\"'])?\)"

IMAGE_RE = re.compile(r"!\[([^\]]*)\]" + _TARGET)
LINK_RE = re.compile(r"\[([^\]]+)\]" + _TARGET)


class ImagePass(RewritePass):
    """Deletes Markdown images; the chat dialect cannot show them inline."""

    @property
    def name(self) -> str:
        return "image"

    def apply(self, text: str) -> str:
        return IMAGE_RE.sub("", text)


class LinkPass(RewritePass):
    """Rewrites ``[text](url "title")`` as ``<a href="url">text</a>``.

    The title is matched and dropped. Must run after ImagePass, which
    consumes the ``!``-prefixed form of the same syntax.
    """

    @property
    def name(self) -> str:
        return "link"

    def apply(self, text: str) -> str:
        return LINK_RE.sub(r'<a href="\2">\1</a>', text)
