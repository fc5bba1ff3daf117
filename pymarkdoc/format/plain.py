"""Plain markdown without host-specific extensions."""

from __future__ import annotations

from ..lang.location import Location
from . import core
from .base import Formatter


class PlainMarkdown(Formatter):
    """Markdown for renderers without heading anchors or a source host.

    Local and source hrefs are always empty, and links with an empty target
    degrade to their text.
    """

    name = "plain"

    def bold(self, text: str) -> str:
        return core.bold(text)

    def code_block(self, language: str, code: str) -> str:
        return core.code_block(language, code)

    def header(self, level: int, text: str) -> str:
        return core.header(level, core.escape_header(text), self.max_header_level)

    def raw_header(self, level: int, text: str) -> str:
        return core.header(level, text, self.max_header_level)

    def local_href(self, text: str) -> str:
        return ""

    def code_href(self, location: Location) -> str:
        return ""

    def link(self, text: str, url: str) -> str:
        if not url:
            return text
        return core.link(text, url)

    def list_entry(self, depth: int, text: str) -> str:
        return core.list_entry(depth, text, self.list_indent)

    def escape(self, text: str) -> str:
        return core.escape(text)

    def accordion(self, title: str, body: str) -> str:
        return f"{core.bold(title)}\n\n{body}"


__all__ = ["PlainMarkdown"]
