"""GitHub-flavored markdown."""

from __future__ import annotations

from ..lang.location import Location
from . import core
from .base import Formatter


class GitHubFlavoredMarkdown(Formatter):
    """Markdown as rendered on github.com."""

    name = "github"

    def bold(self, text: str) -> str:
        return core.bold(text)

    def code_block(self, language: str, code: str) -> str:
        return core.code_block(language, code)

    def header(self, level: int, text: str) -> str:
        return core.header(level, core.escape_header(text), self.max_header_level)

    def raw_header(self, level: int, text: str) -> str:
        return core.header(level, text, self.max_header_level)

    def local_href(self, text: str) -> str:
        return f"#{core.gfm_slug(text)}"

    def code_href(self, location: Location) -> str:
        if location.repo is None:
            return ""
        return (
            f"{location.repo.remote}/blob/{location.repo.default_branch}/"
            f"{location.repo_path()}#L{location.start.line}-L{location.end.line}"
        )

    def link(self, text: str, url: str) -> str:
        return core.link(text, f"<{url}>")

    def list_entry(self, depth: int, text: str) -> str:
        return core.list_entry(depth, text, self.list_indent)

    def escape(self, text: str) -> str:
        return core.escape(text)

    def accordion(self, title: str, body: str) -> str:
        return core.details(title, body)


__all__ = ["GitHubFlavoredMarkdown"]
