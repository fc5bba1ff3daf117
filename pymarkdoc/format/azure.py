"""Azure DevOps markdown."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from ..lang.location import Location
from . import core
from .base import Formatter


class AzureDevOpsMarkdown(Formatter):
    """Markdown as rendered in Azure DevOps repositories and wikis."""

    name = "azure-devops"

    def bold(self, text: str) -> str:
        return core.bold(text)

    def code_block(self, language: str, code: str) -> str:
        return core.code_block(language, code)

    def header(self, level: int, text: str) -> str:
        return core.header(level, core.escape_header(text), self.max_header_level)

    def raw_header(self, level: int, text: str) -> str:
        return core.header(level, text, self.max_header_level)

    def local_href(self, text: str) -> str:
        slug = text.strip().lower().replace(" ", "-")
        return f"#{quote(slug, safe='-')}"

    def code_href(self, location: Location) -> str:
        if location.repo is None:
            return ""
        query = urlencode(
            [
                ("path", f"/{location.repo_path()}"),
                ("version", f"GB{location.repo.default_branch}"),
                ("line", location.start.line),
                ("lineEnd", location.end.line),
                ("lineStartColumn", location.start.col),
                ("lineEndColumn", location.end.col),
                ("lineStyle", "plain"),
                ("_a", "contents"),
            ],
            safe="/",
        )
        return f"{location.repo.remote}?{query}"

    def link(self, text: str, url: str) -> str:
        return core.link(text, url)

    def list_entry(self, depth: int, text: str) -> str:
        return core.list_entry(depth, text, self.list_indent)

    def escape(self, text: str) -> str:
        return core.escape(text)

    def accordion(self, title: str, body: str) -> str:
        return core.details(title, body)


__all__ = ["AzureDevOpsMarkdown"]
