"""GitLab-flavored markdown."""

from __future__ import annotations

import re

from ..lang.location import Location
from . import core
from .github import GitHubFlavoredMarkdown

_REMOVE = re.compile(r"[^\w\s-]", re.UNICODE)
_SPACES = re.compile(r"\s")
_HYPHENS = re.compile(r"-{2,}")


class GitLabFlavoredMarkdown(GitHubFlavoredMarkdown):
    """Markdown as rendered on GitLab.

    GitLab keeps underscores in heading anchors and collapses repeated
    hyphens; source links use the ``/-/blob/`` route and ``#L<a>-<b>`` ranges.
    """

    name = "gitlab"

    def local_href(self, text: str) -> str:
        slug = _REMOVE.sub("", text.lower().strip())
        slug = _HYPHENS.sub("-", _SPACES.sub("-", slug))
        return f"#{slug}"

    def code_href(self, location: Location) -> str:
        if location.repo is None:
            return ""
        return (
            f"{location.repo.remote}/-/blob/{location.repo.default_branch}/"
            f"{location.repo_path()}#L{location.start.line}-{location.end.line}"
        )

    def link(self, text: str, url: str) -> str:
        return core.link(text, url)


__all__ = ["GitLabFlavoredMarkdown"]
