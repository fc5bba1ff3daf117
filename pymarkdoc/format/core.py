"""Markup helpers shared by the markdown dialects."""

from __future__ import annotations

import re

MAX_HEADER_LEVEL = 6

_ESCAPE_CHARS = re.compile(r"([\\*_\[\]<>|])")
_HEADER_ESCAPE = re.compile(r"\*")
_SLUG_REMOVE = re.compile(r"[^\w\s-]|_", re.UNICODE)
_WHITESPACE = re.compile(r"\s")


class HeaderLevelError(ValueError):
    """Raised when a header is requested with a level below 1."""

    def __init__(self, level: int) -> None:
        super().__init__("header level cannot be less than 1")
        self.level = level


def bold(text: str) -> str:
    return f"**{text}**"


def code_block(language: str, code: str) -> str:
    return f"```{language}\n{code}\n```"


def header(level: int, text: str, max_level: int = MAX_HEADER_LEVEL) -> str:
    if level < 1:
        raise HeaderLevelError(level)
    return f"{'#' * min(level, max_level)} {text}"


def escape_header(text: str) -> str:
    return _HEADER_ESCAPE.sub(r"\\*", text)


def escape(text: str) -> str:
    """Backslash-escape characters with inline markdown meaning."""
    return _ESCAPE_CHARS.sub(r"\\\1", text)


def link(text: str, url: str) -> str:
    return f"[{text}]({url})"


def list_entry(depth: int, text: str, indent: int) -> str:
    if not text:
        return ""
    return f"{' ' * (max(depth, 0) * indent)}- {text}"


def gfm_slug(text: str) -> str:
    """GitHub heading anchor: one hyphen per whitespace character."""
    slug = text.lower().strip()
    slug = _SLUG_REMOVE.sub("", slug)
    return _WHITESPACE.sub("-", slug)


def details(title: str, body: str) -> str:
    return f"<details><summary>{title}</summary>\n<p>\n\n{body}\n\n</p>\n</details>"


__all__ = [
    "HeaderLevelError",
    "MAX_HEADER_LEVEL",
    "bold",
    "code_block",
    "details",
    "escape",
    "escape_header",
    "gfm_slug",
    "header",
    "link",
    "list_entry",
]
