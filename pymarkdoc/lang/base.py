"""Shared contract for documented symbols."""

from __future__ import annotations

import ast
import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import doc as docutil
from .location import Location, Position, Repo


class DeclUnavailableError(LookupError):
    """Raised when an entity has no declaration node to print."""


@dataclass(frozen=True)
class SourceContext:
    """Per-file data shared by every entity parsed from the same module."""

    filepath: str
    work_dir: str
    lines: Sequence[str]
    repo: Optional[Repo] = None

    def location(self, node: ast.AST) -> Location:
        """Return the declaration span of ``node``, decorators included."""
        start_line = node.lineno
        start_col = node.col_offset + 1
        decorators = getattr(node, "decorator_list", None) or []
        if decorators:
            first = decorators[0]
            # decorator expressions start after the "@"
            start_line = first.lineno
            start_col = first.col_offset
        end_line = node.end_lineno or start_line
        end_col = (node.end_col_offset or 0) + 1
        return Location(
            start=Position(line=start_line, col=start_col),
            end=Position(line=end_line, col=end_col),
            filepath=self.filepath,
            work_dir=self.work_dir,
            repo=self.repo,
        )


class Entity(ABC):
    """A documented symbol with a nesting level, summary, declaration and location."""

    kind: str = ""

    def __init__(self, name: str, level: int, doc: str = "") -> None:
        self._name = name
        self._level = level
        self._doc = doc

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> int:
        return self._level

    @property
    def doc(self) -> str:
        return self._doc

    @property
    def title(self) -> str:
        """Text of the heading that introduces this entity."""
        return self._name

    def heading(self) -> str:
        """Heading text; local hrefs to this entity are built from it too."""
        return self.title

    def summary(self) -> str:
        text = docutil.summary(self._doc)
        return text or self._fallback_summary()

    def blocks(self) -> List[docutil.Block]:
        remaining, _ = docutil.split_examples(docutil.parse_blocks(self._doc))
        return remaining

    @abstractmethod
    def _fallback_summary(self) -> str:
        """Sentence used when the entity has no documentation."""

    @abstractmethod
    def decl(self) -> str:
        """Return the declaration printed from the AST node."""

    @abstractmethod
    def location(self) -> Location:
        """Return the span of the declaration."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, level={self._level})"


def strip_body(node: ast.AST) -> ast.AST:
    """Return a copy of a def/class node whose body is reduced to ``...``."""
    clone = copy.copy(node)
    clone.body = [ast.Expr(value=ast.Constant(value=Ellipsis))]
    return clone


def print_decl(node: ast.AST) -> str:
    return ast.unparse(node)


__all__ = ["DeclUnavailableError", "Entity", "SourceContext", "print_decl", "strip_body"]
