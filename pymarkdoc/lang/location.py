"""Source positions and repository metadata attached to documented symbols."""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Position:
    """A 1-based line and column inside a source file."""

    line: int
    col: int


@dataclass(frozen=True)
class Repo:
    """Hosting repository that contains the documented files.

    ``path_from_root`` is the working directory relative to the repository
    root, always starting with ``/``.
    """

    remote: str
    default_branch: str
    path_from_root: str = "/"


@dataclass(frozen=True)
class Location:
    """Span of a declaration in an absolute file path."""

    start: Position
    end: Position
    filepath: str
    work_dir: str
    repo: Optional[Repo] = None

    def __post_init__(self) -> None:
        if self.end.line < self.start.line:
            raise ValueError(
                f"location end line {self.end.line} is before start line {self.start.line}"
            )

    def relative_path(self) -> str:
        """Return the file path relative to the working directory."""
        rel = os.path.relpath(self.filepath, self.work_dir)
        return rel.replace(os.sep, "/")

    def repo_path(self) -> str:
        """Return the file path relative to the repository root, or ``""``."""
        if self.repo is None:
            return ""
        root = self.repo.path_from_root.replace("\\", "/") or "/"
        joined = posixpath.normpath(posixpath.join("/", root, self.relative_path()))
        return joined.lstrip("/")


__all__ = ["Location", "Position", "Repo"]
