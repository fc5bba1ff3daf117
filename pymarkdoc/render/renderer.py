"""Template-driven rendering of package models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader

from ..format.base import Formatter
from ..lang.base import DeclUnavailableError, Entity
from ..lang.package import Package, sorted_by_name
from ..lang.type import Type
from ..logging import get_logger
from .normalize import normalize

_LOGGER = get_logger("render")

_DEFAULT_TEMPLATES = Path(__file__).with_name("templates")


@dataclass(frozen=True)
class RenderOptions:
    """Layout switches for rendered documents."""

    index: bool = True
    sort: bool = False


class Renderer:
    """Walks a package model and stitches formatter output together."""

    def __init__(
        self,
        formatter: Formatter,
        templates_dir: Path | None = None,
        options: RenderOptions | None = None,
    ) -> None:
        self._formatter = formatter
        self._options = options or RenderOptions()
        self._env = self._create_env(templates_dir)

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def render_package(self, package: Package) -> str:
        """Render one package document."""
        template = self._env.get_template("package.j2")
        return normalize(template.render(package=package, options=self._options))

    def render_file(
        self,
        packages: Sequence[Package],
        header: Optional[str] = None,
        footer: Optional[str] = None,
    ) -> str:
        """Render several packages into one document with optional header and footer."""
        parts: List[str] = []
        if header:
            parts.append(header.strip())
        parts.extend(self.render_package(package) for package in packages)
        if footer:
            parts.append(footer.strip())
        return normalize("\n\n".join(parts))

    def _create_env(self, templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(_DEFAULT_TEMPLATES))
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.globals.update(self._template_globals())
        return env

    def _template_globals(self) -> Dict[str, Any]:
        f = self._formatter
        return {
            "bold": f.bold,
            "code_block": f.code_block,
            "header": f.header,
            "raw_header": f.raw_header,
            "local_href": f.local_href,
            "code_href": f.code_href,
            "link": f.link,
            "list_entry": f.list_entry,
            "escape": f.escape,
            "accordion": f.accordion,
            "decl": _decl_or_empty,
            "ordered": self._ordered,
            "type_index": self._type_index,
        }

    def _ordered(self, entities: Iterable[Entity]) -> List[Entity]:
        if self._options.sort:
            return sorted_by_name(entities)
        return list(entities)

    def _type_index(self, types: Iterable[Type], depth: int = 0) -> List[Tuple[int, Entity]]:
        """Flatten classes, their methods and nested classes into indented entries."""
        entries: List[Tuple[int, Entity]] = []
        for type_ in self._ordered(types):
            entries.append((depth, type_))
            entries.extend((depth + 1, method) for method in self._ordered(type_.methods()))
            entries.extend(self._type_index(type_.types(), depth + 1))
        return entries


def _decl_or_empty(entity: Entity) -> str:
    try:
        return entity.decl()
    except DeclUnavailableError as exc:
        _LOGGER.debug("Skipping declaration block: %s", exc)
        return ""


__all__ = ["RenderOptions", "Renderer"]
