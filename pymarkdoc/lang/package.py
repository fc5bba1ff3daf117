"""Package model built from a parsed Python module."""

from __future__ import annotations

import ast
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple, TypeVar

from ..logging import get_logger
from . import doc as docutil
from .base import DeclUnavailableError, Entity, SourceContext
from .example import Example, collect_examples
from .func import Func
from .location import Location, Position, Repo
from .type import Type, attribute_doc
from .value import Value, target_names

_LOGGER = get_logger("lang.package")

E = TypeVar("E", bound=Entity)


class PackageLoadError(RuntimeError):
    """Raised when a module cannot be read or parsed."""


class Package(Entity):
    """Documentation model of one module, the root entity at level 1."""

    kind = "package"

    def __init__(
        self,
        tree: ast.Module,
        name: str,
        context: SourceContext,
        include_private: bool = False,
    ) -> None:
        super().__init__(name, 1, docutil.clean(ast.get_docstring(tree, clean=False)))
        self._tree = tree
        self._context = context
        self._exports = _literal_all(tree)
        self._include_private = include_private

        values: List[Value] = []
        types: List[Type] = []
        funcs: List[Func] = []
        body = tree.body
        for index, node in enumerate(body):
            if isinstance(node, (ast.Assign, ast.AnnAssign, ast.AugAssign)):
                names = [n for n in target_names(node) if self._is_exported(n)]
                if not names:
                    continue
                doc = attribute_doc(body, index) or docutil.comment_block(
                    context.lines, node.lineno
                )
                values.append(Value(node, names, 2, context, doc=doc))
            elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
                if self._is_exported(node.name):
                    funcs.append(Func(node, 2, context))
            elif isinstance(node, ast.ClassDef):
                if self._is_exported(node.name):
                    types.append(Type(node, 2, context, self._is_public_member))

        self._vars = tuple(v for v in values if v.kind == "var")
        self._consts = tuple(v for v in values if v.kind == "const")
        self._types = tuple(types)
        self._funcs = tuple(funcs)
        self._examples = tuple(collect_examples(self))

    # ------------------------------------------------------------------
    # Construction

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        work_dir: str | Path | None = None,
        repo: Optional[Repo] = None,
        include_private: bool = False,
    ) -> "Package":
        """Load the module at ``path`` (a ``.py`` file or a package directory)."""
        target = Path(path).resolve()
        if target.is_dir():
            target = target / "__init__.py"
        try:
            source = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PackageLoadError(f"Failed to read {target}: {exc}") from exc
        return cls.from_source(
            source,
            target,
            work_dir=work_dir,
            repo=repo,
            include_private=include_private,
        )

    @classmethod
    def from_source(
        cls,
        source: str,
        filepath: str | Path,
        work_dir: str | Path | None = None,
        repo: Optional[Repo] = None,
        include_private: bool = False,
    ) -> "Package":
        """Parse ``source`` as if it were stored at ``filepath``."""
        filepath = Path(filepath).resolve()
        work = Path(work_dir).resolve() if work_dir is not None else Path.cwd().resolve()
        try:
            tree = ast.parse(source, filename=str(filepath))
        except (SyntaxError, ValueError) as exc:
            raise PackageLoadError(f"Failed to parse {filepath}: {exc}") from exc

        context = SourceContext(
            filepath=str(filepath),
            work_dir=str(work),
            lines=tuple(source.splitlines()),
            repo=repo,
        )
        package = cls(tree, module_name(filepath), context, include_private=include_private)
        _LOGGER.debug(
            "Loaded %s: %d consts, %d vars, %d types, %d funcs",
            package.name,
            len(package.consts()),
            len(package.vars()),
            len(package.types()),
            len(package.funcs()),
        )
        return package

    # ------------------------------------------------------------------
    # Queries

    def vars(self) -> Tuple[Value, ...]:
        return self._vars

    def consts(self) -> Tuple[Value, ...]:
        return self._consts

    def types(self) -> Tuple[Type, ...]:
        return self._types

    def funcs(self) -> Tuple[Func, ...]:
        return self._funcs

    def examples(self) -> Tuple[Example, ...]:
        return self._examples

    @property
    def import_path(self) -> str:
        return self.name

    @property
    def filepath(self) -> str:
        return self._context.filepath

    @property
    def dirname(self) -> str:
        """Directory of the module relative to the working directory."""
        rel = os.path.relpath(os.path.dirname(self._context.filepath), self._context.work_dir)
        return rel.replace(os.sep, "/")

    @property
    def repo(self) -> Optional[Repo]:
        return self._context.repo

    def decl(self) -> str:
        raise DeclUnavailableError(f"package {self.name!r} has no declaration")

    def location(self) -> Location:
        lines = self._context.lines
        last = len(lines[-1]) + 1 if lines else 1
        return Location(
            start=Position(line=1, col=1),
            end=Position(line=max(len(lines), 1), col=last),
            filepath=self._context.filepath,
            work_dir=self._context.work_dir,
            repo=self._context.repo,
        )

    def _fallback_summary(self) -> str:
        return f"Package {self.name} has no package documentation."

    def _is_exported(self, name: str) -> bool:
        if self._include_private:
            return True
        if self._exports is not None:
            return name in self._exports
        return not name.startswith("_")

    def _is_public_member(self, name: str) -> bool:
        return self._include_private or not name.startswith("_")


def sorted_by_name(entities: Iterable[E]) -> List[E]:
    """Return ``entities`` ordered by name, leaving the model untouched."""
    return sorted(entities, key=lambda entity: entity.name.lower())


def module_name(filepath: Path) -> str:
    """Return the dotted module name by walking up ``__init__.py`` parents."""
    parts: List[str] = []
    if filepath.name != "__init__.py":
        parts.append(filepath.stem)
    directory = filepath.parent
    while (directory / "__init__.py").exists():
        parts.append(directory.name)
        if directory.parent == directory:
            break
        directory = directory.parent
    if not parts:
        parts.append(filepath.parent.name or filepath.stem)
    return ".".join(reversed(parts))


def _literal_all(tree: ast.Module) -> Optional[Set[str]]:
    for node in tree.body:
        if isinstance(node, ast.Assign):
            targets: Sequence[ast.expr] = node.targets
            value = node.value
        elif isinstance(node, ast.AnnAssign) and node.value is not None:
            targets = [node.target]
            value = node.value
        else:
            continue
        if not any(isinstance(t, ast.Name) and t.id == "__all__" for t in targets):
            continue
        if isinstance(value, (ast.List, ast.Tuple)) and all(
            isinstance(element, ast.Constant) and isinstance(element.value, str)
            for element in value.elts
        ):
            return {element.value for element in value.elts}
    return None


def discover_modules(
    root: str | Path,
    recursive: bool = False,
    exclude: Callable[[Path], bool] | None = None,
) -> List[Path]:
    """Return documentable module paths beneath ``root`` in a stable order."""
    base = Path(root)
    if base.is_file():
        return [base]
    pattern = "**/*.py" if recursive else "*.py"
    found: List[Path] = []
    for candidate in sorted(base.glob(pattern)):
        if any(part.startswith(".") or part == "__pycache__" for part in candidate.relative_to(base).parts):
            continue
        if exclude is not None and exclude(candidate):
            _LOGGER.debug("Skipping excluded module %s", candidate)
            continue
        found.append(candidate)
    return found


__all__ = ["Package", "PackageLoadError", "discover_modules", "module_name", "sorted_by_name"]
