"""Module- and class-level assignments."""

from __future__ import annotations

import ast
import re
from typing import Iterator, List, Sequence, Union

from .base import Entity, SourceContext, print_decl
from .location import Location

AssignNode = Union[ast.Assign, ast.AnnAssign, ast.AugAssign]

_CONSTANT_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")
_FINAL_NAMES = {"Final", "typing.Final", "typing_extensions.Final"}


class Value(Entity):
    """One assignment statement binding one or more public names."""

    def __init__(
        self,
        node: AssignNode,
        names: Sequence[str],
        level: int,
        context: SourceContext,
        doc: str = "",
        scope: str = "package-level",
    ) -> None:
        super().__init__(names[0], level, doc)
        self._node = node
        self._names = tuple(names)
        self._context = context
        self._scope = scope
        self.kind = "const" if is_constant(node, names) else "var"

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def title(self) -> str:
        return ", ".join(self._names)

    def decl(self) -> str:
        return print_decl(self._node)

    def location(self) -> Location:
        return self._context.location(self._node)

    def _fallback_summary(self) -> str:
        noun = "constant" if self.kind == "const" else "variable"
        return f"{self.name} is a {self._scope} {noun}."


def target_names(node: AssignNode) -> List[str]:
    """Return every simple name bound by an assignment, in source order."""
    targets = node.targets if isinstance(node, ast.Assign) else [node.target]
    names: List[str] = []
    for target in targets:
        names.extend(_names(target))
    return names


def _names(target: ast.expr) -> Iterator[str]:
    if isinstance(target, ast.Name):
        yield target.id
    elif isinstance(target, (ast.Tuple, ast.List)):
        for element in target.elts:
            yield from _names(element)
    elif isinstance(target, ast.Starred):
        yield from _names(target.value)


def is_constant(node: AssignNode, names: Sequence[str]) -> bool:
    """Constants are UPPER_CASE names or annotated ``Final``.

    An augmented assignment rebinds a name, so it is always a variable.
    """
    if isinstance(node, ast.AugAssign):
        return False
    if isinstance(node, ast.AnnAssign):
        annotation = node.annotation
        if isinstance(annotation, ast.Subscript):
            annotation = annotation.value
        if ast.unparse(annotation) in _FINAL_NAMES:
            return True
    return bool(names) and all(_CONSTANT_NAME.match(name) for name in names)


__all__ = ["AssignNode", "Value", "is_constant", "target_names"]
