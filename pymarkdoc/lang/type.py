"""Classes and their members."""

from __future__ import annotations

import ast
from typing import Callable, List, Tuple

from . import doc as docutil
from .base import Entity, SourceContext, print_decl, strip_body
from .example import Example, collect_examples
from .func import Method
from .location import Location
from .value import Value, target_names

# dunder methods that are part of a class's documented surface
_DOCUMENTED_DUNDERS = {"__init__", "__call__"}


class Type(Entity):
    """A class with its methods, class attributes, nested classes and examples."""

    kind = "type"

    def __init__(
        self,
        node: ast.ClassDef,
        level: int,
        context: SourceContext,
        is_public: Callable[[str], bool],
        owner: str = "",
    ) -> None:
        super().__init__(node.name, level, docutil.clean(ast.get_docstring(node, clean=False)))
        self._node = node
        self._context = context
        self._owner = owner
        self._methods = tuple(self._collect_methods(is_public))
        self._values = tuple(self._collect_values(is_public))
        self._types = tuple(self._collect_types(is_public))
        self._examples = tuple(collect_examples(self))

    @property
    def title(self) -> str:
        """Dotted path from the outermost enclosing class."""
        if self._owner:
            return f"{self._owner}.{self.name}"
        return self.name

    @property
    def bases(self) -> List[str]:
        return [ast.unparse(base) for base in self._node.bases]

    def methods(self) -> Tuple[Method, ...]:
        return self._methods

    def values(self) -> Tuple[Value, ...]:
        return self._values

    def types(self) -> Tuple["Type", ...]:
        return self._types

    def heading(self) -> str:
        return f"class {self.title}"

    def examples(self) -> Tuple[Example, ...]:
        return self._examples

    def decl(self) -> str:
        return print_decl(strip_body(self._node))

    def location(self) -> Location:
        return self._context.location(self._node)

    def _fallback_summary(self) -> str:
        return f"{self.name} is a class."

    def _collect_methods(self, is_public: Callable[[str], bool]) -> List[Method]:
        methods: List[Method] = []
        for child in self._node.body:
            if not isinstance(child, (ast.FunctionDef, ast.AsyncFunctionDef)):
                continue
            if child.name in _DOCUMENTED_DUNDERS or is_public(child.name):
                methods.append(Method(child, self.title, self.level + 1, self._context))
        return methods

    def _collect_values(self, is_public: Callable[[str], bool]) -> List[Value]:
        values: List[Value] = []
        body = self._node.body
        for index, child in enumerate(body):
            if not isinstance(child, (ast.Assign, ast.AnnAssign, ast.AugAssign)):
                continue
            names = [name for name in target_names(child) if is_public(name)]
            if not names:
                continue
            doc = attribute_doc(body, index) or docutil.comment_block(
                self._context.lines, child.lineno
            )
            values.append(
                Value(child, names, self.level + 1, self._context, doc=doc, scope="class-level")
            )
        return values

    def _collect_types(self, is_public: Callable[[str], bool]) -> List["Type"]:
        return [
            Type(child, self.level + 1, self._context, is_public, owner=self.title)
            for child in self._node.body
            if isinstance(child, ast.ClassDef) and is_public(child.name)
        ]


def attribute_doc(body: List[ast.stmt], index: int) -> str:
    """Return the string literal statement that follows ``body[index]``."""
    if index + 1 >= len(body):
        return ""
    following = body[index + 1]
    if (
        isinstance(following, ast.Expr)
        and isinstance(following.value, ast.Constant)
        and isinstance(following.value.value, str)
    ):
        return docutil.clean(following.value.value)
    return ""


__all__ = ["Type", "attribute_doc"]
