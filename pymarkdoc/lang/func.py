"""Functions and methods."""

from __future__ import annotations

import ast
from typing import List, Tuple, Union

from . import doc as docutil
from .base import Entity, SourceContext, print_decl, strip_body
from .example import Example, collect_examples
from .location import Location

FunctionNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]


class Func(Entity):
    """A module-level function."""

    kind = "func"

    def __init__(self, node: FunctionNode, level: int, context: SourceContext) -> None:
        super().__init__(node.name, level, docutil.clean(ast.get_docstring(node, clean=False)))
        self._node = node
        self._context = context
        self._examples = tuple(collect_examples(self))

    @property
    def is_async(self) -> bool:
        return isinstance(self._node, ast.AsyncFunctionDef)

    def heading(self) -> str:
        prefix = "async def" if self.is_async else "def"
        return f"{prefix} {self.title}"

    def examples(self) -> Tuple[Example, ...]:
        return self._examples

    def decl(self) -> str:
        return print_decl(strip_body(self._node))

    def location(self) -> Location:
        return self._context.location(self._node)

    def _fallback_summary(self) -> str:
        return f"{self.name} is a function."


class Method(Func):
    """A function defined in a class body."""

    kind = "method"

    def __init__(
        self, node: FunctionNode, receiver: str, level: int, context: SourceContext
    ) -> None:
        self._receiver = receiver
        super().__init__(node, level, context)

    @property
    def receiver(self) -> str:
        return self._receiver

    @property
    def title(self) -> str:
        return f"{self._receiver}.{self.name}"

    @property
    def decorators(self) -> List[str]:
        return [ast.unparse(decorator) for decorator in self._node.decorator_list]

    def _fallback_summary(self) -> str:
        return f"{self.name} is a method of {self._receiver}."


__all__ = ["Func", "FunctionNode", "Method"]
