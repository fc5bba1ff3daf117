"""Doctest sessions attached to documented symbols."""

from __future__ import annotations

from typing import List

from . import doc as docutil
from .base import DeclUnavailableError, Entity
from .location import Location


class Example(Entity):
    """A ``>>>`` session taken from the docstring of its parent."""

    kind = "example"

    def __init__(self, parent: Entity, index: int, session: str, doc: str = "") -> None:
        super().__init__(parent.name, parent.level + 1, doc)
        self._parent = parent
        self._index = index
        self._session = session
        self._code, self._output = docutil.session_parts(session)

    @property
    def parent(self) -> Entity:
        return self._parent

    @property
    def index(self) -> int:
        return self._index

    @property
    def title(self) -> str:
        if self._index == 1:
            return f"{self._parent.title} example"
        return f"{self._parent.title} example {self._index}"

    @property
    def session(self) -> str:
        return self._session

    def code(self) -> str:
        return self._code

    def output(self) -> str:
        return self._output

    def summary(self) -> str:
        text = self.doc.rstrip(":").strip()
        if text:
            return docutil.summary(text if text.endswith(".") else f"{text}.")
        return self._fallback_summary()

    def blocks(self) -> List[docutil.Block]:
        return []

    def decl(self) -> str:
        raise DeclUnavailableError(f"example {self.title!r} has no declaration")

    def location(self) -> Location:
        return self._parent.location()

    def _fallback_summary(self) -> str:
        return f"Example {self._index} for {self._parent.title}."


def collect_examples(parent: Entity) -> List[Example]:
    """Build one example per doctest session in ``parent.doc``."""
    _, sessions = docutil.split_examples(docutil.parse_blocks(parent.doc))
    return [
        Example(parent, index, block.text, doc=intro)
        for index, (intro, block) in enumerate(sessions, start=1)
    ]


__all__ = ["Example", "collect_examples"]
