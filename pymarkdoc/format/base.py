"""Base class for output dialects."""

from abc import ABC, abstractmethod

from ..lang.location import Location


class Formatter(ABC):
    """Contract for turning semantic fragments into dialect-specific text.

    Implementations hold no mutable state; every method is a pure function of
    its arguments. Only ``header`` and ``raw_header`` raise, and only for a
    level below 1.
    """

    name: str = ""
    max_header_level: int = 6
    list_indent: int = 4

    @abstractmethod
    def bold(self, text: str) -> str:
        """Wrap ``text`` in strong emphasis."""

    @abstractmethod
    def code_block(self, language: str, code: str) -> str:
        """Return a fenced block; an empty ``language`` omits the tag."""

    @abstractmethod
    def header(self, level: int, text: str) -> str:
        """Return a heading with markup characters in ``text`` escaped."""

    @abstractmethod
    def raw_header(self, level: int, text: str) -> str:
        """Return a heading with ``text`` inserted verbatim."""

    @abstractmethod
    def local_href(self, text: str) -> str:
        """Return the in-document anchor for a heading with ``text``."""

    @abstractmethod
    def code_href(self, location: Location) -> str:
        """Return a permalink to the source lines, or ``""`` without a repo."""

    @abstractmethod
    def link(self, text: str, url: str) -> str:
        """Return an inline hyperlink."""

    @abstractmethod
    def list_entry(self, depth: int, text: str) -> str:
        """Return one unordered list line; empty ``text`` yields ``""``."""

    @abstractmethod
    def escape(self, text: str) -> str:
        """Escape inline markup in free text."""

    @abstractmethod
    def accordion(self, title: str, body: str) -> str:
        """Return a collapsible section where the dialect supports one."""
