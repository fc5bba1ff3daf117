"""Tests for classes."""

from __future__ import annotations

import pytest

from pymarkdoc.lang.base import DeclUnavailableError
from tests._fixtures.source_builder import SourceBuilder

TYPE_SOURCE = '''
import dataclasses


@dataclasses.dataclass(frozen=True)
class Point(Base, metaclass=Meta):
    """Point in the plane.

    >>> Point(1, 2).norm()
    2.23606797749979
    """

    x: float = 0.0
    """Horizontal coordinate."""

    ORIGIN = None

    _cache = {}

    def __init__(self, x, y):
        self.x = x

    def norm(self):
        """Return the Euclidean norm."""

    def _helper(self):
        pass

    def __repr__(self):
        return "Point"


class Bare:
    pass
'''


def _types(source_builder: SourceBuilder):  # type: ignore[no-untyped-def]
    source_builder.write({"shapes.py": TYPE_SOURCE})
    return source_builder.load("shapes.py").types()


def test_type_decl_has_header_only(source_builder: SourceBuilder) -> None:
    point, _ = _types(source_builder)
    assert point.decl() == (
        "@dataclasses.dataclass(frozen=True)\n"
        "class Point(Base, metaclass=Meta):\n"
        "    ..."
    )
    assert point.bases == ["Base"]


def test_type_level_and_summary(source_builder: SourceBuilder) -> None:
    point, bare = _types(source_builder)
    assert point.level == 2
    assert point.summary() == "Point in the plane."
    assert point.heading() == "class Point"
    assert bare.summary() == "Bare is a class."


def test_type_location_spans_decorator_and_body(source_builder: SourceBuilder) -> None:
    point, _ = _types(source_builder)
    loc = point.location()
    assert loc.start.line == 4
    assert loc.start.col == 1
    assert loc.end.line == 29


def test_methods_skip_private_and_most_dunders(source_builder: SourceBuilder) -> None:
    point, bare = _types(source_builder)
    assert [m.name for m in point.methods()] == ["__init__", "norm"]
    assert all(m.level == 3 for m in point.methods())
    assert bare.methods() == ()


def test_class_values(source_builder: SourceBuilder) -> None:
    point, _ = _types(source_builder)
    x, origin = point.values()
    assert x.level == 3
    assert x.decl() == "x: float = 0.0"
    assert x.summary() == "Horizontal coordinate."
    assert origin.kind == "const"
    assert origin.summary() == "ORIGIN is a class-level constant."


def test_class_examples(source_builder: SourceBuilder) -> None:
    point, _ = _types(source_builder)
    (example,) = point.examples()
    assert example.level == 3
    assert example.code() == "Point(1, 2).norm()"
    assert example.output() == "2.23606797749979"
    assert all(block.kind != "doctest" for block in point.blocks())


def test_example_has_no_decl(source_builder: SourceBuilder) -> None:
    point, _ = _types(source_builder)
    example = point.examples()[0]
    with pytest.raises(DeclUnavailableError, match="Point example"):
        example.decl()


NESTED_SOURCE = '''
class Outer:
    """Outer holder."""

    class Inner:
        """Inner settings."""

        LEVEL = 1

        def run(self):
            pass

        class Deepest:
            pass

    class _Hidden:
        pass
'''


def test_nested_classes_are_one_level_deeper(source_builder: SourceBuilder) -> None:
    source_builder.write({"nested.py": NESTED_SOURCE})
    (outer,) = source_builder.load("nested.py").types()
    assert outer.level == 2
    (inner,) = outer.types()
    assert inner.level == 3
    assert inner.title == "Outer.Inner"
    assert inner.heading() == "class Outer.Inner"
    assert inner.summary() == "Inner settings."
    assert [(v.title, v.level) for v in inner.values()] == [("LEVEL", 4)]
    (run,) = inner.methods()
    assert run.title == "Outer.Inner.run"
    assert run.level == 4
    (deepest,) = inner.types()
    assert deepest.level == 4
    assert deepest.title == "Outer.Inner.Deepest"
    assert (deepest.location().start.line, deepest.location().end.line) == (12, 13)
    assert "class Inner" not in outer.decl()


def test_private_nested_classes_follow_visibility(source_builder: SourceBuilder) -> None:
    source_builder.write({"nested.py": NESTED_SOURCE})
    (outer,) = source_builder.load("nested.py", include_private=True).types()
    assert [t.name for t in outer.types()] == ["Inner", "_Hidden"]
