"""Rendering tests covering the built-in templates."""

from __future__ import annotations

from pathlib import Path

from pymarkdoc.format import GitHubFlavoredMarkdown, PlainMarkdown
from pymarkdoc.lang.location import Repo
from pymarkdoc.render import RenderOptions, Renderer
from tests._fixtures.source_builder import SourceBuilder

MODULE_SOURCE = '''
"""Math helpers for *tests*.

>>> 1 + 1
2
"""

LIMIT = 10

counter = 0


def zeta(a, b):
    """Add two numbers."""
    return a + b


def alpha():
    pass


class Point:
    """A point."""

    def norm(self):
        """Return the norm."""
'''

REPO = Repo(remote="https://github.com/org/repo", default_branch="main")


def _render(source_builder: SourceBuilder, **kwargs) -> str:  # type: ignore[no-untyped-def]
    source_builder.write({"mathx.py": MODULE_SOURCE})
    package = source_builder.load("mathx.py", repo=kwargs.pop("repo", None))
    formatter = kwargs.pop("formatter", GitHubFlavoredMarkdown())
    return Renderer(formatter, **kwargs).render_package(package)


def test_render_package_layout(source_builder: SourceBuilder) -> None:
    text = _render(source_builder)
    assert text.startswith("# mathx\n\n```python\nimport mathx\n```\n")
    assert "Math helpers for \\*tests\\*." in text
    assert "## Index" in text
    assert "- [Constants](<#constants>)" in text
    assert "- [Variables](<#variables>)" in text
    assert "- [class Point](<#class-point>)" in text
    assert "    - [def Point.norm](<#def-pointnorm>)" in text
    assert "## Constants\n\n```python\nLIMIT = 10\n```" in text
    assert "## Variables\n\n```python\ncounter = 0\n```" in text
    assert "## def zeta\n\n```python\ndef zeta(a, b):\n    ...\n```\n\nAdd two numbers." in text
    assert "### def Point.norm" in text
    assert text.endswith("\n")
    assert not text.endswith("\n\n")


def test_render_keeps_declaration_order_unless_sorted(source_builder: SourceBuilder) -> None:
    unsorted = _render(source_builder)
    assert unsorted.index("## def zeta") < unsorted.index("## def alpha")
    sorted_text = Renderer(
        GitHubFlavoredMarkdown(), options=RenderOptions(sort=True)
    ).render_package(source_builder.load("mathx.py"))
    assert sorted_text.index("## def alpha") < sorted_text.index("## def zeta")


def test_render_without_index(source_builder: SourceBuilder) -> None:
    text = _render(source_builder, options=RenderOptions(index=False))
    assert "## Index" not in text


def test_render_links_headers_to_source(source_builder: SourceBuilder) -> None:
    text = _render(source_builder, repo=REPO)
    assert "## [def zeta](<https://github.com/org/repo/blob/main/mathx.py#L12-L14>)" in text
    assert "## [class Point](<https://github.com/org/repo/blob/main/mathx.py#L21-L25>)" in text


def test_render_examples_in_accordion(source_builder: SourceBuilder) -> None:
    text = _render(source_builder)
    assert "<details><summary>mathx example</summary>" in text
    assert "```python\n1 + 1\n```" in text
    assert "### Output\n\n```\n2\n```" in text


def test_render_plain_format(source_builder: SourceBuilder) -> None:
    text = _render(source_builder, formatter=PlainMarkdown(), repo=REPO)
    assert "<details>" not in text
    assert "**mathx example**" in text
    assert "## def zeta" in text
    assert "](" not in text


def test_render_file_wraps_header_and_footer(source_builder: SourceBuilder) -> None:
    source_builder.write({"one.py": "A = 1\n", "two.py": "B = 2\n"})
    packages = [source_builder.load("one.py"), source_builder.load("two.py")]
    text = Renderer(GitHubFlavoredMarkdown()).render_file(
        packages, header="Generated file.\n", footer="\nThe end."
    )
    assert text.startswith("Generated file.\n\n# one\n")
    assert "\n# two\n" in text
    assert text.endswith("The end.\n")


def test_templates_dir_overrides_builtin(source_builder: SourceBuilder, tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "value.j2").write_text("VALUE {{ value.title }}\n", encoding="utf-8")
    text = _render(source_builder, templates_dir=templates)
    assert "VALUE LIMIT" in text
    assert "VALUE counter" in text
    assert "## def zeta" in text


def test_render_nested_classes(source_builder: SourceBuilder) -> None:
    source_builder.write(
        {
            "models.py": '''
            class Outer:
                """Outer holder."""

                class Inner:
                    """Inner settings."""

                    def run(self):
                        pass
            '''
        }
    )
    package = source_builder.load("models.py")
    text = Renderer(GitHubFlavoredMarkdown()).render_package(package)
    assert "- [class Outer](<#class-outer>)" in text
    assert "    - [class Outer.Inner](<#class-outerinner>)" in text
    assert "        - [def Outer.Inner.run](<#def-outerinnerrun>)" in text
    assert "## class Outer\n\n```python\nclass Outer:\n    ...\n```\n\nOuter holder." in text
    assert "### class Outer.Inner\n\n```python\nclass Inner:\n    ...\n```\n\nInner settings." in text
    assert "#### def Outer.Inner.run" in text
