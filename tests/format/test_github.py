"""Tests for the GitHub-flavored markdown formatter."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from pymarkdoc.format import GitHubFlavoredMarkdown, HeaderLevelError
from pymarkdoc.lang.location import Location, Position, Repo


def _location(tmp_path: Path, repo: Repo | None) -> Location:
    return Location(
        start=Position(line=12, col=1),
        end=Position(line=14, col=43),
        filepath=os.path.join(str(tmp_path), "subdir", "file.py"),
        work_dir=str(tmp_path),
        repo=repo,
    )


def test_bold() -> None:
    assert GitHubFlavoredMarkdown().bold("sample text") == "**sample text**"


def test_code_block() -> None:
    result = GitHubFlavoredMarkdown().code_block("go", "Line 1\nLine 2")
    assert result == "```go\nLine 1\nLine 2\n```"


def test_code_block_without_language() -> None:
    result = GitHubFlavoredMarkdown().code_block("", "Line 1\nLine 2")
    assert result == "```\nLine 1\nLine 2\n```"


def test_code_block_keeps_indentation() -> None:
    code = "def f():\n    return 1\n\n\tx = 2"
    result = GitHubFlavoredMarkdown().code_block("python", code)
    assert result == f"```python\n{code}\n```"


@pytest.mark.parametrize(
    ("text", "level", "expected"),
    [
        ("header text", 1, "# header text"),
        ("level 2", 2, "## level 2"),
        ("level 3", 3, "### level 3"),
        ("level 4", 4, "#### level 4"),
        ("level 5", 5, "##### level 5"),
        ("level 6", 6, "###### level 6"),
        ("other level", 12, "###### other level"),
        ("with * escape", 2, "## with \\* escape"),
        ("*many* *stars*", 1, "# \\*many\\* \\*stars\\*"),
    ],
)
def test_header(text: str, level: int, expected: str) -> None:
    assert GitHubFlavoredMarkdown().header(level, text) == expected


@pytest.mark.parametrize("level", [0, -1, -12])
def test_header_rejects_level_below_one(level: int) -> None:
    formatter = GitHubFlavoredMarkdown()
    with pytest.raises(HeaderLevelError, match="header level cannot be less than 1"):
        formatter.header(level, "invalid")
    with pytest.raises(HeaderLevelError):
        formatter.raw_header(level, "invalid")


def test_header_level_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        GitHubFlavoredMarkdown().header(-1, "invalid")


@pytest.mark.parametrize(
    ("text", "level", "expected"),
    [
        ("header text", 1, "# header text"),
        ("with * escape", 2, "## with * escape"),
        ("deep", 9, "###### deep"),
    ],
)
def test_raw_header(text: str, level: int, expected: str) -> None:
    assert GitHubFlavoredMarkdown().raw_header(level, text) == expected


def test_raw_header_with_manual_escaping_matches_header() -> None:
    formatter = GitHubFlavoredMarkdown()
    text = "a * b ** c"
    raw = formatter.raw_header(3, text)
    assert raw.replace("*", "\\*") == formatter.header(3, text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Normal Header", "#normal-header"),
        (" Leading whitespace", "#leading-whitespace"),
        ("Multiple\t whitespace", "#multiple--whitespace"),
        ("Special(#)%^Characters", "#specialcharacters"),
        ("With:colon", "#withcolon"),
        ("def Client.send", "#def-clientsend"),
        ("Already-hyphenated", "#already-hyphenated"),
    ],
)
def test_local_href(text: str, expected: str) -> None:
    assert GitHubFlavoredMarkdown().local_href(text) == expected


@pytest.mark.parametrize(
    "text",
    ["Some Header", "class Parser", "snake_case_name", "Ünïcode Wörds 42", "a\tb  c!?"],
)
def test_local_href_is_stable_and_limited_to_slug_characters(text: str) -> None:
    formatter = GitHubFlavoredMarkdown()
    first = formatter.local_href(text)
    assert first == formatter.local_href(text)
    assert first.startswith("#")
    slug = first[1:]
    assert all(ch == "-" or ch.isdigit() or (ch.isalpha() and ch == ch.lower()) for ch in slug)


def test_code_href(tmp_path: Path) -> None:
    repo = Repo(
        remote="https://dev.azure.com/org/project/_git/repo",
        default_branch="master",
        path_from_root="/",
    )
    result = GitHubFlavoredMarkdown().code_href(_location(tmp_path, repo))
    assert result == "https://dev.azure.com/org/project/_git/repo/blob/master/subdir/file.py#L12-L14"


def test_code_href_includes_path_from_root(tmp_path: Path) -> None:
    repo = Repo(remote="https://github.com/org/repo", default_branch="main", path_from_root="/src")
    result = GitHubFlavoredMarkdown().code_href(_location(tmp_path, repo))
    assert result == "https://github.com/org/repo/blob/main/src/subdir/file.py#L12-L14"


def test_code_href_without_repo(tmp_path: Path) -> None:
    assert GitHubFlavoredMarkdown().code_href(_location(tmp_path, None)) == ""


def test_link() -> None:
    result = GitHubFlavoredMarkdown().link("link text", "https://test.com/a/b/c")
    assert result == "[link text](<https://test.com/a/b/c>)"


def test_list_entry() -> None:
    assert GitHubFlavoredMarkdown().list_entry(0, "list entry text") == "- list entry text"


def test_list_entry_nested() -> None:
    formatter = GitHubFlavoredMarkdown()
    assert formatter.list_entry(2, "nested text") == " " * 8 + "- nested text"
    assert formatter.list_entry(1, "nested text") == " " * 4 + "- nested text"


def test_list_entry_empty() -> None:
    assert GitHubFlavoredMarkdown().list_entry(0, "") == ""
    assert GitHubFlavoredMarkdown().list_entry(3, "") == ""


def test_escape() -> None:
    assert GitHubFlavoredMarkdown().escape("a_b *c* [d]") == "a\\_b \\*c\\* \\[d\\]"


def test_accordion() -> None:
    result = GitHubFlavoredMarkdown().accordion("Example", "body")
    assert result.startswith("<details><summary>Example</summary>")
    assert "\n\nbody\n\n" in result
    assert result.endswith("</details>")
