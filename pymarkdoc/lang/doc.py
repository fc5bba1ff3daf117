"""Docstring and doc comment handling."""

from __future__ import annotations

import inspect
import re
import textwrap
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_END = re.compile(r"\.(?=\s|$)")
_UNDERLINE = re.compile(r"^(-{3,}|={3,})\s*$")
_PROMPT = ">>>"
_CONTINUATION = "..."


@dataclass(frozen=True)
class Block:
    """One renderable piece of a docstring."""

    kind: str
    text: str
    language: str = ""


def clean(text: Optional[str]) -> str:
    """Normalise docstring indentation and surrounding blank lines."""
    if not text:
        return ""
    return inspect.cleandoc(text)


def summary(text: str) -> str:
    """Return the first sentence of ``text``.

    The sentence ends at the first period followed by whitespace or the end of
    the first paragraph. Abbreviations such as "e.g." end the sentence early.
    """
    stripped = text.strip()
    if not stripped:
        return ""
    paragraph = _PARAGRAPH_BREAK.split(stripped, maxsplit=1)[0]
    collapsed = " ".join(paragraph.split())
    match = _SENTENCE_END.search(collapsed)
    if match is None:
        return collapsed
    return collapsed[: match.end()]


def comment_block(lines: Sequence[str], lineno: int) -> str:
    """Return the ``#`` comment lines directly above 1-based ``lineno``."""
    collected: List[str] = []
    index = lineno - 2
    while index >= 0:
        stripped = lines[index].strip()
        if not stripped.startswith("#") or stripped.startswith("#!"):
            break
        body = stripped[1:]
        if body.startswith(" "):
            body = body[1:]
        collected.append(body.rstrip())
        index -= 1
    collected.reverse()
    return "\n".join(collected).strip("\n")


def parse_blocks(text: str) -> List[Block]:
    """Split a cleaned docstring into paragraphs, headers and code blocks."""
    lines = text.splitlines()
    blocks: List[Block] = []
    paragraph: List[str] = []

    def flush() -> None:
        if paragraph:
            blocks.append(Block("paragraph", " ".join(" ".join(paragraph).split())))
            paragraph.clear()

    index = 0
    while index < len(lines):
        line = lines[index]
        stripped = line.strip()

        if not stripped:
            flush()
            index += 1
            continue

        if stripped.startswith(_PROMPT) and not paragraph:
            session: List[str] = []
            while index < len(lines) and lines[index].strip():
                session.append(lines[index])
                index += 1
            blocks.append(Block("doctest", textwrap.dedent("\n".join(session)), "python"))
            continue

        if line[:1].isspace() and not paragraph:
            code: List[str] = []
            while index < len(lines) and (not lines[index].strip() or lines[index][:1].isspace()):
                code.append(lines[index])
                index += 1
            while code and not code[-1].strip():
                code.pop()
            blocks.append(Block("code", textwrap.dedent("\n".join(code)), "python"))
            continue

        if (
            not paragraph
            and index + 1 < len(lines)
            and _UNDERLINE.match(lines[index + 1].strip())
        ):
            blocks.append(Block("header", stripped))
            index += 2
            continue

        paragraph.append(stripped)
        index += 1

    flush()
    return blocks


def split_examples(
    blocks: Sequence[Block],
) -> Tuple[List[Block], List[Tuple[str, Block]]]:
    """Separate doctest sessions from the remaining blocks.

    A paragraph ending in ``:`` right before a session introduces it and moves
    along with it.
    """
    remaining: List[Block] = []
    sessions: List[Tuple[str, Block]] = []
    for block in blocks:
        if block.kind != "doctest":
            remaining.append(block)
            continue
        intro = ""
        if remaining and remaining[-1].kind == "paragraph" and remaining[-1].text.endswith(":"):
            intro = remaining.pop().text
        sessions.append((intro, block))
    return remaining, sessions


def session_parts(session: str) -> Tuple[str, str]:
    """Return the source and expected output of a doctest session."""
    source: List[str] = []
    output: List[str] = []
    for line in session.splitlines():
        stripped = line.lstrip()
        if stripped.startswith(_PROMPT):
            source.append(stripped[len(_PROMPT):].removeprefix(" "))
        elif stripped.startswith(_CONTINUATION) and source:
            source.append(stripped[len(_CONTINUATION):].removeprefix(" "))
        else:
            output.append(line)
    return "\n".join(source), "\n".join(output)


__all__ = [
    "Block",
    "clean",
    "comment_block",
    "parse_blocks",
    "session_parts",
    "split_examples",
    "summary",
]
