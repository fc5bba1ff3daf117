"""Whitespace normalisation for rendered markdown."""

from __future__ import annotations

from typing import List


def normalize(markdown: str) -> str:
    """Tidy blank lines and trailing spaces outside code fences.

    Code fence contents are kept byte for byte.
    """
    text = markdown.replace("\r\n", "\n").replace("\r", "\n")
    cleaned: List[str] = []
    in_code = False
    previous_blank = True

    for line in text.split("\n"):
        if in_code:
            cleaned.append(line)
            if line.strip().startswith("```"):
                in_code = False
                previous_blank = False
            continue

        stripped = line.rstrip()
        if stripped.lstrip().startswith("```"):
            in_code = True
            cleaned.append(stripped)
            previous_blank = False
            continue

        if not stripped:
            if not previous_blank:
                cleaned.append("")
            previous_blank = True
            continue

        if stripped.startswith("#") and not previous_blank:
            cleaned.append("")
        cleaned.append(stripped)
        previous_blank = False

    while cleaned and cleaned[-1] == "":
        cleaned.pop()

    return "\n".join(cleaned) + "\n"


__all__ = ["normalize"]
