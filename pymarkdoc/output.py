"""Writing rendered documentation, optionally embedded in an existing file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from .lang.package import Package
from .logging import get_logger

_LOGGER = get_logger("output")

EMBED_START = "<!-- pymarkdoc:embed:start -->"
EMBED_END = "<!-- pymarkdoc:embed:end -->"


class OutputPathError(ValueError):
    """Raised when an output path template cannot be expanded."""


def embed(existing: str, rendered: str) -> str:
    """Replace the marked region of ``existing`` with ``rendered``.

    Without markers the rendered block is appended inside a fresh pair.
    """
    block = f"{EMBED_START}\n\n{rendered.strip()}\n\n{EMBED_END}"
    if EMBED_START in existing and EMBED_END in existing:
        pre, rest = existing.split(EMBED_START, 1)
        if EMBED_END in rest:
            _, post = rest.split(EMBED_END, 1)
            return f"{pre}{block}{post}"
    if not existing.strip():
        return block + "\n"
    return f"{existing.rstrip()}\n\n{block}\n"


def target_text(path: Path, rendered: str, *, embed_output: bool = False) -> str:
    """Return the full file contents that writing ``rendered`` would produce."""
    if not embed_output:
        return rendered
    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    return embed(existing, rendered)


def write_output(
    path: Optional[Path],
    rendered: str,
    *,
    embed_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Write ``rendered`` to ``path``, or to ``stream``/stdout without a path."""
    if path is None:
        (stream or sys.stdout).write(rendered)
        return
    text = target_text(path, rendered, embed_output=embed_output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    _LOGGER.info("Wrote %s", path)


def check_output(path: Path, rendered: str, *, embed_output: bool = False) -> bool:
    """Return True when ``path`` already holds what would be written."""
    if not path.exists():
        _LOGGER.warning("%s does not exist", path)
        return False
    current = path.read_text(encoding="utf-8")
    expected = target_text(path, rendered, embed_output=embed_output)
    if current != expected:
        _LOGGER.warning("%s is out of date", path)
        return False
    return True


def resolve_output_path(template: str, package: Package) -> Path:
    """Expand ``{dir}``, ``{name}`` and ``{import_path}`` in an output template."""
    try:
        expanded = template.format(
            dir=package.dirname,
            name=package.name.rsplit(".", 1)[-1],
            import_path=package.import_path,
        )
    except KeyError as exc:
        raise OutputPathError(
            f"Unknown output placeholder {{{exc.args[0]}}} in {template!r} "
            "(expected {dir}, {name} or {import_path})"
        ) from exc
    except (AttributeError, IndexError, ValueError) as exc:
        raise OutputPathError(f"Invalid output template {template!r}: {exc}") from exc
    return Path(expanded)


__all__ = [
    "EMBED_END",
    "EMBED_START",
    "OutputPathError",
    "check_output",
    "embed",
    "resolve_output_path",
    "target_text",
    "write_output",
]
