"""Output dialects and formatter discovery."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List

from .azure import AzureDevOpsMarkdown
from .base import Formatter
from .core import HeaderLevelError
from .github import GitHubFlavoredMarkdown
from .gitlab import GitLabFlavoredMarkdown
from .plain import PlainMarkdown

_ENTRY_POINT_GROUP = "pymarkdoc.formats"

_BUILTIN_FACTORIES: Dict[str, Callable[[], Formatter]] = {
    "github": GitHubFlavoredMarkdown,
    "gitlab": GitLabFlavoredMarkdown,
    "azure-devops": AzureDevOpsMarkdown,
    "plain": PlainMarkdown,
}


def available_formats() -> List[str]:
    """Return the names accepted by :func:`get_formatter`."""
    names = list(_BUILTIN_FACTORIES)
    for entry in _iter_entry_points():
        if entry.name.lower() not in names:
            names.append(entry.name.lower())
    return names


def get_formatter(name: str) -> Formatter:
    """Instantiate the formatter registered under ``name``."""
    key = name.lower()
    factory = _BUILTIN_FACTORIES.get(key)
    if factory is not None:
        return factory()

    for entry in _iter_entry_points():
        if entry.name.lower() != key:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:
            raise RuntimeError(f"Failed to load format entry point '{entry.name}': {exc}") from exc
        return _coerce_formatter(loaded)

    known = ", ".join(available_formats())
    raise ValueError(f"Unknown format '{name}' (expected one of: {known})")


def _coerce_formatter(obj: object) -> Formatter:
    if isinstance(obj, Formatter):
        return obj
    if isinstance(obj, type) and issubclass(obj, Formatter):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Formatter):
            return instance
    raise TypeError("Format entry point must be a Formatter subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = [
    "AzureDevOpsMarkdown",
    "Formatter",
    "GitHubFlavoredMarkdown",
    "GitLabFlavoredMarkdown",
    "HeaderLevelError",
    "PlainMarkdown",
    "available_formats",
    "get_formatter",
]
