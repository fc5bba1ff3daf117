"""Configuration loading for pymarkdoc (.pymarkdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .lang.repo import RepoOverride

CONFIG_FILENAME = ".pymarkdoc.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class RepositoryConfig:
    """Overrides for the detected hosting repository."""

    url: Optional[str] = None
    default_branch: Optional[str] = None
    path: Optional[str] = None

    def to_override(self) -> RepoOverride:
        return RepoOverride(
            remote=self.url,
            default_branch=self.default_branch,
            path_from_root=self.path,
        )


@dataclass
class PyMarkdocConfig:
    """Settings defined in .pymarkdoc.yml."""

    root: Path
    format: str = "github"
    output: Optional[str] = None
    embed: bool = False
    include_private: bool = False
    recursive: bool = False
    index: bool = True
    sort: bool = False
    header: Optional[str] = None
    footer: Optional[str] = None
    templates_dir: Optional[Path] = None
    exclude_paths: List[str] = field(default_factory=list)
    repository: RepositoryConfig = field(default_factory=RepositoryConfig)


def load_config(config_path: Path) -> PyMarkdocConfig:
    """Load configuration from disk; a missing file yields the defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PyMarkdocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = PyMarkdocConfig(root=root)
    config.format = _as_str(data.get("format")) or config.format
    config.output = _as_str(data.get("output"))
    config.embed = _as_bool(data.get("embed")) or False
    config.include_private = _as_bool(data.get("include_private")) or False
    config.recursive = _as_bool(data.get("recursive")) or False
    index = _as_bool(data.get("index"))
    config.index = True if index is None else index
    config.sort = _as_bool(data.get("sort")) or False
    config.header = _as_str(data.get("header"))
    config.footer = _as_str(data.get("footer"))
    templates_dir = _as_str(data.get("templates_dir"))
    config.templates_dir = root / templates_dir if templates_dir else None
    config.exclude_paths = _as_str_list(data.get("exclude_paths"))

    repo_data = _as_dict(data.get("repository"))
    if repo_data:
        config.repository = RepositoryConfig(
            url=_as_str(repo_data.get("url")),
            default_branch=_as_str(repo_data.get("default_branch")),
            path=_as_str(repo_data.get("path")),
        )

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "PyMarkdocConfig", "RepositoryConfig", "load_config"]
