"""Repository inspection used to build source permalinks."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional

from ..logging import get_logger
from .location import Repo

_LOGGER = get_logger("lang.repo")

_DEFAULT_BRANCH = "main"
_SCP_REMOTE = re.compile(r"^(?:[\w.-]+@)?(?P<host>[\w.-]+):(?P<path>(?!//).+)$")
_URL_REMOTE = re.compile(r"^(?:ssh|git|https?)://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?/(?P<path>.+)$")


@dataclass(frozen=True)
class RepoOverride:
    """Repository values supplied through configuration or flags."""

    remote: Optional[str] = None
    default_branch: Optional[str] = None
    path_from_root: Optional[str] = None


class RepoInspector:
    """Reads remote, default branch and root of the enclosing Git repository."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def inspect(self, work_dir: str | Path) -> Optional[Repo]:
        """Return repository metadata for ``work_dir`` or ``None``."""
        cwd = Path(work_dir).resolve()
        try:
            toplevel = self._run(["git", "rev-parse", "--show-toplevel"], cwd=cwd).strip()
        except (OSError, subprocess.CalledProcessError) as exc:
            _LOGGER.debug("No git repository found for %s: %s", cwd, exc)
            return None
        if not toplevel:
            return None

        try:
            remote = self._run(["git", "config", "--get", "remote.origin.url"], cwd=cwd).strip()
        except (OSError, subprocess.CalledProcessError):
            remote = ""
        if not remote:
            _LOGGER.debug("Repository at %s has no origin remote; source links disabled", toplevel)
            return None

        return Repo(
            remote=normalize_remote(remote),
            default_branch=self._default_branch(cwd),
            path_from_root=path_from_root(Path(toplevel), cwd),
        )

    def _default_branch(self, cwd: Path) -> str:
        try:
            ref = self._run(["git", "symbolic-ref", "refs/remotes/origin/HEAD"], cwd=cwd).strip()
        except (OSError, subprocess.CalledProcessError):
            _LOGGER.debug("origin/HEAD is not set; assuming '%s'", _DEFAULT_BRANCH)
            return _DEFAULT_BRANCH
        prefix = "refs/remotes/origin/"
        if ref.startswith(prefix) and len(ref) > len(prefix):
            return ref[len(prefix):]
        return _DEFAULT_BRANCH

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        return self._runner(args, cwd=cwd, capture_output=True)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        return completed.stdout if capture_output else ""


def normalize_remote(remote: str) -> str:
    """Turn a clone URL into the browsable https URL of the repository."""
    value = remote.strip()
    match = _URL_REMOTE.match(value)
    if match is None and "://" not in value:
        match = _SCP_REMOTE.match(value)
    if match is not None:
        value = f"https://{match.group('host')}/{match.group('path')}"
    value = value.rstrip("/")
    if value.endswith(".git"):
        value = value[: -len(".git")]
    return value


def path_from_root(root: Path, work_dir: Path) -> str:
    """Return ``work_dir`` relative to ``root`` as a ``/``-prefixed path."""
    try:
        relative = work_dir.resolve().relative_to(root.resolve())
    except ValueError:
        return "/"
    text = relative.as_posix()
    if text in ("", "."):
        return "/"
    return f"/{text}"


def resolve_repo(
    work_dir: str | Path,
    override: RepoOverride | None = None,
    inspector: RepoInspector | None = None,
) -> Optional[Repo]:
    """Merge configured repository values over what Git reports."""
    override = override or RepoOverride()
    if override.remote:
        return Repo(
            remote=normalize_remote(override.remote),
            default_branch=override.default_branch or _DEFAULT_BRANCH,
            path_from_root=override.path_from_root or "/",
        )

    detected = (inspector or RepoInspector()).inspect(work_dir)
    if detected is None:
        return None
    return Repo(
        remote=detected.remote,
        default_branch=override.default_branch or detected.default_branch,
        path_from_root=override.path_from_root or detected.path_from_root,
    )


__all__ = ["RepoInspector", "RepoOverride", "normalize_remote", "path_from_root", "resolve_repo"]
