"""CLI entrypoint for pymarkdoc."""

from __future__ import annotations

import argparse
import sys
from collections import OrderedDict
from fnmatch import fnmatch
from pathlib import Path
from typing import Dict, List, Optional

from .config import ConfigError, PyMarkdocConfig, load_config
from .format import HeaderLevelError, available_formats, get_formatter
from .lang.location import Repo
from .lang.package import Package, PackageLoadError, discover_modules
from .lang.repo import resolve_repo
from .logging import configure_logging, get_logger
from .output import OutputPathError, check_output, resolve_output_path, write_output
from .render import RenderOptions, Renderer

_LOGGER = get_logger("cli")

_RECURSIVE_SUFFIX = "/..."


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pymarkdoc",
        description="Generate markdown documentation for Python packages.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Modules or package directories to document; a trailing /... recurses.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity; repeat for debug output.",
    )
    parser.add_argument("--log-file", help="Also write log records to this file.")
    parser.add_argument(
        "-f",
        "--format",
        help=f"Output dialect ({', '.join(available_formats())}).",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output file; {dir}, {name} and {import_path} expand per package.",
    )
    parser.add_argument(
        "-e",
        "--embed",
        action="store_true",
        default=None,
        help="Replace only the region between pymarkdoc embed markers in the output file.",
    )
    parser.add_argument(
        "-c",
        "--check",
        action="store_true",
        help="Exit with status 1 when an output file is out of date instead of writing it.",
    )
    parser.add_argument(
        "-u",
        "--include-private",
        action="store_true",
        default=None,
        help="Document names that start with an underscore.",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        default=None,
        help="Document every module beneath the given directories.",
    )
    parser.add_argument("--header", help="Text placed before the generated documentation.")
    parser.add_argument("--footer", help="Text placed after the generated documentation.")
    parser.add_argument("--templates-dir", help="Directory with templates overriding the built-ins.")
    parser.add_argument("--no-index", action="store_true", help="Omit the index section.")
    parser.add_argument("--sort", action="store_true", default=None, help="Sort symbols by name.")
    parser.add_argument("--repository-url", help="Browsable URL of the hosting repository.")
    parser.add_argument("--repository-default-branch", help="Branch used in source links.")
    parser.add_argument(
        "--repository-path",
        help="Working directory relative to the repository root, e.g. /src.",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .pymarkdoc.yml or the directory holding it.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for pymarkdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbosity=args.verbose,
        log_file=Path(args.log_file) if args.log_file else None,
    )

    try:
        config = _merge(load_config(Path(args.config)), args)
    except ConfigError as exc:
        parser.exit(1, f"pymarkdoc: {exc}\n")

    try:
        formatter = get_formatter(config.format)
    except (ValueError, TypeError, RuntimeError) as exc:
        parser.exit(1, f"pymarkdoc: {exc}\n")

    work_dir = Path.cwd()
    repo = resolve_repo(work_dir, config.repository.to_override())
    if repo is None:
        _LOGGER.info("No repository detected; source links are disabled")

    try:
        packages = _load_packages(args.paths, config, work_dir, repo)
    except PackageLoadError as exc:
        parser.exit(1, f"pymarkdoc: {exc}\n")
    if not packages:
        parser.exit(1, "pymarkdoc: no Python modules found\n")

    renderer = Renderer(
        formatter,
        templates_dir=config.templates_dir,
        options=RenderOptions(index=config.index, sort=config.sort),
    )

    try:
        documents = _render(renderer, packages, config)
    except (HeaderLevelError, OutputPathError) as exc:
        parser.exit(1, f"pymarkdoc: {exc}\n")

    stale: List[Path] = []
    for path, text in documents.items():
        if args.check:
            if path is None:
                parser.exit(1, "pymarkdoc: --check requires --output\n")
            if not check_output(path, text, embed_output=config.embed):
                stale.append(path)
            continue
        write_output(path, text, embed_output=config.embed)

    if stale:
        listed = ", ".join(str(path) for path in stale)
        parser.exit(1, f"pymarkdoc: documentation is out of date: {listed}\n")


def _merge(config: PyMarkdocConfig, args: argparse.Namespace) -> PyMarkdocConfig:
    if args.format:
        config.format = args.format
    if args.output:
        config.output = args.output
    if args.embed is not None:
        config.embed = args.embed
    if args.include_private is not None:
        config.include_private = args.include_private
    if args.recursive is not None:
        config.recursive = args.recursive
    if args.header is not None:
        config.header = args.header
    if args.footer is not None:
        config.footer = args.footer
    if args.templates_dir:
        config.templates_dir = Path(args.templates_dir)
    if args.no_index:
        config.index = False
    if args.sort is not None:
        config.sort = args.sort
    if args.repository_url:
        config.repository.url = args.repository_url
    if args.repository_default_branch:
        config.repository.default_branch = args.repository_default_branch
    if args.repository_path:
        config.repository.path = args.repository_path
    return config


def _load_packages(
    paths: List[str], config: PyMarkdocConfig, work_dir: Path, repo: Optional[Repo]
) -> List[Package]:
    def excluded(candidate: Path) -> bool:
        try:
            rel = candidate.resolve().relative_to(work_dir.resolve()).as_posix()
        except ValueError:
            rel = candidate.as_posix()
        return any(fnmatch(rel, pattern) or rel.startswith(pattern) for pattern in config.exclude_paths)

    packages: List[Package] = []
    for raw in paths:
        recursive = config.recursive
        if raw.endswith(_RECURSIVE_SUFFIX):
            raw = raw[: -len(_RECURSIVE_SUFFIX)] or "."
            recursive = True
        for module in discover_modules(raw, recursive=recursive, exclude=excluded):
            packages.append(
                Package.from_path(
                    module,
                    work_dir=work_dir,
                    repo=repo,
                    include_private=config.include_private,
                )
            )
    return packages


def _render(
    renderer: Renderer, packages: List[Package], config: PyMarkdocConfig
) -> Dict[Optional[Path], str]:
    grouped: "OrderedDict[Optional[Path], List[Package]]" = OrderedDict()
    for package in packages:
        path = resolve_output_path(config.output, package) if config.output else None
        grouped.setdefault(path, []).append(package)
    return {
        path: renderer.render_file(group, header=config.header, footer=config.footer)
        for path, group in grouped.items()
    }


if __name__ == "__main__":
    main(sys.argv[1:])
