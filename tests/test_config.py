"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pymarkdoc.config import CONFIG_FILENAME, ConfigError, load_config


def test_missing_config_yields_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config.root == tmp_path.resolve()
    assert config.format == "github"
    assert config.index is True
    assert config.output is None
    assert config.exclude_paths == []
    assert config.repository.to_override().remote is None


def test_load_config_reads_all_fields(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        "\n".join(
            [
                "format: gitlab",
                "output: '{dir}/README.md'",
                "embed: true",
                "include_private: 'yes'",
                "recursive: true",
                "index: false",
                "sort: true",
                "header: Generated",
                "templates_dir: templates",
                "exclude_paths:",
                "  - build/",
                "  - '*_test.py'",
                "repository:",
                "  url: https://gitlab.com/group/project",
                "  default_branch: trunk",
                "  path: /src",
            ]
        ),
        encoding="utf-8",
    )
    config = load_config(tmp_path / CONFIG_FILENAME)
    assert config.format == "gitlab"
    assert config.output == "{dir}/README.md"
    assert config.embed is True
    assert config.include_private is True
    assert config.recursive is True
    assert config.index is False
    assert config.sort is True
    assert config.header == "Generated"
    assert config.footer is None
    assert config.templates_dir == tmp_path.resolve() / "templates"
    assert config.exclude_paths == ["build/", "*_test.py"]
    override = config.repository.to_override()
    assert override.remote == "https://gitlab.com/group/project"
    assert override.default_branch == "trunk"
    assert override.path_from_root == "/src"


def test_empty_config_file(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).format == "github"


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_invalid_yaml_is_rejected(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("format: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
