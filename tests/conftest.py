from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.source_builder import SourceBuilder


@pytest.fixture
def source_builder(tmp_path: Path) -> SourceBuilder:
    """Provide a source builder rooted at the pytest tmp_path."""
    return SourceBuilder(tmp_path)
