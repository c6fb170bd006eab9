from __future__ import annotations

from pathlib import Path

import pytest

from uipreview.transform import SourceTransformer


@pytest.fixture
def transformer() -> SourceTransformer:
    """Provide a transformer with default configuration."""
    return SourceTransformer()


@pytest.fixture
def write_source(tmp_path: Path):
    """Write component source into a temporary file and return its path."""

    def _write(content: str, name: str = "App.tsx") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
