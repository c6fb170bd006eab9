"""Tests for uipreview.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from uipreview.config import ConfigError, PreviewConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, PreviewConfig)
    assert config.root == tmp_path.resolve()
    assert config.transform.entry_symbol == "App"
    assert config.transform.removed_modules == ["react", "react-dom"]
    assert config.transform.tracked_modules == {"lucide-react": "Lucide", "recharts": "Recharts"}
    assert config.runtime.react_url == "https://esm.sh/react@18.2.0"
    assert config.theme.font_family == "Sarabun"
    assert config.validation.enabled == []


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".uipreview.yml").write_text(
        """
transform:
  entry_symbol: Root
  removed_modules: [react]
  tracked_modules:
    lucide-react: Icons
runtime:
  tailwind_url: "https://example.test/tailwind.js"
theme:
  font_family: Inter
  primary_color: "#111111"
validation:
  enabled: [tailwind, accessibility]
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.transform.entry_symbol == "Root"
    assert config.transform.removed_modules == ["react"]
    assert config.transform.tracked_modules == {"lucide-react": "Icons"}
    assert config.runtime.tailwind_url == "https://example.test/tailwind.js"
    assert config.runtime.babel_url.startswith("https://unpkg.com/@babel/standalone")
    assert config.theme.font_family == "Inter"
    assert config.theme.primary_color == "#111111"
    assert config.validation.enabled == ["tailwind", "accessibility"]


def test_load_config_accepts_explicit_file(tmp_path: Path) -> None:
    config_file = tmp_path / "preview.yml"
    config_file.write_text("theme:\n  font_family: Prompt\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.theme.font_family == "Prompt"
    assert config.root == tmp_path.resolve()


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".uipreview.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).transform.entry_symbol == "App"


def test_load_config_rejects_malformed_yaml(tmp_path: Path) -> None:
    (tmp_path / ".uipreview.yml").write_text("transform: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".uipreview.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_entry_symbol(tmp_path: Path) -> None:
    (tmp_path / ".uipreview.yml").write_text("transform:\n  entry_symbol: 'my app'\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_tracked_module_list(tmp_path: Path) -> None:
    (tmp_path / ".uipreview.yml").write_text(
        "transform:\n  tracked_modules: [lucide-react]\n", encoding="utf-8"
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)
