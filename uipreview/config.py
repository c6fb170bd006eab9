"""Configuration loading for uipreview (.uipreview.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".uipreview.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


def _default_tracked_modules() -> Dict[str, str]:
    return {"lucide-react": "Lucide", "recharts": "Recharts"}


@dataclass
class TransformConfig:
    """How imports and exports are rewritten for the preview document."""

    entry_symbol: str = "App"
    removed_modules: List[str] = field(default_factory=lambda: ["react", "react-dom"])
    # Ordered: the preamble binds modules in this order.
    tracked_modules: Dict[str, str] = field(default_factory=_default_tracked_modules)


@dataclass
class RuntimeConfig:
    """Script URLs loaded by the preview document before user code runs."""

    react_url: str = "https://esm.sh/react@18.2.0"
    react_dom_url: str = "https://esm.sh/react-dom@18.2.0/client"
    lucide_url: str = "https://esm.sh/lucide-react@0.300.0"
    recharts_url: str = "https://esm.sh/recharts@2.12.0"
    tailwind_url: str = "https://cdn.tailwindcss.com"
    babel_url: str = "https://unpkg.com/@babel/standalone@7/babel.min.js"


@dataclass
class ThemeConfig:
    """Tailwind theme extension applied inside the preview."""

    font_family: str = "Sarabun"
    primary_color: str = "#2563eb"


@dataclass
class ValidationConfig:
    """Validator check selection."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class PreviewConfig:
    """Represents the settings defined in .uipreview.yml."""

    root: Optional[Path] = None
    transform: TransformConfig = field(default_factory=TransformConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)


def load_config(config_path: Path) -> PreviewConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PreviewConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    transform = TransformConfig()
    transform_data = _as_dict(data.get("transform"))
    if transform_data:
        entry_symbol = _as_str(transform_data.get("entry_symbol"))
        if entry_symbol:
            if not entry_symbol.isidentifier():
                raise ConfigError(f"transform.entry_symbol is not a valid identifier: {entry_symbol!r}")
            transform.entry_symbol = entry_symbol
        if "removed_modules" in transform_data:
            transform.removed_modules = _as_str_list(transform_data.get("removed_modules"))
        if "tracked_modules" in transform_data:
            tracked = transform_data.get("tracked_modules")
            if not isinstance(tracked, dict):
                raise ConfigError("transform.tracked_modules must map module names to global names")
            transform.tracked_modules = {
                str(module): str(global_name) for module, global_name in tracked.items()
            }

    runtime = RuntimeConfig()
    runtime_data = _as_dict(data.get("runtime"))
    for key in ("react_url", "react_dom_url", "lucide_url", "recharts_url", "tailwind_url", "babel_url"):
        value = _as_str(runtime_data.get(key))
        if value:
            setattr(runtime, key, value)

    theme = ThemeConfig()
    theme_data = _as_dict(data.get("theme"))
    font_family = _as_str(theme_data.get("font_family"))
    if font_family:
        theme.font_family = font_family
    primary_color = _as_str(theme_data.get("primary_color"))
    if primary_color:
        theme.primary_color = primary_color

    validation = ValidationConfig()
    validation_data = _as_dict(data.get("validation"))
    if validation_data:
        validation.enabled = _as_str_list(validation_data.get("enabled"))

    return PreviewConfig(
        root=root,
        transform=transform,
        runtime=runtime,
        theme=theme,
        validation=validation,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "PreviewConfig",
    "RuntimeConfig",
    "ThemeConfig",
    "TransformConfig",
    "ValidationConfig",
    "load_config",
]
