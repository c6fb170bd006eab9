"""Jinja2 environment construction shared by documents and prompts."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


def create_env(templates_dir: Path | None = None, *, autoescape: bool = False) -> Environment:
    """Return an environment that prefers ``templates_dir`` over the bundled templates."""
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(DEFAULT_TEMPLATES_DIR))
    # ensure uniqueness preserving order
    ordered = list(dict.fromkeys(directories))
    loader = FileSystemLoader(ordered)
    return Environment(loader=loader, autoescape=autoescape, trim_blocks=True, lstrip_blocks=True)


__all__ = ["DEFAULT_TEMPLATES_DIR", "create_env"]
