"""Preamble and epilogue synthesis for the assembled preview program."""

from __future__ import annotations

import json
import re
from typing import Iterable, List, Mapping, Optional

from ..models import ImportBinding
from .rewriter import bindings_by_module

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def build_preamble(bindings: Iterable[ImportBinding], tracked_modules: Mapping[str, str]) -> str:
    """Bind imported names to the globals the preview document injects.

    Modules are emitted in ``tracked_modules`` order; within a module the named
    bindings come first as one destructuring statement, followed by the
    default/namespace alias. Modules without bindings emit nothing.
    """
    grouped = bindings_by_module(binding for binding in bindings if not binding.is_type_only)
    lines: List[str] = []
    for module, global_name in tracked_modules.items():
        module_bindings = grouped.get(module, [])
        named = _unique(
            _destructure_entry(binding)
            for binding in module_bindings
            if not binding.is_default_or_namespace
        )
        if named:
            lines.append(f"const {{ {', '.join(named)} }} = window.{global_name};")
        alias = _default_alias(module_bindings)
        if alias:
            lines.append(f"const {alias} = window.{global_name};")
    return "".join(f"{line}\n" for line in lines)


def build_epilogue(entry_symbol: str) -> str:
    """Invoke the render path, or fail loudly when no entry was exported."""
    target = f"window.{entry_symbol}"
    message = json.dumps(f"No default export found ({target} is undefined)")
    return f"if ({target}) {{ renderApp({target}); }} else {{ throw new Error({message}); }}"


def assemble_script(preamble: str, body: str, epilogue: str) -> str:
    return f"{preamble}{body.rstrip()}\n{epilogue}\n"


def _destructure_entry(binding: ImportBinding) -> str:
    imported = binding.imported_name or ""
    if imported == binding.local_name:
        return imported
    key = imported if _JS_IDENTIFIER.match(imported) else json.dumps(imported)
    return f"{key}: {binding.local_name}"


def _default_alias(bindings: Iterable[ImportBinding]) -> Optional[str]:
    alias: Optional[str] = None
    for binding in bindings:
        if binding.is_default_or_namespace:
            alias = binding.local_name
    return alias


def _unique(entries: Iterable[str]) -> List[str]:
    return [entry for entry in dict.fromkeys(entries) if entry]


__all__ = ["assemble_script", "build_epilogue", "build_preamble"]
