"""Static Validator: heuristic checks over generated component source."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from ..models import ValidationResult
from .accessibility import AccessibilityCheck
from .attributes import AttributeNamingCheck
from .base import Check, CodeValidator, WARNING_PREFIX, warning
from .markup import ListKeyCheck, MarkupSyntaxCheck
from .tailwind import UtilityClassCheck

_ENTRY_POINT_GROUP = "uipreview.checks"

# Order here is the order messages are reported in.
_BUILTIN_FACTORIES: dict[str, Callable[[], Check]] = {
    "attributes": AttributeNamingCheck,
    "markup": MarkupSyntaxCheck,
    "lists": ListKeyCheck,
    "accessibility": AccessibilityCheck,
    "tailwind": UtilityClassCheck,
}


def discover_checks(enabled: Sequence[str] | None = None) -> List[Check]:
    """Return instantiated checks, honoring optional enabled names.

    ``None`` or an empty sequence selects every discovered check.
    """

    enabled_set: Set[str] | None = None
    if enabled:
        enabled_set = {name.lower() for name in enabled}

    checks: List[Check] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], Check]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not callable(getattr(instance, "run", None)):
            raise TypeError(f"Check factory for '{name}' did not return a check")
        checks.append(instance)
        seen.add(key)

    for name, factory in _BUILTIN_FACTORIES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load check entry point '{name}': {exc}") from exc
        _add(name, _coerce_factory(loaded))

    if enabled_set is not None:
        missing = ", ".join(sorted(enabled_set - seen))
        if missing:
            raise ValueError(f"Unknown checks requested: {missing}")

    return checks


def validate_source(source: str, enabled: Sequence[str] | None = None) -> ValidationResult:
    """Run the selected checks over ``source``."""
    return CodeValidator(discover_checks(enabled)).validate(source)


def _coerce_factory(obj: object) -> Callable[[], Check]:
    if isinstance(obj, type):
        return obj  # type: ignore[return-value]
    if callable(getattr(obj, "run", None)):
        return lambda: obj  # type: ignore[return-value]
    if callable(obj):
        return obj  # type: ignore[return-value]
    raise TypeError("Check entry point must be a check class, instance or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "AccessibilityCheck",
    "AttributeNamingCheck",
    "Check",
    "CodeValidator",
    "ListKeyCheck",
    "MarkupSyntaxCheck",
    "UtilityClassCheck",
    "WARNING_PREFIX",
    "discover_checks",
    "validate_source",
    "warning",
]
