"""Tailwind utility-class hygiene checks."""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, Iterable, Iterator, List

from .base import warning

# className="..." / '...' / `...` and className={`...`}
_CLASS_ATTRIBUTE = re.compile(r"className\s*=\s*\{?\s*[\"'`]((?:[^\"'`\\]|\\.)*)[\"'`]")
_WHITESPACE = re.compile(r"\s+")
_FIXED_PIXELS = re.compile(r"^[whmp][trblxy]?-\[\d+px\]")
_VIEWPORT_HEIGHT = re.compile(r"-\[\d+vh\]")
_BARE_COLOR = re.compile(r"^(bg|text|border|ring|fill|stroke)-([a-z]+)$")

_INVENTED_CLASSES: Dict[str, str] = {
    "flex-center": "Use 'flex items-center justify-center'.",
    "flex-middle": "Use 'flex items-center justify-center'.",
    "flex-between": "Use 'flex justify-between'.",
    "text-body": "Use 'text-base' or 'text-gray-XXX'.",
    "align-center": "Use 'items-center' or 'text-center'.",
}

_BOOTSTRAP_CLASSES: Dict[str, str] = {
    "container-fluid": "'container-fluid' is Bootstrap. Use 'w-full px-4' or just 'container'.",
    "d-flex": "'d-flex' is Bootstrap. Use 'flex'.",
}
_MODERN_COLUMN_PREFIXES = ("col-span-", "col-start-", "col-end-")

_INVALID_HYBRIDS: Dict[str, str] = {
    "width-full": "w-full",
    "height-full": "h-full",
    "bg-white-500": "bg-white",
    "text-black-500": "text-black",
}

_FLEX_CHILDREN = frozenset({"flex-col", "flex-row", "flex-wrap"})
_FLEX_CONTAINERS = frozenset({"flex", "inline-flex"})
_GRID_CONTAINERS = frozenset({"grid", "inline-grid"})

SAFE_COLORS: FrozenSet[str] = frozenset({"white", "black", "transparent", "current", "inherit", "auto"})
PALETTE_COLORS: FrozenSet[str] = frozenset(
    {
        "slate", "gray", "zinc", "neutral", "stone",
        "red", "orange", "amber", "yellow", "lime",
        "green", "emerald", "teal", "cyan", "sky",
        "blue", "indigo", "violet", "purple", "fuchsia",
        "pink", "rose",
    }
)


def iter_class_strings(source: str) -> Iterator[str]:
    """Yield the literal text of every ``className`` string in ``source``."""
    for match in _CLASS_ATTRIBUTE.finditer(source):
        yield match.group(1)


class UtilityClassCheck:
    """Flags invented, legacy, structurally inert or shade-less utility classes.

    Every rule looks at one token at a time; structural rules additionally look
    at the other tokens of the same ``className`` string.
    """

    name = "tailwind"

    def run(self, source: str) -> Iterable[str]:
        messages: List[str] = []
        for class_string in iter_class_strings(source):
            tokens = [token for token in _WHITESPACE.split(class_string) if token]
            layout = _Layout(tokens)
            for token in tokens:
                if "${" in token or "}" in token:
                    continue
                messages.extend(self._token_messages(token, layout))
        return messages

    def _token_messages(self, cls: str, layout: "_Layout") -> Iterator[str]:
        advice = _INVENTED_CLASSES.get(cls)
        if advice:
            yield warning(f"'{cls}' is not standard. {advice}")

        if cls in _BOOTSTRAP_CLASSES:
            yield warning(_BOOTSTRAP_CLASSES[cls])
        if cls.startswith("col-") and not cls.startswith(_MODERN_COLUMN_PREFIXES):
            yield warning(f"'{cls}' looks like Bootstrap. Use 'grid-cols-*' or 'col-span-*'.")

        if cls in _FLEX_CHILDREN and not layout.has_flex:
            yield warning(f"'{cls}' has no effect without 'flex' or 'inline-flex'.")
        if (
            cls.startswith(("justify-", "items-"))
            and "self" not in cls
            and not (layout.has_flex or layout.has_grid)
        ):
            yield warning(f"'{cls}' usually needs a 'flex' or 'grid' parent.")
        if cls.startswith("gap-") and not (layout.has_flex or layout.has_grid):
            yield warning(f"'{cls}' works best with 'flex' or 'grid'.")

        if _FIXED_PIXELS.match(cls):
            yield warning(f"Avoid fixed pixels '{cls}'. Use Tailwind utilities (e.g. w-4) or percentages.")
        if _VIEWPORT_HEIGHT.search(cls):
            yield warning(
                f"Avoid 'vh' for mobile '{cls}'. Use 'dvh' or 'min-h-screen' to avoid address bar jumping."
            )

        fixed = _INVALID_HYBRIDS.get(cls)
        if fixed:
            yield warning(f"'{cls}' is invalid. Use '{fixed}'.")

        color = _BARE_COLOR.match(cls)
        if color:
            color_name = color.group(2)
            if color_name in PALETTE_COLORS and color_name not in SAFE_COLORS:
                yield warning(f"'{cls}' might be missing a shade (e.g., {cls}-500).")


class _Layout:
    """Which layout containers a single className string establishes."""

    def __init__(self, tokens: Iterable[str]) -> None:
        # md:flex, !flex and flex! establish the container too
        bases = {token.rsplit(":", 1)[-1].strip("!") for token in tokens}
        self.has_flex = bool(bases & _FLEX_CONTAINERS)
        self.has_grid = bool(bases & _GRID_CONTAINERS)


__all__ = ["PALETTE_COLORS", "SAFE_COLORS", "UtilityClassCheck", "iter_class_strings"]
