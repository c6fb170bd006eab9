"""Checks for HTML attribute names that React spells differently."""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .base import warning

_RENAMED_ATTRIBUTES: Tuple[Tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bclass\s*=\s*[\"']"), "Found 'class' attribute. In React, use 'className'."),
    (re.compile(r"\bfor\s*=\s*[\"']"), "Found 'for' attribute. In React, use 'htmlFor'."),
    (re.compile(r"\btabindex\s*=\s*[\"']"), "Found 'tabindex'. In React, use 'tabIndex'."),
    (re.compile(r"\bautoplay\s*=\s*[\"']"), "Found 'autoplay'. In React, use 'autoPlay'."),
)

LOWERCASE_EVENTS: Tuple[str, ...] = (
    "onclick",
    "onchange",
    "onmouseover",
    "onmouseout",
    "onkeydown",
    "onkeyup",
    "onsubmit",
)


def camel_event(event: str) -> str:
    """``onclick`` -> ``onClick``: upper-case the third character."""
    return event[:2] + event[2:3].upper() + event[3:]


class AttributeNamingCheck:
    """Flags DOM attribute spellings that have a React-specific equivalent."""

    name = "attributes"

    def __init__(self) -> None:
        self._event_patterns = [
            (event, re.compile(rf"{event}\s*=\s*[\"'{{]")) for event in LOWERCASE_EVENTS
        ]

    def run(self, source: str) -> Iterable[str]:
        messages: List[str] = []
        for pattern, message in _RENAMED_ATTRIBUTES:
            if pattern.search(source):
                messages.append(warning(message))
        for event, pattern in self._event_patterns:
            if pattern.search(source):
                messages.append(warning(f"Found '{event}'. In React, use '{camel_event(event)}'."))
        return messages


__all__ = ["AttributeNamingCheck", "LOWERCASE_EVENTS", "camel_event"]
