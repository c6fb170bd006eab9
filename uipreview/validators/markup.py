"""JSX markup checks: HTML leftovers and list rendering."""

from __future__ import annotations

import re
from typing import Iterable, List

from .base import warning

_HTML_COMMENT = re.compile(r"<!--")
_STRING_STYLE = re.compile(r"\bstyle\s*=\s*[\"']")
_SCRIPT_TAG = re.compile(r"<script")
_MAP_CALL = re.compile(r"\.map\s*\(")
_KEY_PROP = re.compile(r"key\s*=\s*[{\"]")


class MarkupSyntaxCheck:
    """Flags HTML-isms that do not belong in JSX."""

    name = "markup"

    def run(self, source: str) -> Iterable[str]:
        messages: List[str] = []
        if _HTML_COMMENT.search(source):
            messages.append(warning("Found HTML comment '<!--'. Use '{/* */}' for JSX comments."))
        if _STRING_STYLE.search(source):
            messages.append(warning("Inline styles should be objects (style={{...}}), not strings."))
        if _SCRIPT_TAG.search(source):
            messages.append(warning("Script tags are generally unsafe in React components."))
        return messages


class ListKeyCheck:
    """Whole-file heuristic: any ``.map(`` call with no ``key=`` anywhere.

    This does not correlate keys with individual ``.map`` calls, so one keyed
    list hides an unkeyed one and a ``.map`` over plain data still warns.
    """

    name = "lists"

    def run(self, source: str) -> Iterable[str]:
        if _MAP_CALL.search(source) and not _KEY_PROP.search(source):
            return [
                warning(
                    "`.map()` loop detected but no 'key' prop found. Ensure lists have unique keys."
                )
            ]
        return []


__all__ = ["ListKeyCheck", "MarkupSyntaxCheck"]
