"""Accessibility checks for images and links."""

from __future__ import annotations

import re
from typing import Iterable, List

from .base import warning

_IMG_WITHOUT_ALT = re.compile(r"<img\b(?![^>]*\balt\s*=)[^>]*>")
_EMPTY_HREF = re.compile(r"<a\s+(?:[^>]*?\s+)?href=[\"'](?:#|)[\"']")
_ANCHOR_TAG = re.compile(r"<a\s[^>]*>")
_TARGET_BLANK = re.compile(r"\btarget\s*=\s*\{?\s*[\"']_blank[\"']")
_REL_NOREFERRER = re.compile(r"\brel\s*=\s*\{?\s*[\"'][^\"']*noreferrer[^\"']*[\"']")


class AccessibilityCheck:
    """Flags images without alt text, dead links and unsafe new-tab links."""

    name = "accessibility"

    def run(self, source: str) -> Iterable[str]:
        messages: List[str] = []
        if _IMG_WITHOUT_ALT.search(source):
            messages.append(warning("<img> tag missing 'alt' attribute."))
        if _EMPTY_HREF.search(source):
            messages.append(
                warning("<a> tag has empty or '#' href. Ensure valid navigation or use <button>.")
            )
        if any(_unsafe_new_tab(tag.group(0)) for tag in _ANCHOR_TAG.finditer(source)):
            messages.append(warning("target='_blank' links should have rel='noopener noreferrer'."))
        return messages


def _unsafe_new_tab(tag: str) -> bool:
    return bool(_TARGET_BLANK.search(tag)) and not _REL_NOREFERRER.search(tag)


__all__ = ["AccessibilityCheck"]
