"""Fail-safe documents for previews that could not be built."""

from __future__ import annotations

import html

_MAX_REASON_LENGTH = 500


def build_error_document(message: str | None) -> str:
    """Return a minimal standalone page that shows a build failure as text."""
    reason = _format_reason(message) or "Unknown error"
    return (
        "<html><body>"
        f'<div style="color:red; padding:20px;">Build Error: {html.escape(reason)}</div>'
        "</body></html>"
    )


def _format_reason(reason: str | None) -> str | None:
    if not reason:
        return None
    cleaned = " ".join(reason.strip().split())
    if not cleaned:
        return None
    return cleaned[:_MAX_REASON_LENGTH] + ("…" if len(cleaned) > _MAX_REASON_LENGTH else "")


__all__ = ["build_error_document"]
