"""Core validator data structures and helpers."""

from __future__ import annotations

from typing import Iterable, List, Protocol, Sequence

from ..logging import get_logger
from ..models import ValidationResult

WARNING_PREFIX = "⚠️"


class Check(Protocol):
    """Protocol implemented by source checks.

    A check inspects raw source text and yields zero or more human-readable
    messages. Checks never parse or execute the source and never raise on
    malformed input.
    """

    name: str

    def run(self, source: str) -> Iterable[str]:
        """Yield diagnostic messages for ``source``."""


def warning(text: str) -> str:
    return f"{WARNING_PREFIX} {text}"


class CodeValidator:
    """Runs checks in order and folds their output into a ValidationResult."""

    def __init__(self, checks: Sequence[Check]) -> None:
        self.checks = list(checks)
        self.logger = get_logger("validators")

    def validate(self, source: str) -> ValidationResult:
        messages: List[str] = []
        for check in self.checks:
            found = list(check.run(source))
            if found:
                self.logger.debug("Check %s produced %d message(s)", check.name, len(found))
            messages.extend(found)
        result = ValidationResult.from_messages(messages)
        self.logger.debug("Validation finished: %d unique message(s)", len(result.messages))
        return result


__all__ = ["Check", "CodeValidator", "WARNING_PREFIX", "warning"]
