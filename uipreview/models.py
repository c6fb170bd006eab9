"""Core data models shared across uipreview components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ImportBinding:
    """One name imported from a module the preview injects as a global."""

    source_module: str
    imported_name: Optional[str]
    local_name: str
    is_default_or_namespace: bool = False
    is_type_only: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_module": self.source_module,
            "imported_name": self.imported_name,
            "local_name": self.local_name,
            "is_default_or_namespace": self.is_default_or_namespace,
            "is_type_only": self.is_type_only,
        }


@dataclass(frozen=True)
class BuildArtifact:
    """Self-contained preview document produced for one source text."""

    document: str
    script: str = ""
    bindings: Tuple[ImportBinding, ...] = field(default_factory=tuple)
    has_entry: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the static validator: validity flag plus ordered messages."""

    valid: bool
    messages: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_messages(cls, messages: List[str]) -> "ValidationResult":
        unique = tuple(dict.fromkeys(messages))
        return cls(valid=not unique, messages=unique)

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "messages": list(self.messages)}
