"""Sandboxed previews and static checks for generated React components."""

from .models import BuildArtifact, ImportBinding, ValidationResult
from .transform import SourceTransformer, TransformError, generate_srcdoc, transform
from .validators import CodeValidator, discover_checks, validate_source

__version__ = "0.1.0"

__all__ = [
    "BuildArtifact",
    "CodeValidator",
    "ImportBinding",
    "SourceTransformer",
    "TransformError",
    "ValidationResult",
    "discover_checks",
    "generate_srcdoc",
    "transform",
    "validate_source",
]
