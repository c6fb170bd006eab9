"""Source Transformer: rewrites generated components into preview documents."""

from .document import AMBIENT_HOOKS, DocumentRenderer, MOUNT_NODE_ID
from .parser import ParsedSource, SourceParser, TransformError
from .preamble import build_epilogue, build_preamble
from .rewriter import ModuleRewriter, RewriteResult
from .transformer import AssembledProgram, SourceTransformer, generate_srcdoc, transform

__all__ = [
    "AMBIENT_HOOKS",
    "AssembledProgram",
    "DocumentRenderer",
    "MOUNT_NODE_ID",
    "ModuleRewriter",
    "ParsedSource",
    "RewriteResult",
    "SourceParser",
    "SourceTransformer",
    "TransformError",
    "build_epilogue",
    "build_preamble",
    "generate_srcdoc",
    "transform",
]
