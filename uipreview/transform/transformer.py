"""Source Transformer: generated component source in, preview document out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..config import PreviewConfig
from ..failsafe import build_error_document
from ..logging import get_logger
from ..models import BuildArtifact, ImportBinding
from .document import DocumentRenderer
from .parser import SourceParser, TransformError
from .preamble import assemble_script, build_epilogue, build_preamble
from .rewriter import ModuleRewriter


@dataclass
class AssembledProgram:
    """The preview program before it is wrapped into a document."""

    script: str
    bindings: List[ImportBinding]
    has_entry: bool


class SourceTransformer:
    """Builds sandbox-ready preview documents from component source.

    ``transform`` never raises: structural failures become a standalone error
    document so the caller always has something to render.
    """

    def __init__(
        self,
        config: PreviewConfig | None = None,
        *,
        parser: SourceParser | None = None,
        renderer: DocumentRenderer | None = None,
    ) -> None:
        self.config = config or PreviewConfig()
        settings = self.config.transform
        self.parser = parser or SourceParser()
        self.rewriter = ModuleRewriter(
            entry_symbol=settings.entry_symbol,
            tracked_modules=settings.tracked_modules.keys(),
            removed_modules=settings.removed_modules,
        )
        self.renderer = renderer or DocumentRenderer(self.config.runtime, self.config.theme)
        self.logger = get_logger("transform")

    def transform(self, source: str) -> BuildArtifact:
        """Return a preview document for ``source``, or an error document."""
        try:
            program = self.assemble(source)
            document = self.renderer.render(program.script)
        except TransformError as exc:
            self.logger.warning("Preview build failed: %s", exc)
            return self._failed(str(exc))
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.exception("Unexpected failure while building preview")
            return self._failed(str(exc) or exc.__class__.__name__)

        if not program.has_entry:
            self.logger.info("No default export found; preview will report a missing entry point")
        return BuildArtifact(
            document=document,
            script=program.script,
            bindings=tuple(program.bindings),
            has_entry=program.has_entry,
        )

    def assemble(self, source: str) -> AssembledProgram:
        """Rewrite ``source`` and wrap it with preamble and epilogue.

        Raises :class:`TransformError` when the source cannot be parsed.
        """
        parsed = self.parser.parse(source)
        result = self.rewriter.rewrite(parsed)
        self.logger.debug(
            "Collected %d injected bindings, %d default export(s)",
            len(result.bindings),
            result.default_exports,
        )
        settings = self.config.transform
        preamble = build_preamble(result.bindings, settings.tracked_modules)
        epilogue = build_epilogue(settings.entry_symbol)
        return AssembledProgram(
            script=assemble_script(preamble, result.body, epilogue),
            bindings=result.bindings,
            has_entry=result.has_entry,
        )

    @staticmethod
    def _failed(message: str) -> BuildArtifact:
        return BuildArtifact(document=build_error_document(message), error=message)


def transform(source: str, config: PreviewConfig | None = None) -> BuildArtifact:
    """Build a preview artifact with a fresh transformer."""
    return SourceTransformer(config).transform(source)


def generate_srcdoc(source: str, config: PreviewConfig | None = None) -> str:
    """Return only the preview document text for ``source``."""
    return transform(source, config).document


__all__ = ["AssembledProgram", "SourceTransformer", "generate_srcdoc", "transform"]
