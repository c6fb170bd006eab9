"""Tree-sitter parsing of generated TSX component source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())


class TransformError(RuntimeError):
    """Raised when source text cannot be rewritten into a preview program."""

    def __init__(self, message: str, *, line: Optional[int] = None, column: Optional[int] = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


@dataclass
class ParsedSource:
    """A parse tree together with the bytes it was built from."""

    tree: Tree
    source_bytes: bytes

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        return node_text(node, self.source_bytes)


def node_text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


class SourceParser:
    """Parses TSX source and rejects trees that contain syntax errors."""

    def __init__(self) -> None:
        self._parser = Parser(TSX_LANGUAGE)

    def parse(self, source: str) -> ParsedSource:
        source_bytes = source.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        parsed = ParsedSource(tree=tree, source_bytes=source_bytes)
        if tree.root_node.has_error:
            raise _syntax_error(parsed)
        return parsed


def _syntax_error(parsed: ParsedSource) -> TransformError:
    node = _first_error(parsed.root)
    if node is None:  # pragma: no cover - has_error always leaves a node behind
        return TransformError("Unexpected syntax in component source")
    row, column = node.start_point
    line, col = row + 1, column + 1
    if node.is_missing:
        return TransformError(
            f"Missing '{node.type}' at line {line}, column {col}",
            line=line,
            column=col,
        )
    snippet = " ".join(parsed.text(node).split())
    if len(snippet) > 40:
        snippet = snippet[:37].rstrip() + "..."
    detail = f": {snippet}" if snippet else ""
    return TransformError(
        f"Unexpected syntax at line {line}, column {col}{detail}",
        line=line,
        column=col,
    )


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


__all__ = ["ParsedSource", "SourceParser", "TransformError", "TSX_LANGUAGE", "node_text"]
