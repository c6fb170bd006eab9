"""Single-pass import/export rewrite over a parsed component module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from tree_sitter import Node

from ..models import ImportBinding
from .parser import ParsedSource

_NAMED_ENTRY_DECLARATIONS = {
    "function_declaration",
    "generator_function_declaration",
    "class_declaration",
    "abstract_class_declaration",
}
_TYPE_KEYWORDS = {"type", "typeof"}


@dataclass(frozen=True)
class _Edit:
    start: int
    end: int
    text: str


@dataclass
class RewriteResult:
    """Rewritten module body plus what the rewrite pass discovered."""

    body: str
    bindings: List[ImportBinding] = field(default_factory=list)
    default_exports: int = 0

    @property
    def has_entry(self) -> bool:
        return self.default_exports > 0


class ModuleRewriter:
    """Rewrites import and export statements of a top-level module.

    Imports from ``tracked_modules`` are removed and their bindings recorded so
    the caller can re-create them from injected globals. Imports from
    ``removed_modules`` and type-only imports are dropped. The default export is
    reassigned to ``window.<entry_symbol>``. Everything else is left in place.
    """

    def __init__(
        self,
        *,
        entry_symbol: str = "App",
        tracked_modules: Iterable[str] = ("lucide-react", "recharts"),
        removed_modules: Iterable[str] = ("react", "react-dom"),
    ) -> None:
        self.entry_target = f"window.{entry_symbol}"
        self.tracked_modules = tuple(tracked_modules)
        self.removed_modules = frozenset(removed_modules)
        self._handlers: Mapping[str, Callable[[Node, "_Pass"], None]] = {
            "import_statement": self._visit_import,
            "export_statement": self._visit_export,
        }

    def rewrite(self, parsed: ParsedSource) -> RewriteResult:
        state = _Pass(parsed)
        for node in parsed.root.children:
            handler = self._handlers.get(node.type)
            if handler is not None:
                handler(node, state)
        body = _apply_edits(parsed.source_bytes, state.edits)
        return RewriteResult(
            body=body,
            bindings=state.bindings,
            default_exports=state.default_exports,
        )

    # imports

    def _visit_import(self, node: Node, state: "_Pass") -> None:
        source_node = node.child_by_field_name("source")
        if source_node is None:
            return  # import x = require("...")
        module = _string_value(source_node, state.parsed)
        type_only = _has_keyword(node, _TYPE_KEYWORDS)

        if module in self.tracked_modules:
            clause = _first_child_of_type(node, "import_clause")
            if clause is not None:
                state.bindings.extend(self._collect_bindings(module, clause, state, type_only))
            state.remove(node)
            return
        if type_only or module in self.removed_modules:
            state.remove(node)

    def _collect_bindings(
        self, module: str, clause: Node, state: "_Pass", type_only: bool
    ) -> List[ImportBinding]:
        bindings: List[ImportBinding] = []
        for child in clause.named_children:
            if child.type == "identifier":
                bindings.append(
                    ImportBinding(
                        source_module=module,
                        imported_name=None,
                        local_name=state.parsed.text(child),
                        is_default_or_namespace=True,
                        is_type_only=type_only,
                    )
                )
            elif child.type == "namespace_import":
                local = _first_child_of_type(child, "identifier")
                if local is not None:
                    bindings.append(
                        ImportBinding(
                            source_module=module,
                            imported_name=None,
                            local_name=state.parsed.text(local),
                            is_default_or_namespace=True,
                            is_type_only=type_only,
                        )
                    )
            elif child.type == "named_imports":
                for specifier in child.named_children:
                    if specifier.type != "import_specifier":
                        continue
                    binding = self._specifier_binding(module, specifier, state, type_only)
                    if binding is not None:
                        bindings.append(binding)
        return bindings

    @staticmethod
    def _specifier_binding(
        module: str, specifier: Node, state: "_Pass", type_only: bool
    ) -> Optional[ImportBinding]:
        name_node = specifier.child_by_field_name("name")
        if name_node is None:
            return None
        imported = _string_value(name_node, state.parsed)
        alias_node = specifier.child_by_field_name("alias")
        local = state.parsed.text(alias_node) if alias_node is not None else imported
        if not imported or not local:
            return None
        return ImportBinding(
            source_module=module,
            imported_name=imported,
            local_name=local,
            is_default_or_namespace=False,
            is_type_only=type_only or _has_keyword(specifier, _TYPE_KEYWORDS),
        )

    # exports

    def _visit_export(self, node: Node, state: "_Pass") -> None:
        if node.child_by_field_name("source") is not None:
            return  # re-exports resolve (or fail) at run time like unknown imports
        export_keyword = _first_child_of_type(node, "export")
        if export_keyword is None:  # pragma: no cover - grammar guarantees the keyword
            return
        prefix = state.parsed.source_bytes[node.start_byte : export_keyword.start_byte].decode("utf-8")
        declaration = node.child_by_field_name("declaration")
        is_default = _first_child_of_type(node, "default") is not None

        if is_default:
            value = node.child_by_field_name("value")
            if declaration is not None:
                text, assigned = self._default_declaration(prefix, declaration, state)
                state.replace(node, text)
                if assigned:
                    state.default_exports += 1
            elif value is not None:
                state.replace(node, self._assign_entry(state.parsed.text(value)))
                state.default_exports += 1
            return

        if declaration is not None:
            state.replace(node, prefix + state.parsed.text(declaration))
            return

        clause = _first_child_of_type(node, "export_clause")
        if clause is None:
            return  # export = x; export as namespace X;
        if _has_keyword(node, _TYPE_KEYWORDS):
            state.remove(node)
            return
        local_default = self._clause_default(clause, state)
        if local_default is None:
            state.remove(node)
        else:
            state.default_exports += 1
            state.replace(node, self._assign_entry(local_default))

    def _default_declaration(
        self, prefix: str, declaration: Node, state: "_Pass"
    ) -> Tuple[str, bool]:
        """Return the replacement text and whether it assigns the entry symbol."""
        text = state.parsed.text(declaration)
        if declaration.type in _NAMED_ENTRY_DECLARATIONS:
            name_node = declaration.child_by_field_name("name")
            if name_node is None:
                return self._assign_entry(text), True
            return f"{prefix}{text}\n{self.entry_target} = {state.parsed.text(name_node)};", True
        # interfaces and other type-level declarations carry no runtime value
        return prefix + text, False

    @staticmethod
    def _clause_default(clause: Node, state: "_Pass") -> Optional[str]:
        local_default: Optional[str] = None
        for specifier in clause.named_children:
            if specifier.type != "export_specifier" or _has_keyword(specifier, _TYPE_KEYWORDS):
                continue
            alias = specifier.child_by_field_name("alias")
            name = specifier.child_by_field_name("name")
            if alias is not None and name is not None and _string_value(alias, state.parsed) == "default":
                local_default = state.parsed.text(name)
        return local_default

    def _assign_entry(self, expression: str) -> str:
        return f"{self.entry_target} = {expression};"


class _Pass:
    """Mutable state for one rewrite pass."""

    def __init__(self, parsed: ParsedSource) -> None:
        self.parsed = parsed
        self.edits: List[_Edit] = []
        self.bindings: List[ImportBinding] = []
        self.default_exports = 0

    def replace(self, node: Node, text: str) -> None:
        self.edits.append(_Edit(node.start_byte, node.end_byte, text))

    def remove(self, node: Node) -> None:
        end = node.end_byte
        source = self.parsed.source_bytes
        if source[end : end + 2] == b"\r\n":
            end += 2
        elif source[end : end + 1] == b"\n":
            end += 1
        self.edits.append(_Edit(node.start_byte, end, ""))


def _apply_edits(source_bytes: bytes, edits: Sequence[_Edit]) -> str:
    result = source_bytes
    for edit in sorted(edits, key=lambda item: item.start, reverse=True):
        result = result[: edit.start] + edit.text.encode("utf-8") + result[edit.end :]
    return result.decode("utf-8")


def _first_child_of_type(node: Node, node_type: str) -> Optional[Node]:
    for child in node.children:
        if child.type == node_type:
            return child
    return None


def _has_keyword(node: Node, keywords: Iterable[str]) -> bool:
    wanted = set(keywords)
    return any(not child.is_named and child.type in wanted for child in node.children)


def _string_value(node: Node, parsed: ParsedSource) -> str:
    text = parsed.text(node)
    if node.type == "string" and len(text) >= 2 and text[0] == text[-1] and text[0] in {"'", '"'}:
        return text[1:-1]
    return text


def bindings_by_module(bindings: Iterable[ImportBinding]) -> Dict[str, List[ImportBinding]]:
    grouped: Dict[str, List[ImportBinding]] = {}
    for binding in bindings:
        grouped.setdefault(binding.source_module, []).append(binding)
    return grouped


__all__ = ["ModuleRewriter", "RewriteResult", "bindings_by_module"]
