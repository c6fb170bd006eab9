"""Tests for the Source Transformer contract."""

from __future__ import annotations

from uipreview.config import PreviewConfig, TransformConfig
from uipreview.transform import SourceTransformer, generate_srcdoc, transform
from tests._fixtures.components import DASHBOARD, NO_EXPORT, PLAIN

MISSING_ENTRY = 'throw new Error("No default export found (window.App is undefined)");'


def test_transform_builds_preamble_body_and_epilogue(transformer: SourceTransformer) -> None:
    artifact = transformer.transform(DASHBOARD)

    assert artifact.ok
    assert artifact.has_entry
    script = artifact.script
    lines = script.splitlines()
    assert lines[0] == "const { Heart: Love, Star } = window.Lucide;"
    assert lines[1] == "const { LineChart, Line } = window.Recharts;"
    assert "from 'react'" not in script
    assert "lucide-react" not in script
    assert script.index("function App(") < script.index("window.App = App;")
    assert script.rstrip().endswith(
        "if (window.App) { renderApp(window.App); } else { " + MISSING_ENTRY + " }"
    )


def test_transform_orders_icon_bindings_before_chart_bindings(transformer: SourceTransformer) -> None:
    source = (
        "import { BarChart } from 'recharts';\n"
        "import * as Charts from 'recharts';\n"
        "import { Bell } from 'lucide-react';\n"
        "export default () => <Bell />;\n"
    )

    preamble = transformer.transform(source).script.splitlines()[:3]

    assert preamble == [
        "const { Bell } = window.Lucide;",
        "const { BarChart } = window.Recharts;",
        "const Charts = window.Recharts;",
    ]


def test_transform_omits_preamble_without_tracked_imports(transformer: SourceTransformer) -> None:
    artifact = transformer.transform(PLAIN)

    assert "= window.Lucide" not in artifact.script
    assert "= window.Recharts" not in artifact.script
    assert "const {  }" not in artifact.script
    assert artifact.bindings == ()


def test_transform_excludes_type_only_bindings(transformer: SourceTransformer) -> None:
    source = (
        "import type { LucideIcon } from 'lucide-react';\n"
        "const icon: LucideIcon | null = null;\n"
        "export default () => <div>{String(icon)}</div>;\n"
    )

    artifact = transformer.transform(source)

    assert "window.Lucide" not in artifact.script.split("if (window.App)")[0]
    assert [binding.is_type_only for binding in artifact.bindings] == [True]


def test_transform_deduplicates_repeated_named_bindings(transformer: SourceTransformer) -> None:
    source = (
        "import { Heart } from 'lucide-react';\n"
        "import { Heart, Star } from 'lucide-react';\n"
        "export default () => <Heart />;\n"
    )

    script = transformer.transform(source).script

    assert script.splitlines()[0] == "const { Heart, Star } = window.Lucide;"


def test_transform_without_default_export_still_assembles(transformer: SourceTransformer) -> None:
    artifact = transformer.transform(NO_EXPORT)

    assert artifact.ok
    assert artifact.has_entry is False
    assert "function Orphan()" in artifact.script
    assert MISSING_ENTRY in artifact.script
    assert "<html" in artifact.document


def test_transform_converts_syntax_errors_into_error_document(transformer: SourceTransformer) -> None:
    artifact = transformer.transform("export default function App( {\n  return <div>\n")

    assert not artifact.ok
    assert artifact.error
    assert artifact.script == ""
    assert "Build Error:" in artifact.document
    assert "<script" not in artifact.document


def test_transform_is_deterministic(transformer: SourceTransformer) -> None:
    first = transformer.transform(DASHBOARD)
    second = SourceTransformer().transform(DASHBOARD)

    assert first == second


def test_transform_honours_configured_entry_symbol() -> None:
    config = PreviewConfig(transform=TransformConfig(entry_symbol="Main"))

    artifact = transform("export default function App() { return null; }\n", config)

    assert "window.Main = App;" in artifact.script
    assert "if (window.Main) { renderApp(window.Main); }" in artifact.script
    assert "window.Main is undefined" in artifact.script


def test_generate_srcdoc_returns_document_text() -> None:
    document = generate_srcdoc(PLAIN)

    assert document.startswith("<!DOCTYPE html>")
    assert 'id="root"' in document


def test_transform_type_level_default_export_has_no_entry(transformer: SourceTransformer) -> None:
    artifact = transformer.transform("export default interface Props { a: string }\n")

    assert artifact.ok
    assert artifact.has_entry is False
    assert "window.App =" not in artifact.script
    assert MISSING_ENTRY in artifact.script
