"""Tests for attribute naming and markup checks."""

from __future__ import annotations

from uipreview.validators import AttributeNamingCheck, ListKeyCheck, MarkupSyntaxCheck
from uipreview.validators.attributes import camel_event


def test_attribute_check_flags_html_attribute_names() -> None:
    source = '<label for="email" class="x">Email</label><div tabindex="0"></div><video autoplay="true" />'

    messages = list(AttributeNamingCheck().run(source))

    assert messages == [
        "⚠️ Found 'class' attribute. In React, use 'className'.",
        "⚠️ Found 'for' attribute. In React, use 'htmlFor'.",
        "⚠️ Found 'tabindex'. In React, use 'tabIndex'.",
        "⚠️ Found 'autoplay'. In React, use 'autoPlay'.",
    ]


def test_attribute_check_ignores_react_spellings() -> None:
    source = '<label htmlFor="email" className="p-2" tabIndex={0} onClick={go}>Email</label>'

    assert list(AttributeNamingCheck().run(source)) == []


def test_attribute_check_suggests_camel_cased_events() -> None:
    messages = list(AttributeNamingCheck().run("<button onclick={handleClick}>Go</button>"))

    assert messages == ["⚠️ Found 'onclick'. In React, use 'onClick'."]


def test_camel_event_only_recapitalises_third_character() -> None:
    assert camel_event("onkeydown") == "onKeydown"
    assert camel_event("onmouseover") == "onMouseover"


def test_markup_check_flags_html_leftovers() -> None:
    source = '<!-- header -->\n<div style="color: red"></div>\n<script>alert(1)</script>'

    messages = list(MarkupSyntaxCheck().run(source))

    assert messages == [
        "⚠️ Found HTML comment '<!--'. Use '{/* */}' for JSX comments.",
        "⚠️ Inline styles should be objects (style={{...}}), not strings.",
        "⚠️ Script tags are generally unsafe in React components.",
    ]


def test_markup_check_accepts_object_styles() -> None:
    assert list(MarkupSyntaxCheck().run("<div style={{ color: 'red' }} />")) == []


def test_list_check_is_a_whole_file_heuristic() -> None:
    unkeyed = "items.map((item) => <li>{item}</li>)"
    keyed_elsewhere = unkeyed + '\n<Row key="header" />'

    assert len(list(ListKeyCheck().run(unkeyed))) == 1
    assert list(ListKeyCheck().run(keyed_elsewhere)) == []
    assert list(ListKeyCheck().run("const xs = [1, 2];")) == []
