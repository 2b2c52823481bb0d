#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for serializing display trees to HTML."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fanwiki.services.nodes import DisplayNode, NodeKind
from fanwiki.services.renderer import render
from fanwiki.services.serializer import to_html


def _html(content: str, media=()) -> str:
    return to_html(render(content, media))


# =============================================================================
# Block formatter output
# =============================================================================

def test_document_wrapper():
    assert _html("").startswith('<div class="wikitext">')


def test_headings():
    html = _html("== Two ==\n=== Three ===")
    assert "<h2>Two</h2>" in html
    assert "<h3>Three</h3>" in html


def test_inline_spans():
    html = _html("'''bold''' and ''italic''")
    assert "<p><b>bold</b> and <i>italic</i></p>" in html


def test_rule_list_and_break():
    html = _html("----\n* item\n")
    assert "<hr>" in html
    assert "<li>item</li>" in html
    assert "<br>" in html


def test_text_is_escaped():
    html = _html("<script>alert(1)</script>")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


# =============================================================================
# Template output
# =============================================================================

def test_float_image(media):
    html = _html("{{IMG2|File:x.jpg|left|200px}}", media)
    assert 'class="wiki-float img-left"' in html
    assert 'style="width:200px"' in html
    assert 'src="/media/x.jpg"' in html
    assert 'loading="lazy"' in html


def test_spoiler_is_details():
    html = _html("{{Spoiler|Ending|secret}}")
    assert '<details class="spoiler"><summary>Ending</summary>' in html
    assert "<p>secret</p>" in html


def test_tabber_marks_first_tab_active():
    html = _html("{{Tabber|One=a|Two=b}}")
    assert '<button class="tab-button" data-tab="0" data-active="true">One</button>' in html
    assert '<div class="tab-panel" data-tab="1" hidden>' in html


def test_furigana_is_ruby():
    assert "<ruby>漢字<rt>かんじ</rt></ruby>" in _html("{{Furigana|漢字|かんじ}}")


def test_color_value_is_escaped():
    html = _html('{{Color|red" onmouseover="x|text}}')
    assert 'onmouseover="x"' not in html
    assert "&quot;" in html


def test_navbox_links():
    html = _html("{{Navbox|title=Cast|list=Hero One}}")
    assert '<a href="/wiki/hero-one" class="wikilink">Hero One</a>' in html


def test_missing_template():
    html = _html("{{Nope|x}}")
    assert '<span class="missing-template" title="Nope|x">Missing Template: Nope</span>' in html


def test_battle_result_without_image():
    html = _html("{{BattleResult|result=Victory|score=3-0}}")
    assert 'class="battle-result battle-victory"' in html
    assert "battle-bg" not in html
    assert '<p class="battle-score">3-0</p>' in html


def test_frame_without_title_has_no_title_bar():
    html = _html("{{Frame|content=body}}")
    assert "frame-title" not in html
    assert "<p>body</p>" in html


def test_unknown_kind_serializes_children():
    tab = DisplayNode(kind=NodeKind.TAB, text="T", children=[DisplayNode(kind=NodeKind.TEXT, text="x")])
    assert to_html(tab) == "x"
