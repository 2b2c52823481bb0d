#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
HTML serializer
===============
Turns a display tree into an HTML fragment for clients that do not build
their own presentation.  Interactive behaviour is left to CSS and the
browser: disclosures are ``<details>``, hover swaps are CSS classes, and the
tabber marks its active tab with ``data-active``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html as _html
from typing import Callable

from fanwiki.services.nodes import DisplayNode, NodeKind


# -----------------------------------------------------------------------------

def _esc(value) -> str:
    return _html.escape(str(value if value is not None else ""), quote=True)


def _children(n: DisplayNode) -> str:
    return "".join(to_html(c) for c in n.children)


def _img(url: str, alt: str = "", cls: str = "") -> str:
    cls_attr = f' class="{cls}"' if cls else ""
    return f'<img src="{_esc(url)}" alt="{_esc(alt)}"{cls_attr} loading="lazy" />'


# -----------------------------------------------------------------------------
# Block formatter nodes
# -----------------------------------------------------------------------------

def _heading(n: DisplayNode) -> str:
    level = n.attrs.get("level", 2)
    return f"<h{level}>{_esc(n.text)}</h{level}>"


def _list_item(n: DisplayNode) -> str:
    return f"<li>{_children(n)}</li>"


def _paragraph(n: DisplayNode) -> str:
    return f"<p>{_children(n)}</p>"


# -----------------------------------------------------------------------------
# Template nodes
# -----------------------------------------------------------------------------

def _float_image(n: DisplayNode) -> str:
    a = n.attrs
    return (
        f'<figure class="wiki-float img-{_esc(a["align"])}" style="width:{_esc(a["width"])}">'
        f'{_img(a["url"], a.get("alt", ""))}</figure>'
    )


def _hover_image(n: DisplayNode) -> str:
    a = n.attrs
    return (
        f'<div class="hover-image img-{_esc(a["align"])}" style="width:{_esc(a["width"])}">'
        f'{_img(a["url"], "Base", "hover-base")}{_img(a["hover_url"], "Hover", "hover-top")}</div>'
    )


def _image_tooltip(n: DisplayNode) -> str:
    return (
        f'<span class="image-tooltip">{_esc(n.text)}'
        f'<span class="tooltip-body">{_img(n.attrs["url"], "Tooltip")}</span></span>'
    )


def _hover_text(n: DisplayNode) -> str:
    return (
        f'<span class="hover-text"><span class="hover-base">{_esc(n.text)}</span>'
        f'<span class="hover-top">{_esc(n.attrs.get("hover_text", ""))}</span></span>'
    )


def _spoiler(n: DisplayNode) -> str:
    cls = "spoiler-list" if n.kind == NodeKind.SPOILER_LIST else "spoiler"
    return (
        f'<details class="{cls}"><summary>{_esc(n.text)}</summary>'
        f'<div class="{cls}-body">{_children(n)}</div></details>'
    )


def _gallery(n: DisplayNode) -> str:
    tiles = "".join(
        f'<div class="gallery-tile">{_img(t.attrs["url"], t.text)}'
        f'<div class="gallery-caption">{_esc(t.text)}</div></div>'
        for t in n.children
    )
    return f'<div class="gallery">{tiles}</div>'


def _tabber(n: DisplayNode) -> str:
    active = n.attrs.get("active", 0)
    buttons, panels = [], []
    for i, tab in enumerate(n.children):
        flag = ' data-active="true"' if i == active else ""
        buttons.append(f'<button class="tab-button" data-tab="{i}"{flag}>{_esc(tab.text)}</button>')
        hidden = "" if i == active else " hidden"
        panels.append(f'<div class="tab-panel" data-tab="{i}"{hidden}>{_children(tab)}</div>')
    return f'<div class="tabber"><div class="tab-bar">{"".join(buttons)}</div>{"".join(panels)}</div>'


def _quote(n: DisplayNode) -> str:
    a = n.attrs
    source = f", {_esc(a['source'])}" if a.get("source") else ""
    return (
        f'<blockquote class="wiki-quote"><p>&quot;{_esc(n.text)}&quot;</p>'
        f'<footer>— <cite>{_esc(a.get("author", ""))}</cite>{source}</footer></blockquote>'
    )


def _battle_result(n: DisplayNode) -> str:
    a = n.attrs
    bg = f'<div class="battle-bg">{_img(a["image"], "Battle BG")}</div>' if a.get("image") else ""
    score = f'<p class="battle-score">{_esc(a["score"])}</p>' if a.get("score") else ""
    return (
        f'<div class="battle-result battle-{_esc(a["outcome"])}">{bg}'
        f'<span class="icon icon-{_esc(a["icon"])}"></span>'
        f'<h4>{_esc(n.text)}</h4>{score}</div>'
    )


def _frame(n: DisplayNode) -> str:
    a = n.attrs
    border = _esc(a.get("border", ""))
    title = (
        f'<div class="frame-title" style="background-color:{border}">'
        f'<span class="icon icon-{_esc(a["icon"])}"></span> {_esc(n.text)}</div>'
    ) if n.text else ""
    return f'<div class="wiki-frame" style="border-color:{border}">{title}<div class="frame-body">{_children(n)}</div></div>'


def _message_block(n: DisplayNode) -> str:
    a = n.attrs
    return (
        f'<div class="message-block message-{_esc(a["type"])}">'
        f'<span class="icon icon-{_esc(a["icon"])}"></span>'
        f'<div><div class="message-title">{_esc(n.text)}</div>'
        f'<div class="message-text">{_children(n)}</div></div></div>'
    )


def _navbox(n: DisplayNode) -> str:
    links = "".join(
        f'<a href="{_esc(link.attrs["href"])}" class="wikilink">{_esc(link.text)}</a>'
        for link in n.children
    )
    return f'<details class="navbox" open><summary>{_esc(n.text)}</summary><div class="navbox-links">{links}</div></details>'


def _infobox(n: DisplayNode) -> str:
    rows = "".join(
        f'<tr><th>{_esc(k)}</th><td>{_esc(v)}</td></tr>'
        for k, v in n.attrs.get("data", {}).items()
    )
    return f'<table class="infobox">{rows}</table>'


# -----------------------------------------------------------------------------

_RENDERERS: dict[NodeKind, Callable[[DisplayNode], str]] = {
    NodeKind.DOCUMENT:         lambda n: f'<div class="wikitext">{_children(n)}</div>',
    NodeKind.HEADING:          _heading,
    NodeKind.RULE:             lambda n: "<hr>",
    NodeKind.LIST_ITEM:        _list_item,
    NodeKind.LINE_BREAK:       lambda n: "<br>",
    NodeKind.PARAGRAPH:        _paragraph,
    NodeKind.TEXT:             lambda n: _esc(n.text),
    NodeKind.BOLD:             lambda n: f"<b>{_esc(n.text)}</b>",
    NodeKind.ITALIC:           lambda n: f"<i>{_esc(n.text)}</i>",
    NodeKind.FLOAT_IMAGE:      _float_image,
    NodeKind.HOVER_IMAGE:      _hover_image,
    NodeKind.IMAGE_TOOLTIP:    _image_tooltip,
    NodeKind.HOVER_TEXT:       _hover_text,
    NodeKind.SPOILER:          _spoiler,
    NodeKind.SPOILER_LIST:     _spoiler,
    NodeKind.SPOILER_TEXT:     lambda n: f'<span class="spoiler-text">{_esc(n.text)}</span>',
    NodeKind.GALLERY:          _gallery,
    NodeKind.IMAGE:            lambda n: _img(n.attrs["url"], n.text),
    NodeKind.TABBER:           _tabber,
    NodeKind.QUOTE:            _quote,
    NodeKind.FURIGANA:         lambda n: f"<ruby>{_esc(n.text)}<rt>{_esc(n.attrs.get('annotation', ''))}</rt></ruby>",
    NodeKind.COLOR:            lambda n: f'<span style="color:{_esc(n.attrs.get("color", ""))}">{_esc(n.text)}</span>',
    NodeKind.BATTLE_RESULT:    _battle_result,
    NodeKind.FRAME:            _frame,
    NodeKind.MESSAGE_BLOCK:    _message_block,
    NodeKind.NAVBOX:           _navbox,
    NodeKind.LINK:             lambda n: f'<a href="{_esc(n.attrs["href"])}" class="wikilink">{_esc(n.text)}</a>',
    NodeKind.MUSIC_BOX:        lambda n: (
        f'<div class="music-box"><p class="music-title">{_esc(n.text)}</p>'
        f'<audio controls src="{_esc(n.attrs["url"])}"></audio></div>'
    ),
    NodeKind.TOOLTIP:          lambda n: (
        f'<span class="tooltip" title="{_esc(n.attrs.get("tip", ""))}">{_esc(n.text)}</span>'
    ),
    NodeKind.INFOBOX:          _infobox,
    NodeKind.MISSING_TEMPLATE: lambda n: (
        f'<span class="missing-template" title="{_esc(n.attrs.get("raw", ""))}">{_esc(n.text)}</span>'
    ),
}


def to_html(n: DisplayNode) -> str:
    """Serialize *n* and its descendants to an HTML string."""
    render = _RENDERERS.get(n.kind)
    if render is None:
        return _children(n)
    return render(n)


# -----------------------------------------------------------------------------
