#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Template dispatcher
===================
Maps a recognised template name to a display node.  Matching is
case-sensitive against the closed ``TEMPLATES`` table; any other name yields
a ``MISSING_TEMPLATE`` node carrying the raw call text, and the rest of the
document renders normally.

Container templates (Spoiler, SpoilerList, Frame, MessageBlock, Tabber tabs)
render their content by calling back into ``renderer.render()`` on a
substring of their own arguments, one level deeper.

Supported templates
-------------------
{{IMG2|File:x.jpg|left|200px}}   (also SIDE1, SIDE2, GIF1, GIF2)
{{HoverImage|File:a.jpg|File:b.jpg|width=300px|align=right}}
{{ImageTooltip|text=Fireball|image=File:icon.png}}
{{HoverText|shown|on hover}}
{{Spoiler|Title|hidden content}}
{{SpoilerList|title=...|content=...}}
{{SpoilerText|hidden}}
{{Gallery|File:a.jpg|File:b.jpg}}
{{Tabber|Tab one=content|Tab two=content}}
{{Quote|text|author|source}}
{{Furigana|base|reading}}
{{Color|red|text}}
{{BattleResult|result=Victory|score=Low Diff|image=File:bg.jpg}}
{{Frame|title=...|content=...|icon=shield|border=#f00}}
{{MessageBlock|type=warning|title=...|text=...}}
{{Navbox|title=...|list=A, B, C}}
{{MusicBox|Title|File:song.mp3}}
{{Tooltip|text|tip}}
{{Infobox|key=value ...}}        (when not the article's leading block)
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

from fanwiki.core.config import get_settings
from fanwiki.services.arguments import ParsedArguments
from fanwiki.services.infobox import parse_records
from fanwiki.services.media import FILE_PREFIX, clean_filename, resolve
from fanwiki.services.nodes import DisplayNode, NodeKind, node

if TYPE_CHECKING:
    from fanwiki.schemas import MediaItem

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

ALIGNMENTS       = ("left", "right", "center")
DEFAULT_ALIGN    = "right"
DEFAULT_WIDTH    = "300px"

FRAME_ICONS      = ("box", "shield", "zap", "skull", "crown")
FRAME_BORDER     = "#a855f7"

# Segments setting one of these never stand in for a positional argument
FRAME_ARGS       = frozenset({"title", "content", "icon", "border"})
MESSAGE_ARGS     = frozenset({"type", "title", "text"})

# type → (icon, colour)
MESSAGE_STYLES = {
    "info":    ("info",           "blue"),
    "warning": ("alert-triangle", "orange"),
    "success": ("check-circle",   "green"),
    "error":   ("x-circle",       "red"),
}

# outcome → (icon, colour)
BATTLE_STYLES = {
    "victory": ("check-circle", "green"),
    "defeat":  ("x-circle",     "red"),
    "draw":    ("help-circle",  "gray"),
}


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _render_child(content: str, table: Iterable[MediaItem], depth: int) -> list[DisplayNode]:
    from fanwiki.services import renderer
    return renderer.render(content, table, depth=depth + 1).children


def _slugify(text: str) -> str:
    """Navbox link target: lowercased, spaces hyphenated."""
    return text.strip().lower().replace(" ", "-")


# -----------------------------------------------------------------------------
# Media templates
# -----------------------------------------------------------------------------

def _float_image(args: ParsedArguments, table, depth: int) -> DisplayNode:
    filename = args.at(1)
    align, width = DEFAULT_ALIGN, DEFAULT_WIDTH
    for token in args.positional[2:]:
        token = token.replace("]]", "").strip()
        if token.lower() in ALIGNMENTS:
            align = token.lower()
        elif token.lower().endswith("px"):
            width = token
    return node(
        NodeKind.FLOAT_IMAGE,
        url=resolve(filename, table),
        alt=filename,
        align=align,
        width=width,
        template=args.name,
    )


def _hover_image(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(
        NodeKind.HOVER_IMAGE,
        url=resolve(args.get("1"), table),
        hover_url=resolve(args.get("2"), table),
        width=args.get("width") or DEFAULT_WIDTH,
        align=args.get("align") or DEFAULT_ALIGN,
    )


def _image_tooltip(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(
        NodeKind.IMAGE_TOOLTIP,
        args.pick("text", 1),
        url=resolve(args.pick("image", 2), table),
    )


def _gallery(args: ParsedArguments, table, depth: int) -> DisplayNode:
    # Accepts both {{Gallery|File:a|File:b}} and one File: line per row.
    lines = args.positional[0].split("\n")[1:]
    for part in args.positional[1:]:
        lines.extend(part.split("\n"))

    tiles = []
    for line in lines:
        line = line.strip()
        if line.startswith("|"):
            line = line[1:].strip()
        if not line.startswith(FILE_PREFIX):
            continue
        tiles.append(node(
            NodeKind.IMAGE,
            clean_filename(line),
            url=resolve(line, table),
        ))
    return node(NodeKind.GALLERY, children=tiles)


def _music_box(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(
        NodeKind.MUSIC_BOX,
        args.at(1),
        url=resolve(args.at(2), table),
    )


# -----------------------------------------------------------------------------
# Text templates
# -----------------------------------------------------------------------------

def _hover_text(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(NodeKind.HOVER_TEXT, args.get("1"), hover_text=args.get("2"))


def _spoiler_text(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(NodeKind.SPOILER_TEXT, args.at(1))


def _quote(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(NodeKind.QUOTE, args.at(1), author=args.at(2), source=args.at(3))


def _furigana(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(NodeKind.FURIGANA, args.at(1), annotation=args.at(2))


def _color(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(NodeKind.COLOR, args.at(2), color=args.at(1))


def _tooltip(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(NodeKind.TOOLTIP, args.at(1), tip=args.at(2))


def _battle_result(args: ParsedArguments, table, depth: int) -> DisplayNode:
    result = args.pick("result", 1, "Draw").lower()
    if "win" in result or "victory" in result:
        outcome = "victory"
    elif "los" in result or "defeat" in result:
        outcome = "defeat"
    else:
        outcome = "draw"
    icon, color = BATTLE_STYLES[outcome]
    image = args.pick("image", 3)
    return node(
        NodeKind.BATTLE_RESULT,
        result.upper(),
        outcome=outcome,
        score=args.pick("score", 2),
        image=resolve(image, table) if image else None,
        icon=icon,
        color=color,
    )


# -----------------------------------------------------------------------------
# Container templates
# -----------------------------------------------------------------------------

def _spoiler(args: ParsedArguments, table, depth: int) -> DisplayNode:
    return node(
        NodeKind.SPOILER,
        args.at(1) or "Spoiler Warning",
        children=_render_child(args.tail(2), table, depth),
    )


def _spoiler_list(args: ParsedArguments, table, depth: int) -> DisplayNode:
    content = args.get("content") or args.tail(2)
    return node(
        NodeKind.SPOILER_LIST,
        args.pick("title", 1, "Expand List"),
        children=_render_child(content, table, depth),
    )


def _tabber(args: ParsedArguments, table, depth: int) -> DisplayNode:
    # Walk the raw segments: repeated or case-variant titles each get a tab.
    tabs = []
    for segment in args.positional[1:]:
        title, eq, content = segment.partition("=")
        title = title.strip()
        if not eq or not title or title.isdigit():
            continue
        tabs.append(node(
            NodeKind.TAB,
            title,
            children=_render_child(content.strip(), table, depth),
        ))
    return node(NodeKind.TABBER, children=tabs, active=0)


def _frame(args: ParsedArguments, table, depth: int) -> DisplayNode:
    # Icon names match case-insensitively.
    icon = args.get("icon", "box").lower()
    return node(
        NodeKind.FRAME,
        args.pick_raw("title", 1, FRAME_ARGS),
        children=_render_child(args.pick_raw("content", 2, FRAME_ARGS), table, depth),
        icon=icon if icon in FRAME_ICONS else "box",
        border=args.get("border") or FRAME_BORDER,
    )


def _message_block(args: ParsedArguments, table, depth: int) -> DisplayNode:
    kind = (args.get("type") or "info").lower()
    if kind not in MESSAGE_STYLES:
        kind = "info"
    icon, color = MESSAGE_STYLES[kind]
    return node(
        NodeKind.MESSAGE_BLOCK,
        args.get("title") or "Notice",
        children=_render_child(args.pick_raw("text", 2, MESSAGE_ARGS), table, depth),
        type=kind,
        icon=icon,
        color=color,
    )


def _navbox(args: ParsedArguments, table, depth: int) -> DisplayNode:
    prefix = get_settings().wiki_path_prefix.rstrip("/")
    items = (args.get("list") or args.get("content")).split(",")
    links = [
        node(NodeKind.LINK, item.strip(), href=f"{prefix}/{_slugify(item)}")
        for item in items
        if item.strip()
    ]
    return node(NodeKind.NAVBOX, args.get("title") or "Navigation", children=links)


def _infobox(args: ParsedArguments, table, depth: int) -> DisplayNode:
    records = "\n".join(args.positional[1:])
    return node(NodeKind.INFOBOX, data=parse_records(records, table))


# -----------------------------------------------------------------------------
# Dispatch table
# -----------------------------------------------------------------------------

Handler = Callable[[ParsedArguments, Iterable["MediaItem"], int], DisplayNode]

TEMPLATES: dict[str, Handler] = {
    "IMG2":         _float_image,
    "SIDE1":        _float_image,
    "SIDE2":        _float_image,
    "GIF1":         _float_image,
    "GIF2":         _float_image,
    "HoverImage":   _hover_image,
    "ImageTooltip": _image_tooltip,
    "HoverText":    _hover_text,
    "Spoiler":      _spoiler,
    "SpoilerList":  _spoiler_list,
    "SpoilerText":  _spoiler_text,
    "Gallery":      _gallery,
    "Tabber":       _tabber,
    "Quote":        _quote,
    "Furigana":     _furigana,
    "Color":        _color,
    "BattleResult": _battle_result,
    "Frame":        _frame,
    "MessageBlock": _message_block,
    "Navbox":       _navbox,
    "MusicBox":     _music_box,
    "Tooltip":      _tooltip,
    "Infobox":      _infobox,
}


def missing_template(name: str, raw: str) -> DisplayNode:
    return node(NodeKind.MISSING_TEMPLATE, f"Missing Template: {name}", name=name, raw=raw)


def dispatch(
    name: str,
    args: ParsedArguments,
    table: Iterable[MediaItem],
    depth: int = 0,
) -> DisplayNode:
    """Render one template call.  Unknown names produce a placeholder node."""
    handler = TEMPLATES.get(name)
    if handler is None:
        log.debug("missing template: %r", name)
        return missing_template(name, args.raw)
    return handler(args, table, depth)


# -----------------------------------------------------------------------------
