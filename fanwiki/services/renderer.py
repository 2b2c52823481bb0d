#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Wikitext renderer
=================
Renders article/thread/post content to a ``DisplayNode`` tree.

    content ─► strip leading {{Infobox}} ─► split_blocks()
                    │                          ├─ PlainText    ─► format_block()
                    │                          └─ TemplateCall ─► parse_args() ─► dispatch()
                    └─ extract_infobox() (side channel, see render_article())

Rendering never fails on markup: unknown templates, missing media and
unbalanced braces all degrade to visible placeholders in place.  The media
table is only read, and every call builds a fresh tree, so concurrent
renders need no locking.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from fanwiki.core.config import get_settings
from fanwiki.services.arguments import parse_args
from fanwiki.services.infobox import extract_infobox, strip_leading_infobox
from fanwiki.services.markdown import format_block
from fanwiki.services.nodes import DisplayNode, NodeKind, node
from fanwiki.services.splitter import PlainText, split_blocks
from fanwiki.services.templates import dispatch

if TYPE_CHECKING:
    from fanwiki.schemas import MediaItem

log = logging.getLogger(__name__)


# Bump this whenever the shape of the display tree changes so clients holding
# cached trees know to re-render.
RENDERER_VERSION = 1


# -----------------------------------------------------------------------------

@dataclass
class RenderedArticle:
    document: DisplayNode
    infobox: Optional[dict[str, str]] = None


# -----------------------------------------------------------------------------

def render(
    content: str,
    table: Iterable[MediaItem] = (),
    depth: int = 0,
) -> DisplayNode:
    """Render *content* to a ``DOCUMENT`` node.

    Parameters
    ----------
    content : raw markup
    table   : media items used to resolve ``File:`` references
    depth   : nesting level; container templates pass ``depth + 1`` when they
              render their own content
    """
    table = tuple(table)

    if depth > get_settings().max_render_depth:
        log.warning("render depth %d exceeds limit, emitting raw text", depth)
        return node(NodeKind.DOCUMENT, children=[
            node(NodeKind.PARAGRAPH, children=[node(NodeKind.TEXT, content)]),
        ])

    children: list[DisplayNode] = []
    for segment in split_blocks(strip_leading_infobox(content)):
        if isinstance(segment, PlainText):
            children.extend(format_block(segment.text))
        else:
            args = parse_args(segment.inner)
            children.append(dispatch(segment.name, args, table, depth))
    return node(NodeKind.DOCUMENT, children=children)


def render_article(content: str, table: Iterable[MediaItem] = ()) -> RenderedArticle:
    """Render *content* and extract its infobox for the sidebar."""
    table = tuple(table)
    return RenderedArticle(
        document=render(content, table),
        infobox=extract_infobox(content, table),
    )


# -----------------------------------------------------------------------------
