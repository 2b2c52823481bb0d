#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Display tree
============
The renderer's output: a tree of ``DisplayNode`` values.  A node declares
its *kind* and *data* only; styling and interaction (hover, tab clicks,
disclosure toggles) belong to whoever presents the tree.

Container nodes (spoilers, frames, tabs, message blocks) hold the result of
a recursive render of a substring of the parent's input, so the structure is
always a strict tree.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator

from pydantic import BaseModel, Field


# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    DOCUMENT         = "document"

    # Block formatter
    HEADING          = "heading"
    RULE             = "rule"
    LIST_ITEM        = "list_item"
    LINE_BREAK       = "line_break"
    PARAGRAPH        = "paragraph"

    # Inline spans
    TEXT             = "text"
    BOLD             = "bold"
    ITALIC           = "italic"

    # Templates
    FLOAT_IMAGE      = "float_image"
    HOVER_IMAGE      = "hover_image"
    IMAGE_TOOLTIP    = "image_tooltip"
    HOVER_TEXT       = "hover_text"
    SPOILER          = "spoiler"
    SPOILER_LIST     = "spoiler_list"
    SPOILER_TEXT     = "spoiler_text"
    GALLERY          = "gallery"
    IMAGE            = "image"
    TABBER           = "tabber"
    TAB              = "tab"
    QUOTE            = "quote"
    FURIGANA         = "furigana"
    COLOR            = "color"
    BATTLE_RESULT    = "battle_result"
    FRAME            = "frame"
    MESSAGE_BLOCK    = "message_block"
    NAVBOX           = "navbox"
    LINK             = "link"
    MUSIC_BOX        = "music_box"
    TOOLTIP          = "tooltip"
    INFOBOX          = "infobox"
    MISSING_TEMPLATE = "missing_template"


# -----------------------------------------------------------------------------

class DisplayNode(BaseModel):
    kind: NodeKind
    text: str = ""
    attrs: dict[str, Any] = Field(default_factory=dict)
    children: list[DisplayNode] = Field(default_factory=list)

    def walk(self) -> Iterator[DisplayNode]:
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, kind: NodeKind) -> list[DisplayNode]:
        return [n for n in self.walk() if n.kind == kind]

    def plain_text(self) -> str:
        """Concatenated text of the node and its descendants."""
        return self.text + "".join(c.plain_text() for c in self.children)


DisplayNode.model_rebuild()


# -----------------------------------------------------------------------------

def node(kind: NodeKind, text: str = "", children: list[DisplayNode] | None = None,
         **attrs: Any) -> DisplayNode:
    """Shorthand constructor used throughout the renderer."""
    return DisplayNode(kind=kind, text=text, attrs=attrs, children=children or [])


# -----------------------------------------------------------------------------
