#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Line-oriented formatter for the plain-text segments between templates.

    === H3 ===   /  == H2 ==
    ----                      horizontal rule
    * item                    list item
    '''bold'''  /  ''italic''
    (blank line)              line break
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

from fanwiki.services.nodes import DisplayNode, NodeKind, node


# -----------------------------------------------------------------------------

# Longest run first so "=== x ===" is never read as level 2 with stray '='.
# Like rules and list items, headings must start at column 0.
_HEADING_RE = re.compile(r"^(===|==)(?!=)(.+?)(?<!=)\1$")

BOLD   = "'''"
ITALIC = "''"


# -----------------------------------------------------------------------------

def _split_pairs(text: str, delim: str) -> list[tuple[str, bool]]:
    """Split on *delim*; odd pieces are marked.  An unpaired delimiter is kept as text."""
    pieces = text.split(delim)
    tail = None
    if len(pieces) % 2 == 0:
        tail = delim + pieces.pop()
    out = [(piece, i % 2 == 1) for i, piece in enumerate(pieces)]
    if tail is not None:
        out.append((tail, False))
    return out


def format_inline(text: str) -> list[DisplayNode]:
    spans: list[DisplayNode] = []
    for piece, bold in _split_pairs(text, BOLD):
        if bold:
            if piece:
                spans.append(node(NodeKind.BOLD, piece))
            continue
        for sub, italic in _split_pairs(piece, ITALIC):
            if sub:
                spans.append(node(NodeKind.ITALIC if italic else NodeKind.TEXT, sub))

    # Merge neighbouring plain runs left behind by unpaired delimiters
    merged: list[DisplayNode] = []
    for span in spans:
        if merged and span.kind == NodeKind.TEXT and merged[-1].kind == NodeKind.TEXT:
            merged[-1].text += span.text
        else:
            merged.append(span)
    return merged


# -----------------------------------------------------------------------------

def format_line(line: str) -> DisplayNode:
    if not line.strip():
        return node(NodeKind.LINE_BREAK)

    m = _HEADING_RE.match(line)
    if m:
        return node(NodeKind.HEADING, m.group(2).strip(), level=len(m.group(1)))

    if line.startswith("----"):
        return node(NodeKind.RULE)

    if line.startswith("* "):
        return node(NodeKind.LIST_ITEM, children=format_inline(line[2:]))

    return node(NodeKind.PARAGRAPH, children=format_inline(line))


def format_block(text: str) -> list[DisplayNode]:
    """Format a plain-text segment, one display node per line."""
    return [format_line(line.rstrip("\r")) for line in text.split("\n")]


# -----------------------------------------------------------------------------
