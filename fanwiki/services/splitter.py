#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Template block splitter.

Partitions content into alternating plain-text and ``{{template}}`` segments.
Only doubled braces count as delimiters; a lone ``{`` or ``}`` is text.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class TemplateCall:
    text: str      # includes the outer {{ }}

    @property
    def inner(self) -> str:
        return self.text[2:-2]

    @property
    def name(self) -> str:
        return template_name(self.inner)


ContentSegment = Union[PlainText, TemplateCall]


# -----------------------------------------------------------------------------

def template_name(inner: str) -> str:
    """Name of a call from its inner text: up to the first pipe or newline."""
    head = inner.split("|", 1)[0].strip()
    return head.split("\n", 1)[0].strip()


# -----------------------------------------------------------------------------

def split_blocks(content: str) -> list[ContentSegment]:
    """Split *content* into ``PlainText`` and ``TemplateCall`` segments.

    Joining the ``text`` of the returned segments gives back *content*
    unchanged.  An unclosed call at the end of the input is returned as
    plain text.
    """
    segments: list[ContentSegment] = []
    buf: list[str] = []
    depth = 0
    i = 0
    n = len(content)

    while i < n:
        pair = content[i:i + 2]
        if pair == "{{":
            if depth == 0 and buf:
                segments.append(PlainText("".join(buf)))
                buf = []
            depth += 1
            buf.append(pair)
            i += 2
        elif pair == "}}" and depth:
            buf.append(pair)
            depth -= 1
            i += 2
            if depth == 0:
                segments.append(TemplateCall("".join(buf)))
                buf = []
        else:
            buf.append(content[i])
            i += 1

    if buf:
        segments.append(PlainText("".join(buf)))
    return segments


# -----------------------------------------------------------------------------
