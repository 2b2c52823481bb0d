#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Infobox extraction
==================
An article's leading ``{{Infobox ...}}`` block is a key/value metadata
sidebar rather than body content.  ``extract_infobox()`` pulls the pairs out
and ``strip_leading_infobox()`` removes the block from the main render.

The match is a plain non-greedy pattern over the whole content, not
nesting-aware: the first ``}}`` ends the block, so a nested template inside
an infobox truncates it.  The leading-block test is an offset heuristic
(``Settings.infobox_max_offset``); leading whitespace or comments can push a
real infobox past it.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable, Optional

from fanwiki.core.config import get_settings
from fanwiki.services.media import FILE_PREFIX, resolve

if TYPE_CHECKING:
    from fanwiki.schemas import MediaItem


# -----------------------------------------------------------------------------

_INFOBOX_BODY_RE  = re.compile(r"\{\{Infobox\s*\|?([\s\S]*?)\}\}", re.IGNORECASE)
_INFOBOX_BLOCK_RE = re.compile(r"\{\{Infobox[\s\S]*?\}\}", re.IGNORECASE)
_BRACKETS_RE      = re.compile(r"[\[\]]")


# -----------------------------------------------------------------------------

def parse_records(body: str, table: Iterable[MediaItem]) -> dict[str, str]:
    """Parse newline-delimited ``|key = value`` records into an ordered dict."""
    data: dict[str, str] = {}
    for line in body.split("\n"):
        record = line.strip()
        if record.startswith("|"):
            record = record[1:].strip()
        key, eq, value = record.partition("=")
        key, value = key.strip(), value.strip()
        if not eq or not key or not value:
            continue
        if key.lower() == "image" and FILE_PREFIX in value:
            value = resolve(_BRACKETS_RE.sub("", value), table)
        data[key] = value
    return data


def extract_infobox(content: str, table: Iterable[MediaItem]) -> Optional[dict[str, str]]:
    """Return the first infobox's key/value pairs, or ``None`` if there are none."""
    m = _INFOBOX_BODY_RE.search(content)
    if not m:
        return None
    return parse_records(m.group(1), table) or None


def strip_leading_infobox(content: str) -> str:
    """Remove the infobox block when it is the leading block of *content*."""
    m = _INFOBOX_BLOCK_RE.search(content)
    if m and m.start() < get_settings().infobox_max_offset:
        return (content[:m.start()] + content[m.end():]).strip()
    return content


# -----------------------------------------------------------------------------
