#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Media resolver — maps a ``File:`` reference to a URL using the media table
supplied with each render call.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Iterable, Optional

from fanwiki.core.config import get_settings

if TYPE_CHECKING:
    from fanwiki.schemas import MediaItem

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

_BRACKETS_RE = re.compile(r"[\[\]]")
FILE_PREFIX  = "File:"


# -----------------------------------------------------------------------------

def clean_filename(ref: str) -> str:
    """Strip ``[[ ]]`` wrapping and the ``File:`` label from *ref*."""
    name = _BRACKETS_RE.sub("", ref).strip()
    if name.startswith(FILE_PREFIX):
        name = name[len(FILE_PREFIX):]
    return name.strip()


def resolve(
    ref: str,
    table: Iterable[MediaItem],
    placeholder: Optional[str] = None,
) -> str:
    """Return the URL for *ref*.

    Empty references resolve to ``""`` and full URLs pass through verbatim.
    A name that is not in *table* resolves to the placeholder image rather
    than failing, so a broken reference still leaves a readable page.
    """
    if not ref:
        return ""
    if ref.startswith("http"):
        return ref

    name = clean_filename(ref)
    for item in table:
        if item.filename == name:
            return item.url

    log.debug("media miss: %r", name)
    return placeholder or get_settings().media_placeholder_url


# -----------------------------------------------------------------------------
