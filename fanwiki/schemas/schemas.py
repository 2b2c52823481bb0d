#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for request validation and response serialisation.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from fanwiki.core.config import get_settings
from fanwiki.services.nodes import DisplayNode


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Media
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MediaItem(BaseModel):
    """One uploaded file, as seen by the renderer (filename → url)."""

    filename: str = Field(..., min_length=1, max_length=512)
    url: str = Field(..., min_length=1)
    kind: Literal["image", "video", "audio"] = "image"
    size_bytes: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @field_validator("filename")
    @classmethod
    def filename_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("filename must not be blank")
        return v


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Render
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RenderRequest(BaseModel):
    content: str = Field(default="")
    media: list[MediaItem] = Field(default_factory=list)
    html: bool = True

    @field_validator("content")
    @classmethod
    def content_within_limit(cls, v: str) -> str:
        limit = get_settings().max_content_length
        if len(v) > limit:
            raise ValueError(f"content exceeds maximum length of {limit} characters")
        return v


# -----------------------------------------------------------------------------

class RenderResponse(BaseModel):
    document: DisplayNode
    infobox: Optional[dict[str, str]] = None
    html: Optional[str] = None
    renderer_version: int


# -----------------------------------------------------------------------------

class TemplateInfo(BaseModel):
    name: str
    description: str
    example: str
