from fanwiki.schemas.schemas import (
    MediaItem,
    RenderRequest, RenderResponse,
    TemplateInfo,
)

__all__ = [
    "MediaItem",
    "RenderRequest", "RenderResponse",
    "TemplateInfo",
]
