#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoint — live preview for the editor.

POST /api/v1/render              — render content against a media table
GET  /api/v1/render/templates    — catalogue of supported templates
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter

from fanwiki.schemas import RenderRequest, RenderResponse, TemplateInfo
from fanwiki.services.renderer import RENDERER_VERSION, render_article
from fanwiki.services.serializer import to_html
from fanwiki.services.templates import TEMPLATES


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])


# name → (description, example)
_CATALOGUE: dict[str, tuple[str, str]] = {
    "IMG2":         ("Floating image; also SIDE1/SIDE2/GIF1/GIF2.", "{{IMG2|File:Name.jpg|right|300px}}"),
    "SIDE1":        ("Floating image.", "{{SIDE1|File:Name.jpg|left}}"),
    "SIDE2":        ("Floating image.", "{{SIDE2|File:Name.jpg|right}}"),
    "GIF1":         ("Floating animated image.", "{{GIF1|File:Name.gif|200px}}"),
    "GIF2":         ("Floating animated image.", "{{GIF2|File:Name.gif|center}}"),
    "HoverImage":   ("Image that swaps to a second image on hover.",
                     "{{HoverImage|File:Normal.jpg|File:DemonMode.jpg|width=300px}}"),
    "ImageTooltip": ("Text that shows an image on hover.",
                     "{{ImageTooltip|text=Fireball|image=File:FireballIcon.png}}"),
    "HoverText":    ("Text that swaps to other text on hover.", "{{HoverText|Hover me|Secret message!}}"),
    "Spoiler":      ("Collapsible block hiding its content.", "{{Spoiler|Title|Hidden text}}"),
    "SpoilerList":  ("Collapsible list.", "{{SpoilerList|title=Feats|content=\n* One\n* Two}}"),
    "SpoilerText":  ("Inline text masked until hovered.", "{{SpoilerText|He survives}}"),
    "Gallery":      ("Image grid.", "{{Gallery\n|File:A.jpg\n|File:B.jpg\n}}"),
    "Tabber":       ("Tabbed content, one tab per title=content argument.",
                     "{{Tabber\n|Base=Base form text\n|Awakened=Awakened form text\n}}"),
    "Quote":        ("Block quotation.", "{{Quote|I will not lose.|Hero|Chapter 12}}"),
    "Furigana":     ("Ruby annotation above text.", "{{Furigana|漢字|かんじ}}"),
    "Color":        ("Coloured text.", "{{Color|red|Danger}}"),
    "BattleResult": ("Win/loss banner.", "{{BattleResult|result=Victory|score=Low Diff|image=File:Battle.jpg}}"),
    "Frame":        ("Bordered container with optional icon.",
                     "{{Frame|title=Stats|content=Strength: 10|icon=shield|border=#f00}}"),
    "MessageBlock": ("Info/warning/success/error callout.",
                     "{{MessageBlock|type=warning|title=Warning|text=Unverified.}}"),
    "Navbox":       ("Navigation box of article links.", "{{Navbox|title=Group|list=Character 1, Character 2}}"),
    "MusicBox":     ("Audio player.", "{{MusicBox|Theme Song|File:Theme.mp3}}"),
    "Tooltip":      ("Text with a hover tip.", "{{Tooltip|HP|Hit points}}"),
    "Infobox":      ("Key/value sidebar; the article's leading infobox is shown beside the text.",
                     "{{Infobox\n| name = Name\n| image = File:Portrait.jpg\n}}"),
}


# -----------------------------------------------------------------------------

@router.post("", response_model=RenderResponse)
async def render_preview(data: RenderRequest):
    """Return the display tree (and optionally HTML) for a snippet of wikitext."""
    article = render_article(data.content, data.media)
    return RenderResponse(
        document=article.document,
        infobox=article.infobox,
        html=to_html(article.document) if data.html else None,
        renderer_version=RENDERER_VERSION,
    )


@router.get("/templates", response_model=list[TemplateInfo])
async def list_templates():
    return [
        TemplateInfo(name=name, description=desc, example=example)
        for name, (desc, example) in _CATALOGUE.items()
        if name in TEMPLATES
    ]


# -----------------------------------------------------------------------------
