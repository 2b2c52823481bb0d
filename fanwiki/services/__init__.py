from fanwiki.services.arguments import ParsedArguments, parse_args
from fanwiki.services.infobox import extract_infobox, strip_leading_infobox
from fanwiki.services.markdown import format_block, format_inline
from fanwiki.services.media import resolve
from fanwiki.services.nodes import DisplayNode, NodeKind
from fanwiki.services.renderer import RENDERER_VERSION, RenderedArticle, render, render_article
from fanwiki.services.serializer import to_html
from fanwiki.services.splitter import PlainText, TemplateCall, split_blocks
from fanwiki.services.templates import TEMPLATES, dispatch

__all__ = [
    "ParsedArguments", "parse_args",
    "extract_infobox", "strip_leading_infobox",
    "format_block", "format_inline",
    "resolve",
    "DisplayNode", "NodeKind",
    "RENDERER_VERSION", "RenderedArticle", "render", "render_article",
    "to_html",
    "PlainText", "TemplateCall", "split_blocks",
    "TEMPLATES", "dispatch",
]
