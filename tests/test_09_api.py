#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the render preview API."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
from httpx import AsyncClient

import fanwiki
from fanwiki.core.config import Settings
from fanwiki.services.renderer import RENDERER_VERSION


ARTICLE = "{{Infobox\n|name=Foo\n|image=File:x.jpg\n}}\nBody '''text'''\n{{Spoiler|S|inner}}"
MEDIA = [{"filename": "x.jpg", "url": "/media/x.jpg", "kind": "image", "size_bytes": 10}]


# =============================================================================
# POST /api/v1/render
# =============================================================================

@pytest.mark.asyncio
async def test_render_returns_tree_infobox_and_html(client: AsyncClient):
    resp = await client.post("/api/v1/render", json={"content": ARTICLE, "media": MEDIA})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["renderer_version"] == RENDERER_VERSION
    assert data["infobox"] == {"name": "Foo", "image": "/media/x.jpg"}
    assert data["document"]["kind"] == "document"
    kinds = [c["kind"] for c in data["document"]["children"]]
    assert kinds == ["paragraph", "line_break", "spoiler"]
    assert "<b>text</b>" in data["html"]


@pytest.mark.asyncio
async def test_render_without_html(client: AsyncClient):
    resp = await client.post("/api/v1/render", json={"content": "hi", "html": False})
    assert resp.status_code == 200
    assert resp.json()["html"] is None


@pytest.mark.asyncio
async def test_render_empty_body_uses_defaults(client: AsyncClient):
    resp = await client.post("/api/v1/render", json={})
    assert resp.status_code == 200
    data = resp.json()
    assert data["document"]["children"] == []
    assert data["infobox"] is None


@pytest.mark.asyncio
async def test_render_unknown_template_is_not_an_error(client: AsyncClient):
    resp = await client.post("/api/v1/render", json={"content": "{{Bogus}}"})
    assert resp.status_code == 200
    [child] = resp.json()["document"]["children"]
    assert child["kind"] == "missing_template"
    assert child["text"] == "Missing Template: Bogus"


@pytest.mark.asyncio
async def test_render_rejects_bad_media_kind(client: AsyncClient):
    media = [{"filename": "a.png", "url": "/a.png", "kind": "document"}]
    resp = await client.post("/api/v1/render", json={"content": "x", "media": media})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_render_rejects_oversized_content(client: AsyncClient, monkeypatch, settings):
    monkeypatch.setattr(settings, "max_content_length", 10)
    resp = await client.post("/api/v1/render", json={"content": "x" * 11})
    assert resp.status_code == 422


# =============================================================================
# GET /api/v1/render/templates
# =============================================================================

@pytest.mark.asyncio
async def test_template_catalogue(client: AsyncClient):
    resp = await client.get("/api/v1/render/templates")
    assert resp.status_code == 200
    names = {t["name"] for t in resp.json()}
    assert {"Spoiler", "Tabber", "Navbox", "Infobox"} <= names
    assert all(t["example"].startswith("{{") for t in resp.json())


# =============================================================================
# System
# =============================================================================

@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["version"] == fanwiki.__version__


@pytest.mark.asyncio
async def test_unknown_api_route_is_json_404(client: AsyncClient):
    resp = await client.get("/api/v1/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Not found"}


def test_settings_fields():
    assert set(Settings.model_fields) == {
        "app_name", "app_version", "log_level",
        "media_placeholder_url", "wiki_path_prefix", "infobox_max_offset",
        "max_render_depth", "max_content_length", "cors_origins",
    }
