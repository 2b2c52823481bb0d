#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for FanWiki tests.
The renderer is pure, so no external services are needed.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from fanwiki.core.config import get_settings
from fanwiki.main import create_app
from fanwiki.schemas import MediaItem


# -----------------------------------------------------------------------------

MEDIA = [
    MediaItem(filename="x.jpg", url="/media/x.jpg", kind="image", size_bytes=1024),
    MediaItem(filename="Normal.jpg", url="/media/normal.jpg"),
    MediaItem(filename="DemonMode.jpg", url="/media/demon.jpg"),
    MediaItem(filename="FireballIcon.png", url="/media/fireball.png"),
    MediaItem(filename="Battle.jpg", url="/media/battle.jpg"),
    MediaItem(filename="Theme.mp3", url="/media/theme.mp3", kind="audio", size_bytes=4096),
]


# -----------------------------------------------------------------------------

@pytest.fixture
def media() -> list[MediaItem]:
    return list(MEDIA)


@pytest.fixture
def settings():
    """The cached settings object; use with monkeypatch to change a value."""
    return get_settings()


@pytest_asyncio.fixture(scope="function")
async def client():
    """HTTP test client wired to a fresh app instance."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
