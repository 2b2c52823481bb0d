#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from fanwiki import __version__ as _pkg_version


# -----------------------------------------------------------------------------

MISSING_FILE_URL = "https://via.placeholder.com/300?text=File+Not+Found"


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "FanWiki"
    app_version: str = _pkg_version
    log_level: str = "INFO"

    # ── Renderer ───────────────────────────────────────────────────────────

    media_placeholder_url: str = MISSING_FILE_URL
    wiki_path_prefix: str = "/wiki"
    infobox_max_offset: int = 50        # infobox removed only if it starts before this offset
    max_render_depth: int = 32          # nested container templates beyond this render as raw text
    max_content_length: int = 1_000_000

    # ── CORS ───────────────────────────────────────────────────────────────

    cors_origins: list[str] = [
        "http://localhost:8000",
        "http://localhost:3000",
    ]


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
