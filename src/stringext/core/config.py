"""Configuration loader: YAML files + environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from stringext.core.models import (
    AppConfig,
    HighlightConfig,
    RepairSettings,
    ShortenConfig,
    StripOptions,
    TruncateConfig,
    YouTubeConfig,
)


def _find_project_root() -> Path:
    """Walk up from cwd to find a directory containing pyproject.toml."""
    cwd = Path.cwd()
    for p in [cwd, *cwd.parents]:
        if (p / "pyproject.toml").exists():
            return p
    return cwd


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML + environment variables.

    Priority: env vars > .env file > YAML defaults.
    """
    root = _find_project_root()
    load_dotenv(root / ".env")

    yaml_path = Path(config_path) if config_path else root / "config" / "default.yaml"
    yaml_data: dict = {}
    if yaml_path.exists():
        with open(yaml_path) as f:
            yaml_data = yaml.safe_load(f) or {}

    # Shortening defaults with env overrides
    sh_data = yaml_data.get("shorten", {})
    shorten = ShortenConfig(
        length=int(os.getenv("STRINGEXT_SHORTEN_LENGTH", sh_data.get("length", 300))),
        ellipsis=os.getenv("STRINGEXT_ELLIPSIS", sh_data.get("ellipsis", "...")),
    )

    tr_data = yaml_data.get("truncate", {})
    truncate = TruncateConfig(
        length=int(os.getenv("STRINGEXT_TRUNCATE_LENGTH", tr_data.get("length", 100))),
        suffix=tr_data.get("suffix", "..."),
    )

    strip = StripOptions(**yaml_data.get("strip", {}))

    hl_data = yaml_data.get("highlight", {})
    highlight = HighlightConfig(
        class_name=os.getenv("STRINGEXT_HIGHLIGHT_CLASS", hl_data.get("class_name", "highlight")),
    )

    yt_data = yaml_data.get("youtube", {})
    youtube = YouTubeConfig(
        embed_base=os.getenv(
            "STRINGEXT_YOUTUBE_EMBED_BASE",
            yt_data.get("embed_base", "https://www.youtube.com/embed/"),
        ),
        thumbnail_base=os.getenv(
            "STRINGEXT_YOUTUBE_THUMBNAIL_BASE",
            yt_data.get("thumbnail_base", "https://i.ytimg.com/vi"),
        ),
        width=int(yt_data.get("width", 560)),
        height=int(yt_data.get("height", 315)),
    )

    repair = RepairSettings(**yaml_data.get("repair", {}))

    return AppConfig(
        shorten=shorten,
        truncate=truncate,
        strip=strip,
        highlight=highlight,
        youtube=youtube,
        repair=repair,
    )
