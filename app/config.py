from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens (wine club styling)
# - Centralized here so components/styles.py and the rating chart agree.
#
THEME = {
    # Backgrounds (cream)
    "bg_primary": "#F7F3EE",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",       # card surface
    # Accents (burgundy + gold)
    "accent_primary": "#7B1E3A",    # burgundy
    "accent_secondary": "#9B2D4F",  # burgundy (hover)
    "gold": "#C9A227",
    "wine_900": "#2B0A14",
    "wine_800": "#4A1226",
    # Text + borders
    "text_primary": "#1F1A17",
    "text_secondary": "rgba(31, 26, 23, 0.72)",
    "border_color": "#E8E1D9",
    "grid": "rgba(31, 26, 23, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Status colors
    "success": "#067647",
    "warning": "#F59E0B",
    "danger": "#B42318",
}

CLUB_NAME = "Bangkok Wine Club"


@dataclass(frozen=True)
class AppConfig:
    # Store connection. If unset, every read uses fallback data and every write is a no-op.
    database_url: Optional[str]

    # Admin credentials (plain strings, placeholder only)
    admin_username: str
    admin_password: str

    # Defaults
    session_ttl_hours: int
    fallback_on_empty: bool
    log_level: str

    @property
    def database_enabled(self) -> bool:
        return bool(self.database_url)

    @property
    def database_label(self) -> str:
        # Never show credentials in the UI
        if not self.database_url:
            return "not configured"
        head, _, tail = self.database_url.rpartition("@")
        if not head:
            return self.database_url
        return f"{head.split('://')[0]}://***@{tail}"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getint(name: str, default: int) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Works with plain env var injection in hosted deployments
    """
    load_dotenv(override=False)

    return AppConfig(
        database_url=_getenv("DATABASE_URL"),
        admin_username=_getenv("ADMIN_USERNAME", "admin") or "admin",
        admin_password=_getenv("ADMIN_PASSWORD", "wine2024") or "wine2024",
        session_ttl_hours=_getint("SESSION_TTL_HOURS", 24),
        fallback_on_empty=(_getenv("FALLBACK_ON_EMPTY", "true") or "true").lower() == "true",
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(cfg: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
